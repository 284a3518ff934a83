"""propsguard CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click

from propsguard import __version__


@click.group()
@click.version_option(version=__version__, prog_name="propsguard")
@click.help_option("-h", "--help")
def cli():
    """propsguard - keep component props destructuring out of parameter lists

    \b
    QUICK START:
      propsguard check src/           # Report findings
      propsguard check src/ --fix     # Rewrite files in place
      propsguard rules                # List rules and their severity

    \b
    For detailed options: propsguard <command> --help"""
    pass


from propsguard.commands.check import check
from propsguard.commands.rules import rules_command

cli.add_command(check)
cli.add_command(rules_command)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
