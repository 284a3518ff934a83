"""List registered rules with their metadata and configured severity."""

import click
from rich.table import Table

from propsguard.config import load_config
from propsguard.pipeline.ui import console, print_header
from propsguard.rules import RULES
from propsguard.utils.error_handler import handle_exceptions


@click.command("rules")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="pyproject.toml to read [tool.propsguard] from (default: nearest one)",
)
@handle_exceptions
def rules_command(config_path):
    """Show every rule, whether it is fixable, and its effective severity."""
    config = load_config(config_path)

    print_header("RULES")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Rule", style="rule", no_wrap=True, min_width=24)
    table.add_column("Type")
    table.add_column("Fixable")
    table.add_column("Severity")
    table.add_column("Description", overflow="fold")

    for name, (metadata, _) in sorted(RULES.items()):
        severity = config.severity_for(name).value
        table.add_row(
            name,
            metadata.rule_type,
            metadata.fixable or "-",
            f"[{severity}]{severity}[/{severity}]" if severity != "off" else "[dim]off[/dim]",
            metadata.description,
        )

    console.print(table)
    if config.source:
        console.print(f"[dim]config: {config.source}[/dim]")
