"""Central UI handler for propsguard.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from propsguard.pipeline.ui import console, print_header, print_error

    console.print("[success]No findings[/success]")
"""

import sys

from rich.console import Console
from rich.theme import Theme

PROPSGUARD_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "rule": "magenta",
    "dim": "dim white",
})

console = Console(
    theme=PROPSGUARD_THEME,
    force_terminal=sys.stdout.isatty(),
    highlight=False,
    soft_wrap=True,
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")


def print_error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[error]ERROR:[/error] {msg}")


def print_warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[warning]WARNING:[/warning] {msg}")


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {msg}")
