"""Central UI handler for shellsweep.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every module.

Usage:
    from shellsweep.ui import console, print_header, print_warning

    print_header("./deploy.sh")
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

SHELLSWEEP_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own.
# highlight=False keeps paths and numbers from being re-colored, and
# emoji=False keeps :name: sequences in file names literal.
console = Console(
    theme=SHELLSWEEP_THEME,
    force_terminal=sys.stdout.isatty(),
    highlight=False,
    emoji=False,
    soft_wrap=True,
)


def print_header(path: str) -> None:
    """Print the per-file header that precedes each shellcheck run."""
    console.print(f"Processing {path}", markup=False)


def print_warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[warning]WARNING:[/warning] {escape(msg)}")


def print_summary_table(results) -> None:
    """Print a per-file table of shellcheck exit codes.

    Args:
        results: Iterable of LintResult
    """
    table = Table(title="shellcheck summary", show_lines=False)
    table.add_column("File", style="path")
    table.add_column("Exit", justify="right")
    table.add_column("Status")

    for result in results:
        status = "[success]clean[/success]" if result.ok else "[error]issues[/error]"
        table.add_row(escape(str(result.path)), str(result.returncode), status)

    console.print(table)
