"""shellsweep CLI - main entry point."""

import platform
import subprocess
import sys

import click
from rich.markup import escape

from shellsweep import __version__
from shellsweep.config_runtime import load_runtime_config
from shellsweep.dispatcher import LintDispatcher
from shellsweep.linters import SEVERITIES, ShellcheckLinter
from shellsweep.selector import ShellScriptSelector
from shellsweep.ui import console, print_summary_table, print_warning
from shellsweep.utils.error_handler import handle_exceptions
from shellsweep.utils.exit_codes import ExitCodes
from shellsweep.utils.logging import logger
from shellsweep.utils.toolbox import Toolbox

if platform.system() == "Windows":
    subprocess.run(["cmd", "/c", "chcp", "65001"], shell=False, capture_output=True, timeout=1)


def show_plan(selector: ShellScriptSelector, linter: ShellcheckLinter) -> None:
    """List what would be linted without running anything."""
    console.print("Lint Plan:")
    console.print(f"  Root: {escape(str(selector.root_path))}")
    console.print(f"  Command: {linter.describe_command()}")
    console.print(f"  Shebang: {escape(selector.shebang)}")
    console.print("  Excludes:")
    for pattern in selector.exclude_patterns:
        console.print(f"    - {escape(pattern)}")

    console.print("  Files:")
    count = 0
    for candidate in selector.walk():
        console.print(f"    - {escape(str(candidate.path))}")
        count += 1
    if not count:
        console.print("    (none)")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="shellsweep")
@click.option("--root", default=".", show_default=True, help="Directory tree to scan")
@click.option(
    "--severity",
    type=click.Choice(SEVERITIES),
    default=None,
    help="Minimum shellcheck severity [default: warning]",
)
@click.option("--print-plan", is_flag=True, help="List files that would be linted and exit")
@click.option(
    "--summary",
    is_flag=True,
    help="Print a per-file table and exit 1 if any file had issues",
)
@click.option(
    "--spinner",
    is_flag=True,
    help="Run each shellcheck in the background behind a spinner",
)
@handle_exceptions
def cli(root, severity, print_plan, summary, spinner):
    """Run shellcheck on every bash script under a directory.

    \b
    A file is linted when its first line is exactly
      #!/usr/bin/env bash
    and its path is not under .git/ or vim/submodules/ and is not
    bash/bash_exports.

    \b
    Without --summary the exit status is that of the last shellcheck run.
    """
    config = load_runtime_config(root)

    if severity is None:
        severity = config["lint"]["severity"]

    selector = ShellScriptSelector(
        root,
        exclude_patterns=config["scan"]["excludes"],
        shebang=config["scan"]["shebang"],
    )
    linter = ShellcheckLinter(
        Toolbox(root),
        selector.root_path,
        severity=severity,
        tool=config["lint"]["tool"],
    )

    if print_plan:
        show_plan(selector, linter)
        return

    dispatcher = LintDispatcher(
        linter,
        use_spinner=spinner,
        spinner_frames=config["spinner"]["frames"],
        spinner_delay=config["spinner"]["delay"],
        spinner_width=config["spinner"]["width"],
    )
    report = dispatcher.dispatch(selector.walk())
    logger.debug(f"Selector stats: {selector.stats}")

    if summary:
        if report.total:
            print_summary_table(report.results)
        else:
            print_warning("No bash scripts found")
        sys.exit(ExitCodes.LINT_FAILED if report.failed else ExitCodes.SUCCESS)

    sys.exit(ExitCodes.from_returncode(report.last_returncode))


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
