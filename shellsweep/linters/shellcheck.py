"""shellcheck linter implementation.

shellcheck is a static analysis tool for shell scripts. It identifies common
bugs and pitfalls in Bash/sh scripts. Its diagnostics are passed through
verbatim; nothing here parses them.
"""

from pathlib import Path

from shellsweep.config_runtime import SEVERITIES
from shellsweep.linters.base import BaseLinter
from shellsweep.utils.toolbox import Toolbox


class ShellcheckLinter(BaseLinter):
    """shellcheck linter for bash files.

    The binary is resolved lazily on the first invocation, so a scan that
    finds no scripts never requires shellcheck to be installed.
    """

    def __init__(
        self,
        toolbox: Toolbox,
        root: Path,
        severity: str = "warning",
        tool: str = "shellcheck",
    ):
        super().__init__(toolbox, root)
        if severity not in SEVERITIES:
            raise ValueError(
                f"Unknown shellcheck severity '{severity}', expected one of {', '.join(SEVERITIES)}"
            )
        self.severity = severity
        self.tool = tool
        self._binary: str | None = None

    @property
    def name(self) -> str:
        return "shellcheck"

    @property
    def binary(self) -> str:
        """Resolved shellcheck path.

        Raises:
            ToolNotFoundError: If shellcheck is not on PATH
        """
        if self._binary is None:
            self._binary = self.toolbox.get_shellcheck(self.tool, required=True)
        return self._binary

    def build_command(self, file: Path) -> list[str]:
        # Same argument order as the historical script: file first, then -S
        return [self.binary, str(file), "-S", self.severity]

    def describe_command(self) -> str:
        """Command template for plan output; does not resolve the binary."""
        return f"{self.tool} <file> -S {self.severity}"
