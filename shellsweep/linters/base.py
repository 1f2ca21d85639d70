"""Base class and result types for linters."""

import subprocess
import sys
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

from shellsweep.errors import ToolNotFoundError
from shellsweep.utils.logging import logger
from shellsweep.utils.toolbox import Toolbox


@dataclass(frozen=True)
class LintResult:
    """Outcome of one linter invocation on one file."""

    path: Path
    returncode: int
    output: str | None = None  # Only set when output was captured

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class DispatchReport:
    """Ordered results of a dispatch run."""

    results: list[LintResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> list[LintResult]:
        return [r for r in self.results if not r.ok]

    @property
    def last_returncode(self) -> int:
        """Exit code of the last invocation, 0 if nothing ran."""
        if not self.results:
            return 0
        return self.results[-1].returncode


class BaseLinter(ABC):
    """Runs one external tool per file, synchronously."""

    def __init__(self, toolbox: Toolbox, root: Path):
        self.toolbox = toolbox
        self.root = Path(root)

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used in logs."""

    @abstractmethod
    def build_command(self, file: Path) -> list[str]:
        """Command line that lints a single file."""

    def run(self, file: Path) -> LintResult:
        """Lint one file with the tool's output inherited by this process."""
        cmd = self.build_command(file)
        logger.debug(f"[{self.name}] Running: {cmd}")

        # Our own buffered output must land before the child's
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            completed = subprocess.run(cmd, check=False)
        except FileNotFoundError as e:
            raise ToolNotFoundError(self.name, str(e)) from e

        logger.debug(f"[{self.name}] {file} exited with {completed.returncode}")
        return LintResult(path=file, returncode=completed.returncode)

    def start(self, file: Path, sink: IO) -> subprocess.Popen:
        """Start linting one file in the background.

        Output goes to `sink`, a real file (not a pipe) so a chatty tool
        can never block on a full pipe buffer while nobody reads it.
        """
        cmd = self.build_command(file)
        logger.debug(f"[{self.name}] Starting in background: {cmd}")

        try:
            return subprocess.Popen(cmd, stdout=sink, stderr=subprocess.STDOUT)
        except FileNotFoundError as e:
            raise ToolNotFoundError(self.name, str(e)) from e

    def run_captured(self, file: Path, on_start: Callable[[subprocess.Popen], None]) -> LintResult:
        """Lint one file in the background, handing the child to on_start.

        on_start typically spins until the child exits. The captured output
        is returned on the result instead of being printed.
        """
        with tempfile.TemporaryFile(mode="w+b") as sink:
            proc = self.start(file, sink)
            try:
                on_start(proc)
            finally:
                returncode = proc.wait()
            sink.seek(0)
            output = sink.read().decode("utf-8", errors="replace")

        logger.debug(f"[{self.name}] {file} exited with {returncode}")
        return LintResult(path=file, returncode=returncode, output=output)
