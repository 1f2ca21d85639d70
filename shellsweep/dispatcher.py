"""Lint dispatcher - runs the linter once per candidate file, in order."""

import sys
from collections.abc import Iterable
from pathlib import Path

from shellsweep.linters.base import BaseLinter, DispatchReport, LintResult
from shellsweep.spinner import DELAY, FRAMES, WIDTH, spin_process
from shellsweep.ui import print_header
from shellsweep.utils.logging import logger


class LintDispatcher:
    """Sequential, best-effort lint loop.

    A failing file never stops the batch, and nothing is aggregated beyond
    the report handed back to the caller. A missing tool is the only thing
    that aborts the run (ToolNotFoundError propagates from the linter).
    """

    def __init__(
        self,
        linter: BaseLinter,
        use_spinner: bool = False,
        spinner_frames: str = FRAMES,
        spinner_delay: float = DELAY,
        spinner_width: int = WIDTH,
    ):
        self.linter = linter
        self.use_spinner = use_spinner
        self.spinner_frames = spinner_frames
        self.spinner_delay = spinner_delay
        self.spinner_width = spinner_width

    def lint_one(self, path: Path) -> LintResult:
        """Print the header for path and lint it."""
        print_header(str(path))

        if not self.use_spinner:
            return self.linter.run(path)

        result = self.linter.run_captured(
            path,
            on_start=lambda proc: spin_process(
                proc,
                f"{self.linter.name} {path}",
                frames=self.spinner_frames,
                delay=self.spinner_delay,
                width=self.spinner_width,
            ),
        )
        # Finish the spinner line, then replay what the tool said
        sys.stdout.write("\n")
        if result.output:
            sys.stdout.write(result.output)
        sys.stdout.flush()
        return result

    def dispatch(self, candidates: Iterable) -> DispatchReport:
        """Lint every candidate in the order received.

        Args:
            candidates: CandidateFile objects or plain paths

        Returns:
            DispatchReport with one LintResult per processed file
        """
        report = DispatchReport()

        for candidate in candidates:
            path = getattr(candidate, "path", candidate)
            result = self.lint_one(Path(path))
            if not result.ok:
                logger.info(f"[{self.linter.name}] {path} exited with {result.returncode}")
            report.results.append(result)

        logger.info(
            f"[{self.linter.name}] Processed {report.total} files, "
            f"{len(report.failed)} with non-zero exit"
        )
        return report
