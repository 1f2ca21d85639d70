"""Terminal spinner for long-running background jobs.

Not wired into the default lint loop, which runs in the foreground. The CLI
only uses it with --spinner.
"""

import os
import subprocess
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from shellsweep.config_runtime import DEFAULTS

FRAMES = DEFAULTS["spinner"]["frames"]
DELAY = DEFAULTS["spinner"]["delay"]
WIDTH = DEFAULTS["spinner"]["width"]


@dataclass
class SpinnerState:
    """Everything the spinner loop needs; passed explicitly, never global."""

    pid: int
    message: str
    index: int = 0
    frames: str = FRAMES
    delay: float = DELAY
    width: int = WIDTH

    @property
    def glyph(self) -> str:
        return self.frames[self.index % len(self.frames)]

    def render(self) -> str:
        """Carriage return, message right-aligned in `width` columns, glyph."""
        return f"\r{self.message:>{self.width}} {self.glyph}"

    def advance(self) -> None:
        self.index = (self.index + 1) % len(self.frames)


def pid_alive(pid: int) -> bool:
    """Signal-0 liveness check, the equivalent of `kill -0 pid`."""
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        # Exists but belongs to someone else
        return True
    return True


def spin(
    state: SpinnerState,
    is_alive: Callable[[], bool] | None = None,
    stream: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Redraw the spinner until the monitored process exits.

    There is no timeout and no cancellation: a process that never exits
    keeps the spinner going forever. No newline is written; the caller
    moves the cursor on when it is done.

    Args:
        state: Spinner state (pid, message, frame index)
        is_alive: Liveness probe; defaults to pid_alive(state.pid)
        stream: Output stream (default: sys.stdout at call time)
        sleep: Sleep function, injectable for tests

    Returns:
        Number of frames drawn
    """
    if is_alive is None:
        def is_alive() -> bool:
            return pid_alive(state.pid)
    out = stream if stream is not None else sys.stdout

    drawn = 0
    while is_alive():
        out.write(state.render())
        out.flush()
        state.advance()
        drawn += 1
        sleep(state.delay)
    return drawn


def spin_process(
    proc: subprocess.Popen,
    message: str,
    stream: TextIO | None = None,
    frames: str = FRAMES,
    delay: float = DELAY,
    width: int = WIDTH,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Spin while a Popen child runs.

    poll() reaps the child, so a finished child is never mistaken for alive
    the way a zombie would be under a bare signal-0 check.

    Returns:
        Number of frames drawn
    """
    state = SpinnerState(pid=proc.pid, message=message, frames=frames, delay=delay, width=width)
    return spin(state, is_alive=lambda: proc.poll() is None, stream=stream, sleep=sleep)
