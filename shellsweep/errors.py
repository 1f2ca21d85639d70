"""Exceptions raised by shellsweep."""


class ShellsweepError(Exception):
    """Base class for shellsweep errors."""


class ToolNotFoundError(ShellsweepError, FileNotFoundError):
    """The external lint tool could not be resolved or executed."""

    def __init__(self, tool: str, detail: str = ""):
        self.tool = tool
        message = f"{tool} not found in system PATH"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
