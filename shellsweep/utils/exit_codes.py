"""Centralized exit codes for the shellsweep CLI."""


class ExitCodes:
    """Standard exit codes for shellsweep.

    Without --summary the CLI exits with whatever the last shellcheck
    invocation returned, so these only cover the cases shellsweep decides.
    """

    SUCCESS = 0

    LINT_FAILED = 1

    TOOL_MISSING = 127

    # Added to the signal number when a child is killed, as sh reports it
    SIGNAL_BASE = 128

    @classmethod
    def from_returncode(cls, returncode: int) -> int:
        """Map a subprocess returncode to the status a shell would report.

        subprocess reports death by signal N as -N; sh reports 128 + N.
        """
        if returncode < 0:
            return cls.SIGNAL_BASE - returncode
        return returncode
