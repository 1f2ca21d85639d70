"""shellsweep utilities package."""

from .error_handler import ToolMissing, handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger
from .toolbox import Toolbox

__all__ = [
    "ExitCodes",
    "Toolbox",
    "ToolMissing",
    "handle_exceptions",
    "logger",
]
