"""Tool path resolution for external linters.

Single source of truth for locating the lint binary, so the dispatcher and
the plan printer agree on what will be executed.
"""

import platform
import shutil
from pathlib import Path

from shellsweep.errors import ToolNotFoundError

IS_WINDOWS = platform.system() == "Windows"


class Toolbox:
    """Resolves external tool binaries on the system PATH."""

    def __init__(self, project_root: Path):
        """Initialize with project root directory.

        Args:
            project_root: Directory being scanned

        Raises:
            ValueError: If project_root doesn't exist or isn't a directory
        """
        self.root = Path(project_root).resolve()

        if not self.root.exists():
            raise ValueError(f"Project root does not exist: {self.root}")
        if not self.root.is_dir():
            raise ValueError(f"Project root is not a directory: {self.root}")

    def get_shellcheck(self, name: str = "shellcheck", required: bool = True) -> str | None:
        """Get path to the shellcheck binary.

        Args:
            name: Binary name or explicit path (from the lint.tool setting)
            required: If True, raise ToolNotFoundError when missing

        Returns:
            Path to binary, or None if not required and not found

        Raises:
            ToolNotFoundError: If required=True and binary not found
        """
        explicit = Path(name)
        if explicit.parent != Path(".") and explicit.is_file():
            return str(explicit)

        candidate = f"{name}.exe" if IS_WINDOWS and not name.endswith(".exe") else name
        system_bin = shutil.which(candidate) or shutil.which(name)
        if system_bin:
            return system_bin

        if required:
            raise ToolNotFoundError(name)

        return None
