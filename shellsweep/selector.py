"""File selection - finds bash scripts to lint.

This module contains the ShellScriptSelector class for directory traversal
with path exclusion and shebang filtering.
"""

import fnmatch
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from shellsweep.config_runtime import DEFAULTS

DEFAULT_EXCLUDES: tuple[str, ...] = tuple(DEFAULTS["scan"]["excludes"])
DEFAULT_SHEBANG: str = DEFAULTS["scan"]["shebang"]


@dataclass(frozen=True)
class CandidateFile:
    """A file that survived exclusion filtering and shebang matching."""

    path: Path
    first_line: str

    def __str__(self) -> str:
        return str(self.path)


def read_first_line(file_path: Path, limit: int) -> bytes | None:
    """Read at most `limit` bytes of the first line of a file.

    Args:
        file_path: Path to the file
        limit: Maximum number of bytes to read

    Returns:
        The raw first line without its line terminator, or None for an empty file

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(file_path, "rb") as f:
        line = f.readline(limit)

    if not line:
        return None
    # Strip \n and \r\n endings only; trailing spaces are significant
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


def is_excluded(display_path: str, patterns: Iterable[str]) -> bool:
    """Check a "./"-prefixed POSIX path against the exclusion globs."""
    return any(fnmatch.fnmatchcase(display_path, pattern) for pattern in patterns)


class ShellScriptSelector:
    """Walks a directory tree and yields bash scripts eligible for linting.

    Unreadable files and directories are skipped silently: this is a
    best-effort scan, not a verified inventory. Skips are only visible
    through the stats counters.
    """

    def __init__(
        self,
        root_path: str | Path = ".",
        exclude_patterns: Iterable[str] | None = None,
        shebang: str = DEFAULT_SHEBANG,
    ):
        """Initialize the selector.

        Args:
            root_path: Root directory to walk
            exclude_patterns: fnmatch globs matched against "./<relative path>"
            shebang: Exact first line a candidate must carry

        Raises:
            ValueError: If root_path doesn't exist or isn't a directory
        """
        self.root_path = Path(root_path)

        if not self.root_path.exists():
            raise ValueError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise ValueError(f"Root path is not a directory: {self.root_path}")

        self.exclude_patterns = tuple(
            DEFAULT_EXCLUDES if exclude_patterns is None else exclude_patterns
        )
        self.shebang = shebang
        self._marker = shebang.encode("utf-8")

        self.stats = {
            "total_files": 0,
            "excluded": 0,
            "unreadable": 0,
            "no_marker": 0,
            "candidates": 0,
            "skipped_dirs": 0,
        }

    def _display_path(self, file: Path) -> str:
        """Path as find(1) would print it when run from root: ./a/b.sh"""
        return "./" + file.relative_to(self.root_path).as_posix()

    def _prunes(self, dir_display: str) -> bool:
        """A directory can be skipped only if a trailing-* glob matches "dir/"."""
        return any(
            pattern.endswith("*") and fnmatch.fnmatchcase(dir_display, pattern)
            for pattern in self.exclude_patterns
        )

    def matches_marker(self, file: Path) -> tuple[bool, str]:
        """Check whether line one of file is exactly the shebang marker.

        Only len(marker) + 2 bytes are read, enough to see a CRLF ending.

        Raises:
            OSError: If the file cannot be read
        """
        first = read_first_line(file, len(self._marker) + 2)
        if first is None:
            return False, ""
        return first == self._marker, first.decode("utf-8", errors="replace")

    def process_file(self, file: Path) -> CandidateFile | None:
        """Process a single file and return it if it is a candidate.

        Args:
            file: Path to the file to process

        Returns:
            CandidateFile or None if file should be skipped
        """
        if is_excluded(self._display_path(file), self.exclude_patterns):
            self.stats["excluded"] += 1
            return None

        try:
            # find -type f semantics: symlinks are never candidates
            if file.is_symlink() or not file.is_file():
                self.stats["unreadable"] += 1
                return None
            matched, first_line = self.matches_marker(file)
        except OSError:
            # Permission denied, vanished file, FIFO trouble: not a candidate
            self.stats["unreadable"] += 1
            return None

        if not matched:
            self.stats["no_marker"] += 1
            return None

        self.stats["candidates"] += 1
        return CandidateFile(path=file, first_line=first_line)

    def walk(self) -> Iterator[CandidateFile]:
        """Lazily yield candidate files under the root.

        Re-invoke to scan again; a generator cannot be restarted mid-walk.
        Entries are visited in sorted order so an unchanged tree yields the
        same sequence every time.
        """
        for dirpath, dirnames, filenames in os.walk(self.root_path, followlinks=False):
            current = Path(dirpath)

            # Prune directories whose whole subtree is excluded (*/.git/*)
            kept = []
            for d in sorted(dirnames):
                if self._prunes(self._display_path(current / d) + "/"):
                    self.stats["skipped_dirs"] += 1
                else:
                    kept.append(d)
            dirnames[:] = kept

            for filename in sorted(filenames):
                self.stats["total_files"] += 1
                candidate = self.process_file(current / filename)
                if candidate:
                    yield candidate

    __iter__ = walk
