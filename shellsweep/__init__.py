"""shellsweep - find bash scripts in a tree and run shellcheck on each."""

__version__ = "1.0.0"
