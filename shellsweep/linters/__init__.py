"""Linters package - sequential per-file linter execution.

This package provides:
- BaseLinter: ABC for implementing linters
- LintResult / DispatchReport: typed results of linter runs
- ShellcheckLinter: shellcheck on bash scripts
"""

from .base import BaseLinter, DispatchReport, LintResult
from .shellcheck import SEVERITIES, ShellcheckLinter

__all__ = [
    "BaseLinter",
    "DispatchReport",
    "LintResult",
    "SEVERITIES",
    "ShellcheckLinter",
]
