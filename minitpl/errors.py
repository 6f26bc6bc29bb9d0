"""
Base exception for user-facing errors.

All expected errors of the command line layer that should be displayed
to the user as clean messages (without stack traces) inherit from
MiniTemplateUserError. The rendering engine itself never raises on
template content.

Programming errors and bugs should NOT inherit from MiniTemplateUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class MiniTemplateUserError(Exception):
    """
    Base class for all user-facing errors in minitpl.

    These errors indicate problems that the user can fix:
    missing or malformed data files, invalid overrides, etc.
    """
    pass


@dataclass
class ContextFileError(MiniTemplateUserError):
    """Context data file cannot be used."""
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Cannot load context from {self.path}: {self.reason}"


@dataclass
class OverrideFormatError(MiniTemplateUserError):
    """Malformed --set argument."""
    arg: str

    def __str__(self) -> str:
        return f"Invalid override '{self.arg}'. Expected 'key.path=value'"


__all__ = ["MiniTemplateUserError", "ContextFileError", "OverrideFormatError"]
