"""
Shared helpers for minitpl tests.
"""

from .file_utils import write

__all__ = ["write"]
