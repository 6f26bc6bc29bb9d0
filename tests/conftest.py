"""
Shared fixtures for minitpl tests.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def palette_ctx() -> dict:
    """Nested context shaped like a small color palette."""
    return {
        "title": "Palette",
        "groups": [
            {"name": "warm", "show": True, "colors": ["red", "orange"]},
            {"name": "cool", "show": False, "colors": ["blue"]},
        ],
    }
