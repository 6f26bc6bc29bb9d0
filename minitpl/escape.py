"""
HTML escaping for narrow-delimiter substitutions.
"""

from __future__ import annotations

import re

# Handlebars-compatible entity set
_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "`": "&#x60;",
    "=": "&#x3D;",
}

_UNSAFE_PATTERN = re.compile(r"[&<>\"'`=]")


def escape_html(value: str) -> str:
    """
    Replace unsafe characters with entity references in a single pass.

    Args:
        value: Stringified value of a simple tag

    Returns:
        Escaped text
    """
    return _UNSAFE_PATTERN.sub(lambda m: _HTML_ENTITIES[m.group(0)], value)


__all__ = ["escape_html"]
