"""
Expression resolution against a render context.

Expressions are dotted paths ('user.name'). Two reserved names are bound
inside '#each' iterations:
- this    the current item
- @index  zero-based position of the current item

Resolution never raises: a missing key or a None along the path yields None.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, Optional, Set

THIS_KEY = "this"
INDEX_KEY = "@index"

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, bytes, int, float, bool)


def resolve_value(context: Any, path: str) -> Any:
    """
    Resolve a dotted path against the context.

    Args:
        context: Mapping (or any object) to resolve against
        path: Expression such as 'title', 'user.name', 'this', '@index'

    Returns:
        Resolved value or None when absent
    """
    if not path:
        return None
    if path == THIS_KEY or path == INDEX_KEY:
        return context.get(path) if isinstance(context, Mapping) else None

    current = context
    for segment in path.split("."):
        if current is None:
            return None
        current = _step(current, segment)

    return current


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment)
    if isinstance(current, (list, tuple)):
        if segment.isdecimal() and int(segment) < len(current):
            return current[int(segment)]
        return None
    if isinstance(current, _SCALAR_TYPES) or segment.startswith("_"):
        return None
    try:
        return getattr(current, segment, None)
    except Exception as e:
        logger.debug("Property '%s' of %s treated as absent: %s", segment, type(current).__name__, e)
        return None


def is_truthy(value: Any) -> bool:
    """
    Truthiness of an '#if' guard.

    None, False, zero, NaN and the empty string are falsy; everything else,
    empty lists and mappings included, is truthy.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def create_child_context(parent: Any, item: Any, index: int) -> Dict[str, Any]:
    """
    Build the scope of one '#each' iteration.

    Parent keys come first, the item's own keys (for mapping items) shadow
    them, and the reserved 'this' / '@index' keys always win.
    """
    child: Dict[str, Any] = dict(parent) if isinstance(parent, Mapping) else {}
    if isinstance(item, Mapping):
        child.update(item)
    child[THIS_KEY] = item
    child[INDEX_KEY] = index
    return child


def to_display_string(value: Any, _seen: Optional[Set[int]] = None) -> str:
    """
    Convert a resolved value to the text substituted into the output.

    A sequence nested inside itself renders as an empty element; a value
    that cannot be stringified renders as an empty string.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_to_string(value)
    if isinstance(value, (list, tuple)):
        seen = set() if _seen is None else _seen
        if id(value) in seen:
            return ""
        seen.add(id(value))
        try:
            return ",".join("" if v is None else to_display_string(v, seen) for v in value)
        finally:
            seen.discard(id(value))
    try:
        return str(value)
    except Exception as e:
        logger.debug("Value of type %s rendered as empty: %s", type(value).__name__, e)
        return ""


def _float_to_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


__all__ = [
    "THIS_KEY",
    "INDEX_KEY",
    "resolve_value",
    "is_truthy",
    "create_child_context",
    "to_display_string",
]
