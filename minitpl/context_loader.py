"""
Loading render contexts for the command line.

Context files are YAML or JSON mappings. Several files are merged
shallowly in order; 'key.path=value' overrides are applied last.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ContextFileError, OverrideFormatError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def load_context_file(path: Path) -> Dict[str, Any]:
    """
    Load one context file.

    Args:
        path: YAML or JSON file with a top-level mapping

    Returns:
        Context mapping (empty for an empty file)

    Raises:
        ContextFileError: File is missing, unreadable, malformed or not a mapping
    """
    if not path.is_file():
        raise ContextFileError(path, "file not found")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContextFileError(path, str(e))

    try:
        data = _yaml.load(text)
    except YAMLError as e:
        raise ContextFileError(path, f"invalid YAML/JSON: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ContextFileError(path, f"top-level value must be a mapping, got {type(data).__name__}")

    logger.debug("Loaded %d context keys from %s", len(data), path)
    return dict(data)


def parse_override(arg: str) -> tuple[list[str], Any]:
    """
    Parse a 'key.path=value' override.

    The value is read as a YAML scalar, so 'true', '3' and 'null' keep
    their types; an empty value stays an empty string.
    """
    key, sep, raw_value = arg.partition("=")
    key = key.strip()
    if not sep or not key or any(not part for part in key.split(".")):
        raise OverrideFormatError(arg)

    if not raw_value.strip():
        return key.split("."), ""
    try:
        value = _yaml.load(raw_value)
    except YAMLError:
        value = raw_value
    return key.split("."), value


def apply_override(context: Dict[str, Any], path: list[str], value: Any) -> None:
    """
    Set a nested key.

    Mappings along the path are copied before being written to; non-mapping
    intermediates are replaced with new mappings.
    """
    current = context
    for segment in path[:-1]:
        nested = current.get(segment)
        nested = dict(nested) if isinstance(nested, dict) else {}
        current[segment] = nested
        current = nested
    current[path[-1]] = value


def build_context(
    defaults: Mapping[str, Any],
    data_files: Iterable[Path],
    overrides: Iterable[str],
) -> Dict[str, Any]:
    """
    Assemble the render context.

    Args:
        defaults: Values from the template frontmatter
        data_files: Context files, later files win
        overrides: 'key.path=value' strings, applied in order

    Returns:
        Merged context
    """
    context: Dict[str, Any] = dict(defaults)
    for path in data_files:
        context.update(load_context_file(path))
    for arg in overrides:
        key_path, value = parse_override(arg)
        apply_override(context, key_path, value)
    return context


__all__ = [
    "load_context_file",
    "parse_override",
    "apply_override",
    "build_context",
]
