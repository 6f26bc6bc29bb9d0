"""
Frontmatter parser for template files.

A template file may start with a YAML block delimited by '---' lines.
Its mapping provides default context values and is not rendered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

_yaml = YAML(typ="safe")

# Pattern for YAML frontmatter: starts with ---, ends with ---
_FRONTMATTER_PATTERN = re.compile(
    r'^---\s*\n(.*?)\n---\s*\n?',
    re.DOTALL
)


@dataclass
class TemplateFrontmatter:
    """
    Parsed frontmatter of a template file.
    """
    data: Dict[str, Any] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.data


def parse_frontmatter(text: str) -> Tuple[Optional[TemplateFrontmatter], str]:
    """
    Parse YAML frontmatter from template file text.

    Args:
        text: Full text of the template file

    Returns:
        Tuple of (frontmatter, remaining_text):
        - frontmatter: Parsed TemplateFrontmatter or None if no frontmatter
        - remaining_text: Text with frontmatter removed

    Examples:
        >>> fm, text = parse_frontmatter("---\\ntitle: Colors\\n---\\n<h1>{{title}}</h1>")
        >>> fm.data
        {'title': 'Colors'}
        >>> text
        '<h1>{{title}}</h1>'
    """
    if not text.startswith('---'):
        return None, text

    match = _FRONTMATTER_PATTERN.match(text)
    if not match:
        # Starts with --- but no closing ---, treat as no frontmatter
        return None, text

    yaml_content = match.group(1)
    remaining_text = text[match.end():]

    try:
        data = _yaml.load(yaml_content)
    except YAMLError:
        # Not YAML after all, keep the text untouched
        return None, text

    if data is None:
        return TemplateFrontmatter(), remaining_text
    if not isinstance(data, dict):
        return None, text

    return TemplateFrontmatter(data=dict(data)), remaining_text


__all__ = [
    "TemplateFrontmatter",
    "parse_frontmatter",
]
