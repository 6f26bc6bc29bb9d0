"""
Tag scanner for minitpl templates.

Locates delimiter-bound tags in the template source:
- {{ expr }}   narrow form, value is HTML-escaped
- {{{ expr }}} wide form, value is substituted as is
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

OPEN = "{{"
CLOSE = "}}"
OPEN_RAW = "{{{"
CLOSE_RAW = "}}}"


@dataclass(frozen=True)
class Tag:
    """
    One delimiter occurrence in the source.

    Produced by the scanner and consumed within a single scan step.
    """
    open: int        # Offset of the opening delimiter
    close: int       # Offset of the closing delimiter
    close_len: int   # Width of the closing delimiter (2 or 3)
    is_triple: bool  # Wide (raw) form
    tag: str         # Trimmed text between delimiters

    @property
    def end(self) -> int:
        """Offset just past the closing delimiter."""
        return self.close + self.close_len


def find_next_tag(source: str, from_index: int) -> Optional[Tag]:
    """
    Find the next tag at or after from_index.

    Args:
        source: Template text
        from_index: Offset to start searching from

    Returns:
        Tag or None if there is no opening delimiter, or the opening
        delimiter has no closing delimiter of the same width after it
    """
    open_pos = source.find(OPEN, from_index)
    if open_pos < 0:
        return None

    is_triple = source.startswith(OPEN_RAW, open_pos)
    open_len = 3 if is_triple else 2
    close_token = CLOSE_RAW if is_triple else CLOSE

    close_pos = source.find(close_token, open_pos + open_len)
    if close_pos < 0:
        return None

    return Tag(
        open=open_pos,
        close=close_pos,
        close_len=len(close_token),
        is_triple=is_triple,
        tag=source[open_pos + open_len:close_pos].strip(),
    )


def iter_tags(source: str) -> Iterator[Tag]:
    """Yield consecutive tags of the source from its beginning."""
    position = 0
    while position < len(source):
        tag = find_next_tag(source, position)
        if tag is None:
            return
        yield tag
        position = tag.end


__all__ = [
    "Tag",
    "find_next_tag",
    "iter_tags",
]
