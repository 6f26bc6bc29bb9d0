"""
Block tags: classification, body extraction and else splitting.

Supported blocks:
- {{#each expr}} ... {{/each}}
- {{#if expr}} ... {{else}} ... {{/if}}

Nesting is tracked with plain depth counters. Unbalanced closers never
push the counter below zero, and an unmatched opener takes the rest of
the source as its body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from .scanner import find_next_tag

logger = logging.getLogger(__name__)

BlockKind = Literal["each", "if"]

EACH_PREFIX = "#each "
IF_PREFIX = "#if "
ELSE_TAG = "else"


@dataclass(frozen=True)
class Block:
    """Opening block tag split into its kind and expression."""
    kind: BlockKind
    expression: str


def parse_block_tag(tag: str) -> Optional[Block]:
    """
    Classify tag text as an opening block.

    Args:
        tag: Trimmed tag text

    Returns:
        Block for '#each expr' / '#if expr' with a non-empty expression, else None
    """
    if tag.startswith(EACH_PREFIX):
        expression = tag[len(EACH_PREFIX):].strip()
        return Block(kind="each", expression=expression) if expression else None
    if tag.startswith(IF_PREFIX):
        expression = tag[len(IF_PREFIX):].strip()
        return Block(kind="if", expression=expression) if expression else None
    return None


def is_opening_block(tag: str) -> bool:
    return tag.startswith(EACH_PREFIX) or tag.startswith(IF_PREFIX)


def is_closing_block(tag: str) -> bool:
    return tag == "/each" or tag == "/if"


def is_structural_tag(tag: str) -> bool:
    """Markers that are never substituted as values: 'else' and any closer."""
    return tag == ELSE_TAG or tag.startswith("/")


def extract_block(source: str, from_index: int, kind: BlockKind) -> Tuple[str, int]:
    """
    Capture the body between an opening block tag and its matching closer.

    Args:
        source: Template text
        from_index: Offset just past the opening tag
        kind: Kind of the opened block

    Returns:
        Tuple (body, resume offset past the closing tag)
    """
    depth = 1
    position = from_index
    closer = f"/{kind}"

    while position < len(source):
        tag_info = find_next_tag(source, position)
        if tag_info is None:
            break

        if is_opening_block(tag_info.tag):
            depth += 1
        elif tag_info.tag == closer:
            depth = max(0, depth - 1)
            if depth == 0:
                return source[from_index:tag_info.open], tag_info.end
        elif is_closing_block(tag_info.tag):
            depth = max(0, depth - 1)

        position = tag_info.end

    logger.debug("Unclosed '#%s' block at offset %d takes the rest of the template", kind, from_index)
    return source[from_index:], len(source)


def split_else_segment(source: str) -> Tuple[str, str]:
    """
    Split an '#if' body at its top-level 'else'.

    Returns:
        Tuple (truthy part, falsy part); the falsy part is empty without 'else'
    """
    depth = 0
    position = 0

    while position < len(source):
        tag_info = find_next_tag(source, position)
        if tag_info is None:
            break

        if is_opening_block(tag_info.tag):
            depth += 1
        elif is_closing_block(tag_info.tag):
            depth = max(0, depth - 1)
        elif tag_info.tag == ELSE_TAG and depth == 0:
            return source[:tag_info.open], source[tag_info.end:]

        position = tag_info.end

    return source, ""


__all__ = [
    "Block",
    "BlockKind",
    "parse_block_tag",
    "is_opening_block",
    "is_closing_block",
    "is_structural_tag",
    "extract_block",
    "split_else_segment",
]
