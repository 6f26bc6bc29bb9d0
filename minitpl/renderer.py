"""
Renderer for minitpl templates.

Walks the template with a single cursor, emits literal text, substitutes
simple tags and expands '#each' / '#if' blocks by recursing into their
bodies. The template is reparsed on every call; nothing is cached.
"""

from __future__ import annotations

import logging
from typing import Any, List

from .blocks import extract_block, is_structural_tag, parse_block_tag, split_else_segment
from .escape import escape_html
from .resolver import create_child_context, is_truthy, resolve_value, to_display_string
from .scanner import OPEN, Tag, find_next_tag

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """
    Recursive renderer over a template string.

    Holds no state between calls, so one instance can serve any number of
    independent render calls.
    """

    def render(self, source: str, context: Any) -> str:
        """
        Render the template against the context.

        Args:
            source: Template text
            context: Data the expressions are resolved against

        Returns:
            Rendered text. Malformed templates degrade instead of raising.
        """
        output: List[str] = []
        index = 0

        while index < len(source):
            next_tag = find_next_tag(source, index)
            if next_tag is None:
                if OPEN in source[index:]:
                    logger.debug("Unterminated tag after offset %d rendered as text", index)
                output.append(source[index:])
                break

            # A preceding backslash outputs the tag literally
            if next_tag.open > 0 and source[next_tag.open - 1] == "\\":
                output.append(source[index:next_tag.open - 1])
                output.append(source[next_tag.open:next_tag.end])
                index = next_tag.end
                continue

            output.append(source[index:next_tag.open])
            index = next_tag.end

            block = parse_block_tag(next_tag.tag)
            if block is not None:
                body, end = extract_block(source, index, block.kind)
                if block.kind == "each":
                    output.append(self._render_each(block.expression, body, context))
                else:
                    output.append(self._render_if(block.expression, body, context))
                index = end
                continue

            # Orphaned 'else' and closers produce no output
            if is_structural_tag(next_tag.tag):
                continue

            output.append(self._render_simple(next_tag, context))

        return "".join(output)

    def _render_each(self, expression: str, body: str, context: Any) -> str:
        items = resolve_value(context, expression)
        if not isinstance(items, (list, tuple)):
            logger.debug("'#each %s' skipped: value is %s, not a sequence", expression, type(items).__name__)
            return ""

        return "".join(
            self.render(body, create_child_context(context, item, item_index))
            for item_index, item in enumerate(items)
        )

    def _render_if(self, expression: str, body: str, context: Any) -> str:
        truthy_part, falsy_part = split_else_segment(body)
        guard = resolve_value(context, expression)
        return self.render(truthy_part if is_truthy(guard) else falsy_part, context)

    def _render_simple(self, tag_info: Tag, context: Any) -> str:
        value = resolve_value(context, tag_info.tag)
        if value is None:
            return ""
        text = to_display_string(value)
        return text if tag_info.is_triple else escape_html(text)


_renderer = TemplateRenderer()


def render(template: str, context: Any = None) -> str:
    """
    Render a template string against a context.

    Args:
        template: Template text with {{ }} / {{{ }}} tags
        context: Mapping of values; None renders every expression as absent

    Returns:
        Rendered text
    """
    return _renderer.render(template, context)


def template(template_str: Any, data: Any = None) -> str:
    """Render any value coerced to a string, with an empty mapping as default data."""
    return _renderer.render(str(template_str), {} if data is None else data)


__all__ = [
    "TemplateRenderer",
    "render",
    "template",
]
