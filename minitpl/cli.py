from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .blocks import is_structural_tag, parse_block_tag
from .context_loader import build_context
from .errors import MiniTemplateUserError
from .frontmatter import parse_frontmatter
from .jsonic import dumps as jdumps
from .renderer import render
from .scanner import iter_tags
from .types import RenderOptions
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="minitpl",
        description="Tiny Handlebars-style template renderer",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_render = sub.add_parser("render", help="Render a template to stdout or a file")
    sp_render.add_argument("template", help="template file, or - for stdin")
    sp_render.add_argument(
        "-d", "--data",
        action="append",
        metavar="FILE",
        help="YAML/JSON context file (can be given several times, later files win)",
    )
    sp_render.add_argument(
        "--set",
        action="append",
        metavar="KEY=VALUE",
        dest="overrides",
        help="override a context value, e.g. --set page.title=Colors",
    )
    sp_render.add_argument("-o", "--output", metavar="FILE", help="write the result to FILE")
    sp_render.add_argument(
        "--no-frontmatter",
        action="store_true",
        help="render a leading '---' block as text instead of reading defaults from it",
    )

    sp_tags = sub.add_parser("tags", help="List the tags of a template (JSON)")
    sp_tags.add_argument("template", help="template file, or - for stdin")

    return p


def _opts(ns: argparse.Namespace) -> RenderOptions:
    output = getattr(ns, "output", None)
    return RenderOptions(
        template=ns.template,
        data_files=[Path(d) for d in (getattr(ns, "data", None) or [])],
        overrides=list(getattr(ns, "overrides", None) or []),
        output=Path(output) if output else None,
        use_frontmatter=not getattr(ns, "no_frontmatter", False),
    )


def _read_template(source: str) -> str:
    """
    Read template text.

    Supports '-' for stdin; anything else is a file path.
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise MiniTemplateUserError(f"Template file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MiniTemplateUserError(f"Failed to read template {path}: {e}")


def run_render(options: RenderOptions) -> str:
    text = _read_template(options.template)

    defaults: Dict[str, Any] = {}
    if options.use_frontmatter:
        frontmatter, text = parse_frontmatter(text)
        if frontmatter is not None:
            defaults = frontmatter.data

    context = build_context(defaults, options.data_files, options.overrides)
    return render(text, context)


def describe_tags(text: str) -> List[Dict[str, Any]]:
    """Tag listing for the 'tags' command."""
    result = []
    for tag_info in iter_tags(text):
        block = parse_block_tag(tag_info.tag)
        if block is not None:
            kind = block.kind
        elif is_structural_tag(tag_info.tag):
            kind = "marker"
        else:
            kind = "raw" if tag_info.is_triple else "escaped"
        result.append({
            "open": tag_info.open,
            "end": tag_info.end,
            "kind": kind,
            "text": tag_info.tag,
            "expression": block.expression if block is not None else None,
        })
    return result


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if ns.cmd == "render":
            options = _opts(ns)
            doc_text = run_render(options)
            if options.output is not None:
                options.output.parent.mkdir(parents=True, exist_ok=True)
                options.output.write_text(doc_text, encoding="utf-8")
            else:
                sys.stdout.write(doc_text)
            return 0

        if ns.cmd == "tags":
            sys.stdout.write(jdumps({"tags": describe_tags(_read_template(ns.template))}))
            return 0

    except MiniTemplateUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
