"""
minitpl: a tiny Handlebars-inspired template engine.

Substitutes {{ expr }} (escaped) and {{{ expr }}} (raw) tags and expands
{{#each}} / {{#if}} ... {{else}} ... blocks against a data context.
"""

from .escape import escape_html
from .renderer import TemplateRenderer, render, template

__all__ = [
    # Main entry points
    "render",
    "template",

    # Building blocks
    "TemplateRenderer",
    "escape_html",
]
