"""Markdown renderer pipeline package.

Exposes the structured token types, the render rule table with the site's
three overrides, and the mistune renderer that dispatches through it.
"""

from .renderer import DocsRenderer, create_markdown
from .rules import (
    DOCS_RULES,
    RenderRule,
    RenderRuleTable,
    code_inline_rule,
    docs_rule_table,
    external_link_rule,
    image_rule,
)
from .tokens import (
    CODE_INLINE,
    IMAGE,
    LINK,
    TOKEN_KINDS,
    CodeInlineToken,
    ImageToken,
    LinkToken,
)

__all__ = [
    "CODE_INLINE",
    "DOCS_RULES",
    "IMAGE",
    "LINK",
    "TOKEN_KINDS",
    "CodeInlineToken",
    "DocsRenderer",
    "ImageToken",
    "LinkToken",
    "RenderRule",
    "RenderRuleTable",
    "code_inline_rule",
    "create_markdown",
    "docs_rule_table",
    "external_link_rule",
    "image_rule",
]
