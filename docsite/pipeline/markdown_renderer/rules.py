"""Render rule table and the site's three markdown rendering overrides.

A rule has the signature ``rule(token, default) -> str``. ``default`` is the
renderer that was in place for the token kind before the rule was set: an
earlier override, or the built-in default renderer when there is none. Rules
either delegate to it after adjusting the token (inline code, links) or
replace the output entirely (images).

Examples
--------
>>> table = RenderRuleTable()
>>> table.render(CODE_INLINE, CodeInlineToken(text="x"))
'<code>x</code>'
>>> table.set(CODE_INLINE, code_inline_rule)
>>> table.render(CODE_INLINE, CodeInlineToken(text="x"))
'<code class="language-markup">x</code>'
"""

from __future__ import annotations

import re
from typing import Callable, Union

import mistune

from docsite.config import (
    EXTERNAL_LINK_PATTERN,
    EXTERNAL_LINK_REL,
    EXTERNAL_LINK_TARGET,
    FIGURE_TEMPLATE,
    INLINE_CODE_CLASS,
)
from docsite.exceptions import ConfigurationError, MarkdownRenderError

from .tokens import (
    CODE_INLINE,
    IMAGE,
    LINK,
    TOKEN_KINDS,
    CodeInlineToken,
    ImageToken,
    LinkToken,
)

Token = Union[CodeInlineToken, ImageToken, LinkToken]
TokenRenderer = Callable[[Token], str]
RenderRule = Callable[[Token, TokenRenderer], str]

_EXTERNAL_LINK = re.compile(EXTERNAL_LINK_PATTERN)


def default_code_inline(token: CodeInlineToken) -> str:
    return f"<code{token.render_attrs()}>{mistune.escape(token.text)}</code>"


def default_image(token: ImageToken) -> str:
    return f"<img{token.render_attrs()} />"


def default_link(token: LinkToken) -> str:
    return f"<a{token.render_attrs()}>{token.text_html}</a>"


DEFAULT_RENDERERS: dict[str, TokenRenderer] = {
    CODE_INLINE: default_code_inline,  # type: ignore[dict-item]
    IMAGE: default_image,  # type: ignore[dict-item]
    LINK: default_link,  # type: ignore[dict-item]
}


class RenderRuleTable:
    """Per-kind chain of render rules, falling back to the default renderers."""

    def __init__(self) -> None:
        self._renderers: dict[str, TokenRenderer] = dict(DEFAULT_RENDERERS)
        self._overridden: set[str] = set()

    @staticmethod
    def _check_kind(kind: str) -> None:
        if kind not in TOKEN_KINDS:
            raise ConfigurationError(
                "Unknown markdown token kind",
                context={"kind": kind, "known": list(TOKEN_KINDS)},
            )

    def set(self, kind: str, rule: RenderRule) -> None:
        """Install ``rule`` for ``kind`` on top of whatever renders it now."""
        self._check_kind(kind)
        previous = self._renderers[kind]

        def render(token: Token) -> str:
            return rule(token, previous)

        self._renderers[kind] = render
        self._overridden.add(kind)

    def is_overridden(self, kind: str) -> bool:
        return kind in self._overridden

    def render(self, kind: str, token: Token) -> str:
        self._check_kind(kind)
        return self._renderers[kind](token)


def code_inline_rule(token: CodeInlineToken, default: TokenRenderer) -> str:
    """Mark inline code with the site's language class, then delegate."""
    token.push_attr("class", INLINE_CODE_CLASS)
    return default(token)


def image_rule(token: ImageToken, default: TokenRenderer) -> str:
    """Render an image as a captioned figure; ``default`` is never used.

    Raises
    ------
    MarkdownRenderError
        If the image has no alt text to use as description and caption.
    """
    if not token.description:
        raise MarkdownRenderError(
            "Image has no description", context={"src": token.src}
        )
    return FIGURE_TEMPLATE.format(
        src=mistune.escape(token.src, quote=True),
        description=mistune.escape(token.description, quote=True),
    )


def external_link_rule(token: LinkToken, default: TokenRenderer) -> str:
    """Open external (``http``/``https``) links in a new tab, then delegate."""
    if _EXTERNAL_LINK.match(token.href) is not None:
        token.push_attr("target", EXTERNAL_LINK_TARGET)
        token.push_attr("rel", EXTERNAL_LINK_REL)
    return default(token)


DOCS_RULES: dict[str, RenderRule] = {
    IMAGE: image_rule,  # type: ignore[dict-item]
    LINK: external_link_rule,  # type: ignore[dict-item]
    CODE_INLINE: code_inline_rule,  # type: ignore[dict-item]
}


def docs_rule_table() -> RenderRuleTable:
    """Return a fresh table with the three documentation-site overrides installed."""
    table = RenderRuleTable()
    for kind, rule in DOCS_RULES.items():
        table.set(kind, rule)
    return table
