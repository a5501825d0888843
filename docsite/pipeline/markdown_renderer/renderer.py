"""Mistune HTML renderer that dispatches inline code, images and links through a rule table.

``DocsRenderer`` turns mistune's token dictionaries for the three customisable
kinds into structured tokens and renders them with an injected
:class:`~docsite.pipeline.markdown_renderer.rules.RenderRuleTable`. Every other
token kind renders exactly as :class:`mistune.HTMLRenderer` would.

Examples
--------
>>> md = create_markdown()
>>> md("Use `x`.")
'<p>Use <code class="language-markup">x</code>.</p>\\n'
"""

from __future__ import annotations

import html
from typing import Any

import mistune

from .rules import RenderRuleTable, docs_rule_table
from .tokens import CODE_INLINE, IMAGE, LINK, CodeInlineToken, ImageToken, LinkToken

MARKDOWN_PLUGINS: list[str] = ["table", "strikethrough", "url"]


def _plain_text(token: dict[str, Any]) -> str:
    if "raw" in token:
        return str(token["raw"])
    return "".join(_plain_text(child) for child in token.get("children", ()))


class DocsRenderer(mistune.HTMLRenderer):
    """HTML renderer whose inline code, image and link output comes from ``rule_table``.

    Parameters
    ----------
    rule_table : RenderRuleTable
        Rules to dispatch the customisable token kinds through.
    escape : bool, optional
        Escape raw HTML found in the markdown. Defaults to ``False`` so pages
        may embed markup.
    """

    def __init__(self, rule_table: RenderRuleTable, escape: bool = False) -> None:
        super().__init__(escape=escape)
        self.rule_table = rule_table

    def _checked_url(self, url: str) -> str:
        # safe_url swaps harmful protocols for a placeholder and escapes the
        # rest; tokens hold raw values and escape once when rendered.
        return html.unescape(self.safe_url(url))

    def render_token(self, token: dict[str, Any], state: Any) -> str:
        kind = token["type"]
        if kind == CODE_INLINE:
            return self.rule_table.render(
                CODE_INLINE, CodeInlineToken(text=token.get("raw", ""))
            )
        if kind == IMAGE:
            return self.rule_table.render(IMAGE, self._image_token(token))
        if kind == LINK:
            return self.rule_table.render(LINK, self._link_token(token, state))
        return super().render_token(token, state)

    def _image_token(self, token: dict[str, Any]) -> ImageToken:
        attrs = token.get("attrs") or {}
        children = token.get("children") or []
        description = _plain_text(children[0]) if children else ""
        image = ImageToken(description=description or None)
        image.push_attr("src", self._checked_url(attrs.get("url", "")))
        image.push_attr("alt", _plain_text({"children": children}))
        if attrs.get("title"):
            image.push_attr("title", attrs["title"])
        return image

    def _link_token(self, token: dict[str, Any], state: Any) -> LinkToken:
        attrs = token.get("attrs") or {}
        link = LinkToken(
            text_html=self.render_tokens(token.get("children") or [], state)
        )
        link.push_attr("href", self._checked_url(attrs.get("url", "")))
        if attrs.get("title"):
            link.push_attr("title", attrs["title"])
        return link


def create_markdown(rule_table: RenderRuleTable | None = None) -> mistune.Markdown:
    """Build the site's markdown converter.

    Parameters
    ----------
    rule_table : RenderRuleTable | None, optional
        Rules for inline code, images and links. When ``None`` a table with the
        documentation-site overrides is used.

    Returns
    -------
    mistune.Markdown
        Callable converting markdown text to HTML.
    """
    table = rule_table if rule_table is not None else docs_rule_table()
    return mistune.create_markdown(
        renderer=DocsRenderer(table), plugins=list(MARKDOWN_PLUGINS)
    )
