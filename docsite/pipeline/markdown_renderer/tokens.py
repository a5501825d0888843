"""Structured token types for the overridable markdown render rules.

Each token kind the site customises has its own type instead of a generic
node inspected by attribute-list lookups. Attributes are kept as an ordered
list of ``(name, value)`` pairs so rules can append to them, and rendered in
that order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import mistune

CODE_INLINE = "codespan"
IMAGE = "image"
LINK = "link"

TOKEN_KINDS: tuple[str, ...] = (CODE_INLINE, IMAGE, LINK)

Attr = tuple[str, str]


@dataclass
class _AttrToken:
    attrs: list[Attr] = field(default_factory=list)

    def push_attr(self, name: str, value: str) -> None:
        self.attrs.append((name, value))

    def get_attr(self, name: str) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def render_attrs(self) -> str:
        """Render attributes as ``' name="value"'`` pairs, values escaped."""
        return "".join(
            f' {name}="{mistune.escape(value, quote=True)}"' for name, value in self.attrs
        )


@dataclass
class CodeInlineToken(_AttrToken):
    """Inline code span; ``text`` is the raw, unescaped code."""

    text: str = ""


@dataclass
class ImageToken(_AttrToken):
    """Image; ``description`` is the raw text of the first alt-text child."""

    description: str | None = None

    @property
    def src(self) -> str:
        return self.get_attr("src") or ""

    @property
    def title(self) -> str | None:
        return self.get_attr("title")


@dataclass
class LinkToken(_AttrToken):
    """Whole anchor; ``text_html`` is the already rendered link text."""

    text_html: str = ""

    @property
    def href(self) -> str:
        return self.get_attr("href") or ""

    @property
    def title(self) -> str | None:
        return self.get_attr("title")
