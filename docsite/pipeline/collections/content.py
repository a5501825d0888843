"""Content item model and the read-only collection view used by sorters.

A ``ContentItem`` is one content file after front matter has been split off.
``CollectionApi`` is what collection factories receive: a view over all items
that can filter by category tag.

Examples
--------
>>> from pathlib import Path
>>> item = ContentItem(
...     url="/guides/intro/",
...     data={"pageNumber": 1, "tags": ["guides"]},
...     tags=frozenset({"guides"}),
...     input_path=Path("guides/intro.md"),
...     output_path=Path("build/guides/intro/index.html"),
... )
>>> CollectionApi([item]).get_filtered_by_tag("guides") == [item]
True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable


@dataclass(eq=False)
class ContentItem:
    """One content file of the site.

    Attributes
    ----------
    url : str
        Site path of the rendered page, e.g. ``/guides/intro/``.
    data : dict[str, Any]
        Front matter mapping (``pageNumber``, ``pageTitle``, ``tags``, ...).
    tags : frozenset[str]
        Category tags the item belongs to.
    input_path : Path
        Source file path.
    output_path : Path
        Destination file path.
    body : str
        Raw markdown or template text after the front matter.
    template_format : str
        ``"md"`` or ``"html"``.
    content : str
        Rendered HTML, filled in once by the builder.
    """

    url: str
    data: dict[str, Any]
    tags: frozenset[str]
    input_path: Path
    output_path: Path
    body: str = ""
    template_format: str = "md"
    content: str = field(default="", repr=False)

    @property
    def input_path_posix(self) -> str:
        return self.input_path.as_posix()


def normalize_tags(raw: Any) -> frozenset[str]:
    """Return the tag set for a front-matter ``tags`` value.

    A single string is one tag; a list contributes each non-empty entry.
    """
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        return frozenset({raw}) if raw else frozenset()
    return frozenset(str(tag) for tag in raw if tag)


class CollectionApi:
    """Read-only view over all content items, in input-path order."""

    def __init__(self, items: Iterable[ContentItem]) -> None:
        self._items = list(items)

    def get_all(self) -> list[ContentItem]:
        return list(self._items)

    def get_all_sorted(self) -> list[ContentItem]:
        return sorted(self._items, key=lambda item: item.input_path_posix)

    def get_filtered_by_tag(self, tag: str) -> list[ContentItem]:
        """Return items carrying ``tag``, sorted by input path."""
        return [item for item in self.get_all_sorted() if tag in item.tags]

    def tags(self) -> list[str]:
        return sorted({tag for item in self._items for tag in item.tags})
