"""Template helper functions exposed to the site's Jinja2 templates.

All helpers are pure: equality predicates, navigation class selection, string
slugification, URI component encoding and neighbour lookups over a sorted
article collection. They are registered under their template-facing names by
:func:`docsite.site_config.configure_site`.

Examples
--------
>>> idify("Hello World!")
'hello-world'
>>> main_menu_active_class("/guides", "/guides/intro")
'active fw-bold'
"""

from __future__ import annotations

import logging
import re
from typing import Any, Sequence
from urllib.parse import quote

from docsite.config import ACTIVE_MENU_CLASS

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves unescaped besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"
# ASCII word characters only, as in the browser regex the ids must match.
_NON_ID_CHARS = re.compile(r"[^\w-]", re.ASCII)


def _same_kind(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool)
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return True
    return type(a) is type(b)


def eq(a: Any, b: Any) -> bool:
    """Strict equality: values of different kinds never compare equal.

    Booleans are not numbers here, while ints and floats share one kind.

    Examples
    --------
    >>> eq(1, 1.0), eq(1, True), eq("1", 1)
    (True, False, False)
    """
    return _same_kind(a, b) and a == b


def neq(a: Any, b: Any) -> bool:
    return not eq(a, b)


def main_menu_active_class(link_href: str, page_url: str) -> str:
    """Return the active-menu css classes for a navigation link.

    The root link is active only on the root page; any other link is active
    when the current page lives under it.

    Parameters
    ----------
    link_href : str
        Href of the navigation link.
    page_url : str
        Url of the page being rendered.

    Returns
    -------
    str
        ``ACTIVE_MENU_CLASS`` when active, otherwise an empty string.

    Examples
    --------
    >>> main_menu_active_class("/", "/")
    'active fw-bold'
    >>> main_menu_active_class("/", "/guides/")
    ''
    >>> main_menu_active_class("/guides", "/other")
    ''
    """
    if link_href == "/" and page_url == "/":
        return ACTIVE_MENU_CLASS
    if link_href != "/" and page_url.startswith(link_href):
        return ACTIVE_MENU_CLASS
    return ""


def return_value_conditional(
    is_true: Any, true_value: str, false_value: str | None = None
) -> str:
    """Pick ``true_value`` or ``false_value`` (default ``""``) by truthiness."""
    return true_value if is_true else (false_value or "")


def idify(text: str) -> str:
    """Turn a heading into an html id: lower-case, hyphenated, word characters only."""
    return _NON_ID_CHARS.sub("", text.lower().replace(" ", "-"))


def encode_uri_component(base_uri: Any, appended_uri: Any) -> str:
    """Percent-encode the concatenation of two values as one URI component.

    Examples
    --------
    >>> encode_uri_component("https://example.com/", "a b")
    'https%3A%2F%2Fexample.com%2Fa%20b'
    """
    return quote(f"{base_uri}{appended_uri}", safe=_URI_COMPONENT_SAFE)


def _url_of(article: Any) -> Any:
    if isinstance(article, dict):
        return article.get("url")
    return getattr(article, "url", None)


def _index_of(articles: Sequence[Any], url: str) -> int | None:
    for index, article in enumerate(articles):
        if _url_of(article) == url:
            return index
    return None


def article_is_in_category(articles: Sequence[Any], url: str) -> bool:
    return _index_of(articles, url) is not None


def find_previous_article(articles: Sequence[Any], url: str) -> Any | None:
    """Return the article before ``url`` in ``articles``.

    Returns ``None`` when the target is the first article, and also when it
    is not in ``articles`` at all (a warning is logged for the latter).

    Examples
    --------
    >>> arts = [{"url": "/a/"}, {"url": "/b/"}]
    >>> find_previous_article(arts, "/b/")
    {'url': '/a/'}
    >>> find_previous_article(arts, "/a/") is None
    True
    """
    index = _index_of(articles, url)
    if index is None:
        logger.warning("Article %s not found when looking up previous article", url)
        return None
    if index == 0:
        return None
    return articles[index - 1]


def find_next_article(articles: Sequence[Any], url: str) -> Any | None:
    """Return the article after ``url`` in ``articles``.

    Returns ``None`` when the target is the last article, and also when it
    is not in ``articles`` at all (a warning is logged for the latter).
    """
    index = _index_of(articles, url)
    if index is None:
        logger.warning("Article %s not found when looking up next article", url)
        return None
    if index == len(articles) - 1:
        return None
    return articles[index + 1]
