"""Sorted collection factories for category-tagged content.

Each factory takes a category tag and returns a function from a
:class:`~docsite.pipeline.collections.content.CollectionApi` to an ordered
list of items. Two strategies exist: explicit ordering by the ``pageNumber``
front-matter field, and case-insensitive ordering by ``pageTitle``.

Both use Python's stable sort, so items with equal keys keep input-path order.

Examples
--------
>>> guides = sort_by_page_number("guides")
>>> plugins = sort_by_title("plugins")
>>> callable(guides) and callable(plugins)
True
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from docsite.exceptions import ContentValidationError

from .content import CollectionApi, ContentItem

logger = logging.getLogger(__name__)

CollectionFactory = Callable[[CollectionApi], list[ContentItem]]


def _unusable_page_number(item: ContentItem, value: object) -> ContentValidationError:
    return ContentValidationError(
        "Content item has no usable pageNumber",
        context={"input_path": item.input_path_posix, "pageNumber": value},
    )


def _page_number(item: ContentItem) -> float:
    value = item.data.get("pageNumber")
    if isinstance(value, bool):
        raise _unusable_page_number(item, value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            raise _unusable_page_number(item, value) from None
    else:
        raise _unusable_page_number(item, value)
    if math.isnan(number):
        raise _unusable_page_number(item, value)
    return number


def _page_title_key(item: ContentItem) -> str:
    value = item.data.get("pageTitle")
    if not isinstance(value, str):
        raise ContentValidationError(
            "Content item has no pageTitle",
            context={"input_path": item.input_path_posix},
        )
    return value.lower()


def sort_by_page_number(category: str) -> CollectionFactory:
    """Build a collection of ``category`` items ordered by ``pageNumber``.

    Parameters
    ----------
    category : str
        Tag whose items make up the collection.

    Returns
    -------
    Callable[[CollectionApi], list[ContentItem]]
        Factory producing items in non-decreasing ``pageNumber`` order.

    Raises
    ------
    ContentValidationError
        When the factory runs and an item lacks a numeric ``pageNumber``.
    """

    def collection(collections: CollectionApi) -> list[ContentItem]:
        items = collections.get_filtered_by_tag(category)
        logger.debug("Sorting %d %r items by pageNumber", len(items), category)
        return sorted(items, key=_page_number)

    return collection


def sort_by_title(category: str) -> CollectionFactory:
    """Build a collection of ``category`` items ordered by lower-cased ``pageTitle``.

    Parameters
    ----------
    category : str
        Tag whose items make up the collection.

    Returns
    -------
    Callable[[CollectionApi], list[ContentItem]]
        Factory producing items in non-decreasing case-insensitive title order.

    Raises
    ------
    ContentValidationError
        When the factory runs and an item lacks a string ``pageTitle``.
    """

    def collection(collections: CollectionApi) -> list[ContentItem]:
        items = collections.get_filtered_by_tag(category)
        logger.debug("Sorting %d %r items by pageTitle", len(items), category)
        return sorted(items, key=_page_title_key)

    return collection
