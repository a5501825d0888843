"""Collections pipeline package.

Exposes the content item model, the read-only collection view handed to
collection factories, and the two sorting strategies used by the site's
named collections.
"""

from .content import CollectionApi, ContentItem, normalize_tags
from .sorting import CollectionFactory, sort_by_page_number, sort_by_title

__all__ = [
    "CollectionApi",
    "CollectionFactory",
    "ContentItem",
    "normalize_tags",
    "sort_by_page_number",
    "sort_by_title",
]
