"""Template helpers pipeline package.

Re-exports the pure helper functions and the registry that carries them into
the templating layer. No logic is defined here.
"""

from .helpers import (
    article_is_in_category,
    encode_uri_component,
    eq,
    find_next_article,
    find_previous_article,
    idify,
    main_menu_active_class,
    neq,
    return_value_conditional,
)
from .registry import Helper, HelperRegistry

__all__ = [
    "Helper",
    "HelperRegistry",
    "article_is_in_category",
    "encode_uri_component",
    "eq",
    "find_next_article",
    "find_previous_article",
    "idify",
    "main_menu_active_class",
    "neq",
    "return_value_conditional",
]
