"""Site configuration: passthrough copies, collections, helpers and markdown rules.

``SiteConfig`` is the explicit object the site builder is given. Nothing is
attached to module-level singletons: the helper registry and the markdown
render rule table live on the config instance and travel with it into the
build.

``configure_site`` registers everything the documentation site uses.

Examples
--------
>>> site = configure_site()
>>> site.passthrough_copies
['assets', '**/*.jpg']
>>> sorted(site.collections)[:2]
['apiSorted', 'guidesSorted']
>>> "mainMenuActiveClass" in site.helpers
True
"""

from __future__ import annotations

import logging

import mistune

from docsite.config import PASSTHROUGH_COPY_PATTERNS
from docsite.exceptions import ConfigurationError
from docsite.pipeline.collections import (
    CollectionFactory,
    sort_by_page_number,
    sort_by_title,
)
from docsite.pipeline.markdown_renderer import (
    DOCS_RULES,
    RenderRule,
    RenderRuleTable,
    create_markdown,
)
from docsite.pipeline.template_helpers import (
    Helper,
    HelperRegistry,
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

logger = logging.getLogger(__name__)


class SiteConfig:
    """Registration surface for a site build.

    Attributes
    ----------
    passthrough_copies : list[str]
        Directory names or glob patterns copied verbatim into the output.
    collections : dict[str, CollectionFactory]
        Named collection factories, in registration order.
    helpers : HelperRegistry
        Template helpers installed into the Jinja2 environment.
    render_rules : RenderRuleTable
        Markdown render rules used by :meth:`markdown`.
    """

    def __init__(
        self,
        helpers: HelperRegistry | None = None,
        render_rules: RenderRuleTable | None = None,
    ) -> None:
        self.passthrough_copies: list[str] = []
        self.collections: dict[str, CollectionFactory] = {}
        self.helpers = helpers if helpers is not None else HelperRegistry()
        self.render_rules = (
            render_rules if render_rules is not None else RenderRuleTable()
        )

    def add_passthrough_copy(self, pattern: str) -> None:
        if not pattern:
            raise ConfigurationError("Passthrough copy pattern must not be empty")
        if pattern not in self.passthrough_copies:
            self.passthrough_copies.append(pattern)

    def add_collection(self, name: str, factory: CollectionFactory) -> None:
        if name in self.collections:
            raise ConfigurationError(
                "Collection already registered", context={"collection": name}
            )
        self.collections[name] = factory

    def add_helper(self, name: str, func: Helper) -> None:
        self.helpers.add(name, func)

    def set_render_rule(self, kind: str, rule: RenderRule) -> None:
        self.render_rules.set(kind, rule)

    def markdown(self) -> mistune.Markdown:
        """Return a markdown converter using this config's render rules."""
        return create_markdown(self.render_rules)


def configure_site(site_config: SiteConfig | None = None) -> SiteConfig:
    """Register the documentation site's copies, collections, helpers and rules.

    Parameters
    ----------
    site_config : SiteConfig | None, optional
        Config to register into. A new one is created when ``None``.

    Returns
    -------
    SiteConfig
        The populated configuration.
    """
    site = site_config if site_config is not None else SiteConfig()

    for pattern in PASSTHROUGH_COPY_PATTERNS:
        site.add_passthrough_copy(pattern)

    site.add_collection("introductionSorted", sort_by_page_number("introduction"))
    site.add_collection("guidesSorted", sort_by_page_number("guides"))
    site.add_collection("pluginsSorted", sort_by_title("plugins"))
    site.add_collection("apiSorted", sort_by_title("api"))
    site.add_collection(
        "plugin-providers-sorted", sort_by_page_number("plugin-providers")
    )

    site.add_helper("eq", eq)
    site.add_helper("neq", neq)
    site.add_helper("mainMenuActiveClass", main_menu_active_class)
    site.add_helper("returnValueConditional", return_value_conditional)
    site.add_helper("idify", idify)
    site.add_helper("encodeURIComponent", encode_uri_component)
    site.add_helper("articleIsInCategory", article_is_in_category)
    site.add_helper("findPreviousArticle", find_previous_article)
    site.add_helper("findNextArticle", find_next_article)

    for kind, rule in DOCS_RULES.items():
        site.set_render_rule(kind, rule)

    logger.debug(
        "Configured site: %d passthrough copies, %d collections, %d helpers",
        len(site.passthrough_copies),
        len(site.collections),
        len(site.helpers),
    )
    return site
