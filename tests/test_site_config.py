"""Tests for the site configuration registrations."""

import pytest

from docsite.exceptions import ConfigurationError
from docsite.pipeline.markdown_renderer import CODE_INLINE, IMAGE, LINK, RenderRuleTable
from docsite.pipeline.template_helpers import HelperRegistry
from docsite.site_config import SiteConfig, configure_site


def test_configure_site_registers_everything():
    site = configure_site()
    assert site.passthrough_copies == ["assets", "**/*.jpg"]
    assert list(site.collections) == [
        "introductionSorted",
        "guidesSorted",
        "pluginsSorted",
        "apiSorted",
        "plugin-providers-sorted",
    ]
    assert site.helpers.names() == [
        "eq",
        "neq",
        "mainMenuActiveClass",
        "returnValueConditional",
        "idify",
        "encodeURIComponent",
        "articleIsInCategory",
        "findPreviousArticle",
        "findNextArticle",
    ]
    for kind in (CODE_INLINE, IMAGE, LINK):
        assert site.render_rules.is_overridden(kind)


def test_configure_site_uses_injected_registry_and_rules():
    helpers = HelperRegistry()
    rules = RenderRuleTable()
    site = configure_site(SiteConfig(helpers=helpers, render_rules=rules))
    assert site.helpers is helpers
    assert site.render_rules is rules
    assert "idify" in helpers
    assert rules.is_overridden(LINK)


def test_configurations_do_not_share_state():
    first = configure_site()
    second = SiteConfig()
    assert len(second.helpers) == 0
    assert not second.render_rules.is_overridden(CODE_INLINE)
    assert "<code>x</code>" in second.markdown()("`x`")
    assert 'class="language-markup"' in first.markdown()("`x`")


def test_duplicate_collection_and_empty_passthrough_raise():
    site = configure_site()
    with pytest.raises(ConfigurationError):
        site.add_collection("guidesSorted", lambda api: [])
    with pytest.raises(ConfigurationError):
        site.add_passthrough_copy("")
    site.add_passthrough_copy("assets")
    assert site.passthrough_copies.count("assets") == 1


def test_configuring_twice_raises():
    site = configure_site()
    with pytest.raises(ConfigurationError):
        configure_site(site)
