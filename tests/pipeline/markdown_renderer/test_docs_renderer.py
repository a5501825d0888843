"""Tests for the mistune renderer wired to the documentation rules."""

import pytest

from docsite.exceptions import MarkdownRenderError
from docsite.pipeline.markdown_renderer import (
    CODE_INLINE,
    RenderRuleTable,
    create_markdown,
)


@pytest.fixture
def md():
    return create_markdown()


def test_inline_code_gets_language_class(md):
    html = md("Run `make <all>` now.")
    assert '<code class="language-markup">make &lt;all&gt;</code>' in html


def test_external_link_opens_in_new_tab(md):
    html = md("See [the docs](https://example.com/docs).")
    assert '<a href="https://example.com/docs" target="_blank" rel="noopener">the docs</a>' in html


def test_internal_link_is_untouched(md):
    html = md("Read [the guide](/guides/intro/).")
    assert '<a href="/guides/intro/">the guide</a>' in html
    assert "target=" not in html


def test_link_text_keeps_inline_markup(md):
    html = md("[**bold** `code`](/x/)")
    assert "<strong>bold</strong>" in html
    assert '<code class="language-markup">code</code>' in html


def test_link_title_is_kept(md):
    html = md('[a](/a/ "Title")')
    assert 'title="Title"' in html


def test_image_renders_captioned_figure(md):
    html = md("![A cat on a mat](cat.jpg)")
    assert '<figure class="my-5 p-4 bg-light">' in html
    assert 'src="cat.jpg" alt="A cat on a mat"/>' in html
    assert "<figcaption" in html
    assert html.count("A cat on a mat") == 2


def test_harmful_link_is_neutralised(md):
    html = md("[x](javascript:alert(1))")
    assert "javascript:" not in html


def test_link_href_is_escaped_once(md):
    html = md("[q](/search?a=1&b=2)")
    assert 'href="/search?a=1&amp;b=2"' in html
    assert "&amp;amp;" not in html


def test_image_without_description_fails_the_render(md):
    with pytest.raises(MarkdownRenderError):
        md("![](x.jpg)")


def test_other_markdown_renders_normally(md):
    html = md("# Title\n\n- one\n- two\n")
    assert "<h1>Title</h1>" in html
    assert "<li>one</li>" in html


def test_custom_table_replaces_rules():
    table = RenderRuleTable()
    table.set(CODE_INLINE, lambda token, default: "[code]")
    html = create_markdown(table)("`x` and [l](https://e.com)")
    assert "[code]" in html
    assert "target=" not in html

