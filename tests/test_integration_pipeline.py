"""Integration test: build a small documentation site end to end.

Creates a content tree with a layout, guide pages, a plugin page and static
files, builds it with the default site configuration, and checks navigation
classes, neighbour links, markdown overrides and passthrough copies.
"""

from pathlib import Path

from docsite.pipeline.site_builder import SiteSettings, build_site

LAYOUT = """<nav><a class="{{ mainMenuActiveClass('/guides', page.url) }}" href="/guides/">Guides</a></nav>
<h1 id="{{ idify(pageTitle) }}">{{ pageTitle }}</h1>
{{ content }}
{% if articleIsInCategory(collections.guidesSorted, page.url) %}
{% set prev = findPreviousArticle(collections.guidesSorted, page.url) %}
{% set nxt = findNextArticle(collections.guidesSorted, page.url) %}
{% if prev %}<a class="prev" href="{{ prev.url }}">{{ prev.data.pageTitle }}</a>{% endif %}
{% if nxt %}<a class="next" href="{{ nxt.url }}">{{ nxt.data.pageTitle }}</a>{% endif %}
{% endif %}
"""


def _page(**front_matter) -> str:
    body = front_matter.pop("body")
    lines = "".join(f"{k}: {v}\n" for k, v in front_matter.items())
    return f"---\n{lines}---\n{body}"


def test_end_to_end_build(clean_site_env, tmp_path: Path, write):
    write(tmp_path / "_includes" / "base.html", LAYOUT)
    write(tmp_path / "index.md", _page(layout="base", pageTitle="Home", body="Welcome."))
    write(
        tmp_path / "guides" / "setup.md",
        _page(
            layout="base",
            pageTitle="Set Up",
            pageNumber=2,
            tags="guides",
            body="Install with `pip install docsite`.\n\n![A screenshot](shot.jpg)\n",
        ),
    )
    write(
        tmp_path / "guides" / "intro.md",
        _page(
            layout="base",
            pageTitle="Getting Started!",
            pageNumber=1,
            tags="guides",
            body="Read [the docs](https://example.com) or [setup](/guides/setup/).\n",
        ),
    )
    write(tmp_path / "plugins" / "zeta.md", _page(pageTitle="zeta", tags="plugins", body="z"))
    write(tmp_path / "assets" / "site.css", "body{}")
    write(tmp_path / "guides" / "shot.jpg", "jpg")

    settings = SiteSettings(input_dir=tmp_path)
    result = build_site(settings)

    assert result.pages_written == 4
    assert result.files_copied == 2
    out = settings.output_dir
    assert (out / "assets" / "site.css").exists()
    assert (out / "guides" / "shot.jpg").exists()

    home = (out / "index.html").read_text(encoding="utf-8")
    assert 'class=""' in home
    assert 'class="prev"' not in home and 'class="next"' not in home

    intro = (out / "guides" / "intro" / "index.html").read_text(encoding="utf-8")
    assert 'class="active fw-bold"' in intro
    assert '<h1 id="getting-started">Getting Started!</h1>' in intro
    assert 'href="https://example.com" target="_blank" rel="noopener"' in intro
    assert '<a href="/guides/setup/">setup</a>' in intro
    assert 'class="next" href="/guides/setup/">Set Up</a>' in intro
    assert 'class="prev"' not in intro

    setup = (out / "guides" / "setup" / "index.html").read_text(encoding="utf-8")
    assert '<code class="language-markup">pip install docsite</code>' in setup
    assert '<figure class="my-5 p-4 bg-light">' in setup
    assert 'class="prev" href="/guides/intro/">Getting Started!</a>' in setup
    assert 'class="next"' not in setup

    plugin = (out / "plugins" / "zeta" / "index.html").read_text(encoding="utf-8")
    assert plugin.strip() == "<p>z</p>"
