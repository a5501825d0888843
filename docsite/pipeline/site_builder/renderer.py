"""Page rendering for the site builder.

Markdown items are converted with the site's mistune instance; HTML items are
rendered as Jinja2 templates. Either result is then wrapped in the layout
named by the item's ``layout`` front-matter key, looked up in the includes
directory. Template helpers from the site configuration are available as
Jinja2 globals in both steps.

Template context
----------------
- every front-matter key of the item
- ``page``: ``url``, ``inputPath``, ``outputPath``
- ``collections``: ``all``, one list per tag, and every named collection
- ``content``: rendered body (layouts only)
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Any, Callable, Iterable

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound

from docsite.exceptions import ContentValidationError, TemplateRenderError
from docsite.pipeline.collections import CollectionApi, CollectionFactory, ContentItem
from docsite.pipeline.template_helpers import HelperRegistry

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_SUFFIX = ".html"

MarkdownConverter = Callable[[str], str]


def create_environment(includes_dir: Path, helpers: HelperRegistry) -> Environment:
    """Build the Jinja2 environment for layouts and HTML content.

    Parameters
    ----------
    includes_dir : Path
        Directory the loader resolves layout and include names against.
    helpers : HelperRegistry
        Helpers installed as globals under their registered names.

    Returns
    -------
    jinja2.Environment
    """
    env = Environment(
        loader=FileSystemLoader(str(includes_dir)),
        keep_trailing_newline=True,
    )
    env.globals.update(helpers.as_mapping())
    return env


def build_collections(
    items: Iterable[ContentItem], factories: dict[str, CollectionFactory]
) -> dict[str, list[ContentItem]]:
    """Return ``all``, per-tag collections and the named sorted collections."""
    api = CollectionApi(items)
    collections: dict[str, list[ContentItem]] = {"all": api.get_all_sorted()}
    for tag in api.tags():
        collections[tag] = api.get_filtered_by_tag(tag)
    for name, factory in factories.items():
        collections[name] = factory(api)
        logger.debug("Collection %s has %d items", name, len(collections[name]))
    return collections


def page_context(
    item: ContentItem, collections: dict[str, list[ContentItem]]
) -> dict[str, Any]:
    context: dict[str, Any] = dict(item.data)
    context["page"] = {
        "url": item.url,
        "inputPath": item.input_path_posix,
        "outputPath": item.output_path.as_posix(),
    }
    context["collections"] = collections
    return context


def _layout_name(layout: Any) -> str:
    name = str(layout)
    if not PurePosixPath(name).suffix:
        name += DEFAULT_LAYOUT_SUFFIX
    return name


def render_item(
    item: ContentItem,
    env: Environment,
    markdown: MarkdownConverter,
    collections: dict[str, list[ContentItem]],
) -> str:
    """Render one content item to its final HTML.

    Sets ``item.content`` to the rendered body before applying the layout.

    Raises
    ------
    ContentValidationError
        If the named layout does not exist in the includes directory.
    TemplateRenderError
        If Jinja2 fails on the item body or its layout.
    MarkdownRenderError
        If a markdown render rule rejects a token.
    """
    context = page_context(item, collections)
    layout = item.data.get("layout")
    try:
        if item.template_format == "html":
            content = env.from_string(item.body).render(context)
        else:
            content = markdown(item.body)
        item.content = content
        if not layout:
            return content
        template = env.get_template(_layout_name(layout))
        return template.render({**context, "content": content})
    except TemplateNotFound as exc:
        raise ContentValidationError(
            "Layout not found",
            context={"input_path": item.input_path_posix, "layout": str(exc)},
        ) from exc
    except TemplateError as exc:
        raise TemplateRenderError(
            str(exc), context={"input_path": item.input_path_posix}
        ) from exc


def write_output(html_content: str, output_file: Path) -> None:
    """Write ``html_content`` to ``output_file`` as UTF-8, creating parents."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(html_content, encoding="utf-8")
