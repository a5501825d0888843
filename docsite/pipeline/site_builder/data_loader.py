"""Content discovery and front-matter loading for the site builder.

This module finds content files in the input tree, splits their YAML front
matter from the body, and maps each file to its site url and output path.
It performs no rendering.

Url mapping
-----------
- ``index.md`` -> ``/``
- ``guides/index.md`` -> ``/guides/``
- ``guides/intro.md`` -> ``/guides/intro/``
- a front-matter ``permalink`` replaces the computed url

Examples
--------
>>> url_for(PurePosixPath("guides/intro.md"))
'/guides/intro/'
>>> split_front_matter("---\\npageNumber: 2\\n---\\n# Hi\\n")
({'pageNumber': 2}, '# Hi\\n')
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any, Iterable

import yaml

from docsite.config import CONTENT_FILE_SUFFIXES, OUTPUT_INDEX_FILENAME
from docsite.exceptions import ContentValidationError
from docsite.pipeline.collections import ContentItem, normalize_tags

logger = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
_SKIPPED_DIRNAMES = {"node_modules"}


def _is_within(path: Path, directory: Path) -> bool:
    try:
        path.relative_to(directory)
    except ValueError:
        return False
    return True


def _has_hidden_part(relative: Path) -> bool:
    return any(
        part.startswith(".") or part in _SKIPPED_DIRNAMES
        for part in relative.parts[:-1]
    )


def discover_content_files(
    input_dir: Path, output_dir: Path, includes_dir: Path
) -> list[Path]:
    """Return content files under ``input_dir`` in sorted order.

    Files with a suffix from ``CONTENT_FILE_SUFFIXES`` are returned, except
    those inside the output directory, the includes directory, a dot-directory
    or ``node_modules``. Other underscore directories such as ``_drafts`` hold
    content.
    """
    found: list[Path] = []
    for path in sorted(input_dir.rglob("*")):
        if not path.is_file() or path.suffix not in CONTENT_FILE_SUFFIXES:
            continue
        if _is_within(path, output_dir) or _is_within(path, includes_dir):
            continue
        if _has_hidden_part(path.relative_to(input_dir)):
            continue
        found.append(path)
    logger.debug("Discovered %d content files under %s", len(found), input_dir)
    return found


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a leading ``---`` YAML block from ``text``.

    Returns
    -------
    tuple[dict, str]
        Front matter mapping (empty when absent) and the remaining body.

    Raises
    ------
    ContentValidationError
        If the YAML is invalid or is not a mapping.
    """
    match = _FRONT_MATTER.match(text)
    if match is None:
        return {}, text
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise ContentValidationError(
            "Invalid YAML front matter", context={"error": str(exc)}
        ) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentValidationError(
            "Front matter must be a mapping",
            context={"type": type(data).__name__},
        )
    return data, text[match.end():]


def url_for(relative_path: PurePosixPath, permalink: Any = None) -> str:
    """Map a content file path, relative to the input directory, to its url.

    Raises
    ------
    ContentValidationError
        If ``permalink`` is set but is not a string.
    """
    if permalink is not None:
        if not isinstance(permalink, str) or not permalink:
            raise ContentValidationError(
                "permalink must be a non-empty string",
                context={"path": str(relative_path), "permalink": permalink},
            )
        return permalink if permalink.startswith("/") else f"/{permalink}"
    parent = relative_path.parent
    if relative_path.stem == "index":
        return "/" if str(parent) == "." else f"/{parent.as_posix()}/"
    return f"/{(parent / relative_path.stem).as_posix()}/"


def output_path_for(url: str, output_dir: Path) -> Path:
    relative = url.lstrip("/")
    if url.endswith("/"):
        return output_dir / relative / OUTPUT_INDEX_FILENAME
    return output_dir / relative


def load_content_item(path: Path, input_dir: Path, output_dir: Path) -> ContentItem:
    """Read one content file into a :class:`ContentItem`.

    Parameters
    ----------
    path : Path
        Content file.
    input_dir : Path
        Root of the content tree; urls are derived relative to it.
    output_dir : Path
        Root of the rendered site.

    Returns
    -------
    ContentItem
        Item with ``content`` still empty.

    Raises
    ------
    ContentValidationError
        On invalid front matter or permalink; the context names the file.
    """
    relative = PurePosixPath(path.relative_to(input_dir).as_posix())
    text = path.read_text(encoding="utf-8")
    try:
        data, body = split_front_matter(text)
        url = url_for(relative, data.get("permalink"))
    except ContentValidationError as exc:
        raise ContentValidationError(
            exc.message, context={**exc.context, "input_path": str(relative)}
        ) from exc
    return ContentItem(
        url=url,
        data=data,
        tags=normalize_tags(data.get("tags")),
        input_path=Path(relative),
        output_path=output_path_for(url, output_dir),
        body=body,
        template_format=path.suffix.lstrip("."),
    )


def load_content_items(
    paths: Iterable[Path], input_dir: Path, output_dir: Path
) -> list[ContentItem]:
    """Load every path, rejecting two files that render to the same url."""
    items: list[ContentItem] = []
    seen: dict[str, str] = {}
    for path in paths:
        item = load_content_item(path, input_dir, output_dir)
        if item.url in seen:
            raise ContentValidationError(
                "Two content files map to the same url",
                context={
                    "url": item.url,
                    "first": seen[item.url],
                    "second": item.input_path_posix,
                },
            )
        seen[item.url] = item.input_path_posix
        items.append(item)
    return items
