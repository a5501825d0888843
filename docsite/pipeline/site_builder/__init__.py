"""Site builder pipeline package.

Defines the import surface of the site build: content loading, passthrough
copies, page rendering, settings and the runner. All logic lives in the
submodules.

Usage
-----
>>> from docsite.pipeline.site_builder import SiteSettings, build_site  # doctest: +SKIP
>>> result = build_site(SiteSettings(input_dir="docs"))  # doctest: +SKIP
>>> result.pages_written  # doctest: +SKIP
12
"""

from .config import SiteSettings
from .data_loader import (
    discover_content_files,
    load_content_item,
    load_content_items,
    output_path_for,
    split_front_matter,
    url_for,
)
from .passthrough import copy_passthrough
from .renderer import (
    build_collections,
    create_environment,
    page_context,
    render_item,
    write_output,
)
from .runner import BuildResult, build_site, configure_logging, run_from_config

__all__ = [
    "BuildResult",
    "SiteSettings",
    "build_collections",
    "build_site",
    "configure_logging",
    "copy_passthrough",
    "create_environment",
    "discover_content_files",
    "load_content_item",
    "load_content_items",
    "output_path_for",
    "page_context",
    "render_item",
    "run_from_config",
    "split_front_matter",
    "url_for",
    "write_output",
]
