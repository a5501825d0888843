"""Site builder runner module.

This module provides the programmatic entrypoints and logging configuration
for building the documentation site. It sequences the builder steps (content
discovery, collections, rendering, output, passthrough copies); the steps
themselves live in ``data_loader.py``, ``renderer.py`` and ``passthrough.py``.

Examples
--------
Basic usage from Python code:

>>> from docsite.pipeline.site_builder.runner import run_from_config, configure_logging
>>> configure_logging(log_level="INFO", enable_file=False)
>>> success = run_from_config(input_dir="docs")  # doctest: +SKIP
>>> assert isinstance(success, bool)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from docsite.config import LOG_DIR, LOG_FILENAME_BUILD_SITE, LOG_FORMAT
from docsite.exceptions import AppError
from docsite.site_config import SiteConfig, configure_site

from .config import SiteSettings
from .data_loader import discover_content_files, load_content_items
from .passthrough import copy_passthrough
from .renderer import build_collections, create_environment, render_item, write_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Summary of a finished build."""

    pages_written: int
    files_copied: int
    output_dir: Path


def configure_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging for a site build.

    Sets up a stream handler and, optionally, a file handler in ``LOG_DIR``
    using ``LOG_FORMAT`` from ``docsite.config``. Failures creating the file
    handler are swallowed so a read-only checkout can still build.

    Parameters
    ----------
    log_level : str, optional
        The logging level (e.g., "INFO", "DEBUG"). Defaults to "INFO".
    enable_file : bool, optional
        Whether to also write logs to ``LOG_DIR / LOG_FILENAME_BUILD_SITE``.

    Notes
    -----
    All existing root handlers are removed first, so repeated calls do not
    duplicate output.

    Examples
    --------
    >>> configure_logging(log_level="DEBUG", enable_file=False)
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_BUILD_SITE, mode="a")
            )
        except Exception:
            pass
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def build_site(settings: SiteSettings, site_config: SiteConfig | None = None) -> BuildResult:
    """Build the whole site described by ``settings``.

    Parameters
    ----------
    settings : SiteSettings
        Directories for the build.
    site_config : SiteConfig | None, optional
        Site registrations; :func:`configure_site` is used when ``None``.

    Returns
    -------
    BuildResult
        Counts of written pages and copied passthrough files.

    Raises
    ------
    AppError
        Any content, markdown or template failure. Nothing is retried.
    OSError
        If reading content or writing output fails.
    """
    site = site_config if site_config is not None else configure_site()
    paths = discover_content_files(
        settings.input_dir, settings.output_dir, settings.includes_dir
    )
    items = load_content_items(paths, settings.input_dir, settings.output_dir)
    collections = build_collections(items, site.collections)
    env = create_environment(settings.includes_dir, site.helpers)
    markdown = site.markdown()

    for item in items:
        html = render_item(item, env, markdown, collections)
        write_output(html, item.output_path)
        logger.debug("Wrote %s -> %s", item.input_path_posix, item.output_path)

    copied = copy_passthrough(
        site.passthrough_copies, settings.input_dir, settings.output_dir
    )
    logger.info(
        "Wrote %d pages and copied %d files to %s",
        len(items),
        copied,
        settings.output_dir,
    )
    return BuildResult(
        pages_written=len(items), files_copied=copied, output_dir=settings.output_dir
    )


def run_from_config(
    input_dir: Path | str | None = None,
    output_dir: Path | str | None = None,
    includes_dir: Path | str | None = None,
    *,
    settings: SiteSettings | None = None,
    site_config: SiteConfig | None = None,
) -> bool:
    """Build the site using provided paths or defaults from config.

    Returns
    -------
    bool
        True on success, False on any failure (failures are logged).
    """
    try:
        if settings is None:
            settings = SiteSettings(
                input_dir=input_dir, output_dir=output_dir, includes_dir=includes_dir
            )
        build_site(settings, site_config)
        return True
    except AppError as exc:
        logger.error("Site build failed: %s", exc)
        logger.debug("Error details: %s", exc.to_dict())
        return False
    except Exception as exc:
        logger.exception("Failed to build site: %s", exc)
        return False


__all__ = [
    "BuildResult",
    "build_site",
    "configure_logging",
    "run_from_config",
]
