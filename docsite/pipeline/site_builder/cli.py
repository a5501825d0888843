"""CLI entrypoint for building the documentation site.

This module implements ``docsite-build``: argument parsing, logging setup and
a call into :func:`docsite.pipeline.site_builder.runner.run_from_config`. All
build logic lives in the runner and its helpers.

Directories default to environment variables (``SITE_INPUT_DIR``,
``SITE_OUTPUT_DIR``, ``SITE_INCLUDES_DIR``) and then to the project defaults.
Setting ``DISABLE_FILE_LOGS`` turns off the log file.

Examples
--------
>>> # In shell
>>> docsite-build --input docs --output build --log-level DEBUG  # doctest: +SKIP
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

from docsite.config import DEFAULT_LOG_LEVEL
from docsite.exceptions import ConfigurationError

from .config import SiteSettings
from .runner import configure_logging, run_from_config

logger = logging.getLogger(__name__)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the site build."""
    parser = argparse.ArgumentParser(
        description="Build the static documentation website."
    )
    parser.add_argument("--input", type=Path, default=None, help="Content root")
    parser.add_argument(
        "--output", type=Path, default=None, help="Output directory (default: build)"
    )
    parser.add_argument(
        "--includes", type=Path, default=None, help="Layouts directory (default: _includes)"
    )
    parser.add_argument("--log-level", type=str, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the site build from the command line.

    Returns
    -------
    int
        ``0`` when the site was built, ``1`` otherwise.
    """
    args = parse_arguments(argv)
    enable_file = not bool(os.environ.get("DISABLE_FILE_LOGS"))
    try:
        settings = SiteSettings(
            input_dir=args.input,
            output_dir=args.output,
            includes_dir=args.includes,
            log_level=args.log_level,
        )
    except ConfigurationError as exc:
        configure_logging(DEFAULT_LOG_LEVEL, enable_file=enable_file)
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(settings.log_level, enable_file=enable_file)
    logger.info("Building site from %s", settings.input_dir)
    return 0 if run_from_config(settings=settings) else 1


if __name__ == "__main__":
    raise SystemExit(main())
