"""Runtime settings loader for the site builder.

This module provides ``SiteSettings``, which resolves the input, output and
includes directories and the log level for a build from explicit arguments,
environment variables and an optional project ``.env`` file.

Resolution order for each value: explicit argument, environment variable,
project default from ``docsite.config``. Relative output and includes
directories are taken relative to the input directory.

Examples
--------
>>> from docsite.pipeline.site_builder.config import SiteSettings
>>> settings = SiteSettings(input_dir=".")  # doctest: +SKIP
>>> settings.output_dir.name  # doctest: +SKIP
'build'
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

import docsite.config as _project_config
from docsite.config import (
    DEFAULT_INCLUDES_DIRNAME,
    DEFAULT_INPUT_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIRNAME,
)
from docsite.exceptions import ConfigurationError

ENV_INPUT_DIR = "SITE_INPUT_DIR"
ENV_OUTPUT_DIR = "SITE_OUTPUT_DIR"
ENV_INCLUDES_DIR = "SITE_INCLUDES_DIR"
ENV_LOG_LEVEL = "LOG_LEVEL"


def _resolve_under(base: Path, value: str | Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = base / path
    return path.resolve()


class SiteSettings:
    r"""Validated directory and logging settings for one site build.

    Attributes
    ----------
    input_dir : Path
        Root of the content tree.
    output_dir : Path
        Directory the rendered site is written to.
    includes_dir : Path
        Directory holding Jinja2 layouts.
    log_level : str
        Upper-cased logging level name.

    Raises
    ------
    ConfigurationError
        If the input directory does not exist, the output directory equals
        the input directory, or the log level is unknown.

    Examples
    --------
    >>> import os
    >>> os.environ["SITE_OUTPUT_DIR"] = "public"  # doctest: +SKIP
    >>> SiteSettings(input_dir="docs").output_dir.name  # doctest: +SKIP
    'public'
    """

    def __init__(
        self,
        input_dir: str | Path | None = None,
        output_dir: str | Path | None = None,
        includes_dir: str | Path | None = None,
        log_level: str | None = None,
    ) -> None:
        # Read the project root .env through the module so tests can
        # monkeypatch ``docsite.config.ENV_FILE``.
        env_path = Path(_project_config.ENV_FILE)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.input_dir: Path = Path(
            input_dir or os.getenv(ENV_INPUT_DIR) or DEFAULT_INPUT_DIR
        ).resolve()
        if not self.input_dir.is_dir():
            raise ConfigurationError(
                "Input directory does not exist",
                context={"input_dir": str(self.input_dir)},
            )
        self.output_dir: Path = _resolve_under(
            self.input_dir,
            output_dir or os.getenv(ENV_OUTPUT_DIR) or DEFAULT_OUTPUT_DIRNAME,
        )
        if self.output_dir == self.input_dir:
            raise ConfigurationError(
                "Output directory must differ from the input directory",
                context={"output_dir": str(self.output_dir)},
            )
        self.includes_dir: Path = _resolve_under(
            self.input_dir,
            includes_dir or os.getenv(ENV_INCLUDES_DIR) or DEFAULT_INCLUDES_DIRNAME,
        )
        level = (log_level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(
                "Unknown log level", context={"log_level": level}
            )
        self.log_level: str = level

    def __repr__(self) -> str:
        return (
            f"SiteSettings(input_dir={self.input_dir!s}, output_dir={self.output_dir!s}, "
            f"includes_dir={self.includes_dir!s}, log_level={self.log_level})"
        )
