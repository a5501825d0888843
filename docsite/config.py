"""Global configuration constants for the project.

Defines paths, filenames and markup tokens used across the site builder.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "docsite"
LOG_DIR: Path = PROJECT_ROOT / "logs"
ENV_FILE: Path = PROJECT_ROOT / ".env"

# Site layout defaults (relative to the input directory unless absolute)
DEFAULT_INPUT_DIR: Path = PROJECT_ROOT
DEFAULT_OUTPUT_DIRNAME: str = "build"
DEFAULT_INCLUDES_DIRNAME: str = "_includes"
CONTENT_FILE_SUFFIXES: tuple[str, ...] = (".md", ".html")
OUTPUT_INDEX_FILENAME: str = "index.html"

# Passthrough copies
PASSTHROUGH_COPY_PATTERNS: tuple[str, ...] = ("assets", "**/*.jpg")

# Markup tokens
ACTIVE_MENU_CLASS: str = "active fw-bold"
INLINE_CODE_CLASS: str = "language-markup"
EXTERNAL_LINK_PATTERN: str = r"^http"
EXTERNAL_LINK_TARGET: str = "_blank"
EXTERNAL_LINK_REL: str = "noopener"
FIGURE_TEMPLATE: str = """
\t\t<figure class="my-5 p-4 bg-light">
\t\t\t<img class="d-block mx-auto" src="{src}" alt="{description}"/>
\t\t\t<figcaption class="text-center mt-4 fst-italic small">
\t\t\t\t{description}
\t\t\t</figcaption>
\t\t</figure>"""

# Logging
LOG_FILENAME_BUILD_SITE: str = "build_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL: str = "INFO"
