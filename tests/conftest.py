"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides small factories for content items and site trees.
"""

import os
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from docsite.pipeline.collections import ContentItem, normalize_tags  # noqa: E402

SITE_ENV_KEYS = ("SITE_INPUT_DIR", "SITE_OUTPUT_DIR", "SITE_INCLUDES_DIR", "LOG_LEVEL")


@pytest.fixture
def make_item():
    """Return a factory building ``ContentItem`` objects from front matter."""

    def factory(url: str, **data) -> ContentItem:
        slug = url.strip("/") or "index"
        return ContentItem(
            url=url,
            data=data,
            tags=normalize_tags(data.get("tags")),
            input_path=Path(f"{slug}.md"),
            output_path=Path("build") / slug / "index.html",
        )

    return factory


@pytest.fixture
def clean_site_env(monkeypatch, tmp_path: Path):
    """Clear site environment variables and point the .env lookup at tmp_path.

    Each key is set before being deleted so monkeypatch restores its absence,
    including values that ``load_dotenv`` adds during the test.
    """
    import docsite.config as cfg

    for key in SITE_ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    monkeypatch.setattr(cfg, "ENV_FILE", tmp_path / ".env")
    return tmp_path


def write_file(path: Path, text: str) -> Path:
    """Write helper that ensures the parent directory exists."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write():
    return write_file
