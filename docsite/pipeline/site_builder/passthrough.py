"""Verbatim copying of static files into the output directory.

A pattern naming a directory copies the whole directory; any other pattern is
a glob relative to the input directory. Relative paths are preserved. Files
inside the output directory, hidden directories and ``node_modules`` are never
copied.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def _is_within(path: Path, directory: Path) -> bool:
    try:
        path.relative_to(directory)
    except ValueError:
        return False
    return True


def _skipped(relative: Path) -> bool:
    return any(
        part.startswith(".") or part == "node_modules" for part in relative.parts[:-1]
    )


def _matches(pattern: str, input_dir: Path) -> Iterator[Path]:
    candidate = input_dir / pattern
    if candidate.is_dir():
        yield from (path for path in candidate.rglob("*") if path.is_file())
        return
    yield from (path for path in input_dir.glob(pattern) if path.is_file())


def copy_passthrough(
    patterns: Iterable[str], input_dir: Path, output_dir: Path
) -> int:
    """Copy files matching ``patterns`` from ``input_dir`` into ``output_dir``.

    Parameters
    ----------
    patterns : Iterable[str]
        Directory names or glob patterns, e.g. ``"assets"`` or ``"**/*.jpg"``.
    input_dir : Path
        Root the patterns are resolved against.
    output_dir : Path
        Destination root.

    Returns
    -------
    int
        Number of distinct files copied.

    Examples
    --------
    >>> copy_passthrough(["assets"], Path("site"), Path("site/build"))  # doctest: +SKIP
    3
    """
    copied: set[Path] = set()
    for pattern in patterns:
        matched = 0
        for source in _matches(pattern, input_dir):
            if _is_within(source, output_dir):
                continue
            relative = source.relative_to(input_dir)
            if _skipped(relative) or relative in copied:
                continue
            target = output_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            copied.add(relative)
            matched += 1
        logger.debug("Passthrough %r copied %d files", pattern, matched)
    return len(copied)
