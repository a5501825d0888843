"""Explicit registry of template helpers.

The registry is a plain name-to-callable mapping that the builder installs
into a Jinja2 environment's globals. It is created per site configuration and
passed along, so no template engine singleton is mutated at import time.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from docsite.exceptions import ConfigurationError

Helper = Callable[..., Any]


class HelperRegistry:
    """Ordered mapping of template-facing helper names to callables.

    Examples
    --------
    >>> reg = HelperRegistry()
    >>> reg.add("shout", str.upper)
    >>> reg.get("shout")("hi")
    'HI'
    >>> "shout" in reg
    True
    """

    def __init__(self) -> None:
        self._helpers: dict[str, Helper] = {}

    def add(self, name: str, func: Helper) -> None:
        """Register ``func`` under ``name``.

        Raises
        ------
        ConfigurationError
            If ``name`` is empty, ``func`` is not callable, or the name is taken.
        """
        if not name:
            raise ConfigurationError("Helper name must not be empty")
        if not callable(func):
            raise ConfigurationError(
                "Helper must be callable", context={"helper": name}
            )
        if name in self._helpers:
            raise ConfigurationError(
                "Helper already registered", context={"helper": name}
            )
        self._helpers[name] = func

    def get(self, name: str) -> Helper:
        try:
            return self._helpers[name]
        except KeyError:
            raise ConfigurationError(
                "Unknown helper", context={"helper": name}
            ) from None

    def names(self) -> list[str]:
        return list(self._helpers)

    def as_mapping(self) -> dict[str, Helper]:
        return dict(self._helpers)

    def __contains__(self, name: object) -> bool:
        return name in self._helpers

    def __iter__(self) -> Iterator[str]:
        return iter(self._helpers)

    def __len__(self) -> int:
        return len(self._helpers)
