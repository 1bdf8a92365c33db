# tinct:header:start
#
#   project      : Tinct
#   file         : errors.py
#   file_relpath : src/tinct/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Exceptions raised by the configuration and registry layers.

The core engine (`tinct.core`) raises none of these: it only lets
``ValueError`` escape from color constructors and propagates write and
formatting errors unchanged.
"""

from __future__ import annotations


class TinctError(Exception):
    """Base class for all Tinct errors."""


class StyleSpecError(TinctError, ValueError):
    """A style definition could not be parsed.

    Attributes:
        key (str | None): The offending key (e.g. ``"fg"``), if known.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key: str | None = key
        super().__init__(f"{key}: {message}" if key else message)


class StyleConfigError(TinctError):
    """A style configuration file is unreadable or malformed."""


class DuplicateStyleError(TinctError, KeyError):
    """A named style is already registered."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"style already registered: {self.name!r}"


class UnknownStyleError(TinctError, KeyError):
    """No style is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown style: {self.name!r}"
