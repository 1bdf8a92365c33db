# tinct:header:start
#
#   project      : Tinct
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Pytest configuration for the Tinct test suite.

Every test starts with styling globally enabled and the built-in named styles,
and leaves both the way it found them.
"""

from __future__ import annotations

import logging as std_logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from tinct.config import logging
from tinct.core import enablement
from tinct.core.condition import Condition
from tinct.registry.styles import StyleRegistry

F = TypeVar("F", bound=Callable[..., object])

# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_tinct_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Tinct's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def styling_enabled() -> Iterator[None]:
    """Enable styling for the test and restore the default condition afterwards."""
    enablement.enable()
    yield
    enablement.whenever(Condition.DEFAULT)


@pytest.fixture(autouse=True)
def builtin_styles() -> Iterator[None]:
    """Run each test against the built-in named styles only."""
    StyleRegistry.reset()
    yield
    StyleRegistry.reset()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo handler changes made by `setup_logging()` (the CLI calls it)."""
    root: std_logging.Logger = std_logging.getLogger()
    handlers: list[std_logging.Handler] = root.handlers[:]
    level: int = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
