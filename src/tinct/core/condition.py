# tinct:header:start
#
#   project      : Tinct
#   file         : condition.py
#   file_relpath : src/tinct/core/condition.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Deferred boolean predicates that decide whether styling is emitted.

Key types:
    - `Condition`: frozen wrapper around a zero-argument ``() -> bool`` function.
      Equality and hashing use the identity of the wrapped function, so the
      built-in constants print symbolically.
    - `AtomicCondition`: a swappable slot holding a `Condition`. Writers are
      serialized; readers perform a single reference load and then call it.

The TTY and environment detectors cache their result in a
`tinct.core.cached.CachedBool`, so each probe runs at most once per process.

Built-in conditions:
    ``ALWAYS``, ``NEVER`` and ``DEFAULT`` (OS support probe), plus the
    detectors ``STDOUT_IS_TTY``, ``STDERR_IS_TTY``, ``STDIN_IS_TTY``,
    ``STDOUTERR_ARE_TTY``, ``CLICOLOR``, ``YES_COLOR`` and ``TTY_AND_COLOR``.
    Each detector has a ``*_LIVE`` twin that re-evaluates on every call.

Example:
    ```python
    from tinct import Condition, Style

    style = Style().red().whenever(Condition.STDOUT_IS_TTY)
    ```
"""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from tinct.core import windows
from tinct.core.cached import CachedBool

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO


@dataclass(frozen=True)
class Condition:
    """A deferred boolean predicate.

    Attributes:
        func (Callable[[], bool]): The zero-argument function evaluated on each call.
    """

    func: Callable[[], bool]

    ALWAYS: ClassVar[Condition]
    NEVER: ClassVar[Condition]
    DEFAULT: ClassVar[Condition]

    STDOUT_IS_TTY: ClassVar[Condition]
    STDOUT_IS_TTY_LIVE: ClassVar[Condition]
    STDERR_IS_TTY: ClassVar[Condition]
    STDERR_IS_TTY_LIVE: ClassVar[Condition]
    STDIN_IS_TTY: ClassVar[Condition]
    STDIN_IS_TTY_LIVE: ClassVar[Condition]
    STDOUTERR_ARE_TTY: ClassVar[Condition]
    STDOUTERR_ARE_TTY_LIVE: ClassVar[Condition]
    CLICOLOR: ClassVar[Condition]
    CLICOLOR_LIVE: ClassVar[Condition]
    YES_COLOR: ClassVar[Condition]
    YES_COLOR_LIVE: ClassVar[Condition]
    TTY_AND_COLOR: ClassVar[Condition]
    TTY_AND_COLOR_LIVE: ClassVar[Condition]

    def __call__(self) -> bool:
        """Evaluate the predicate."""
        return bool(self.func())

    @classmethod
    def from_fn(cls, func: Callable[[], bool]) -> Condition:
        """Wrap `func` as a condition."""
        return cls(func)

    @staticmethod
    def cached(value: bool) -> Condition:
        """Return `ALWAYS` if `value` is true, `NEVER` otherwise.

        Use this to bake a value computed once into a condition that never
        re-evaluates anything.
        """
        return Condition.ALWAYS if value else Condition.NEVER

    def __repr__(self) -> str:
        for name in ("DEFAULT", "ALWAYS", "NEVER"):
            if self == getattr(Condition, name):
                return f"Condition.{name}"
        return f"Condition({self.func!r})"


def always() -> bool:
    """Return True."""
    return True


def never() -> bool:
    """Return False."""
    return False


def os_support() -> bool:
    """Return True if the OS terminal supports ANSI sequences (cached)."""
    return windows.probe_and_enable_ansi()


Condition.ALWAYS = Condition(always)
Condition.NEVER = Condition(never)
Condition.DEFAULT = Condition(os_support)


class AtomicCondition:
    """Process-wide slot holding the current `Condition`.

    Rebinding a single reference is atomic in CPython, so `read()` is a plain
    attribute load followed by a call. `store()` takes a lock so that
    concurrent writers are serialized and publish in a well-defined order.
    """

    __slots__ = ("_condition", "_lock")

    def __init__(self, condition: Condition) -> None:
        self._condition: Condition = condition
        self._lock = threading.Lock()

    def store(self, condition: Condition) -> None:
        """Publish `condition` as the current condition."""
        with self._lock:
            self._condition = condition

    def load(self) -> Condition:
        """Return the current condition without evaluating it."""
        return self._condition

    def read(self) -> bool:
        """Evaluate the current condition."""
        return self._condition()


# --- Detectors ----------------------------------------------------------------


def _is_tty(stream: TextIO | None) -> bool:
    """Return True if `stream` is attached to a terminal."""
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        # Closed, detached or replaced streams are not terminals.
        return False


def env_set_or(name: str, default: bool) -> bool:
    """Return `default` if `name` is unset, else whether its value is not ``"0"``.

    Args:
        name (str): Environment variable name.
        default (bool): Result when the variable is not set.

    Returns:
        bool: The resolved flag.
    """
    value: str | None = os.environ.get(name)
    if value is None:
        return default
    return value != "0"


def stdout_is_tty_live() -> bool:
    """Return True if stdout is a terminal (re-evaluated)."""
    return _is_tty(sys.stdout)


def stderr_is_tty_live() -> bool:
    """Return True if stderr is a terminal (re-evaluated)."""
    return _is_tty(sys.stderr)


def stdin_is_tty_live() -> bool:
    """Return True if stdin is a terminal (re-evaluated)."""
    return _is_tty(sys.stdin)


def stdouterr_are_tty_live() -> bool:
    """Return True if both stdout and stderr are terminals (re-evaluated)."""
    return _is_tty(sys.stdout) and _is_tty(sys.stderr)


def clicolor_live() -> bool:
    """Honor ``CLICOLOR_FORCE`` and ``CLICOLOR`` (re-evaluated)."""
    return env_set_or("CLICOLOR_FORCE", False) or env_set_or("CLICOLOR", True)


def yes_color_live() -> bool:
    """Return False when ``NO_COLOR`` is set to anything but ``"0"`` (re-evaluated)."""
    return not env_set_or("NO_COLOR", False)


def tty_and_color_live() -> bool:
    """Combine the TTY and environment detectors (re-evaluated)."""
    return stdouterr_are_tty() and clicolor() and yes_color()


_STDOUT_IS_TTY = CachedBool()
_STDERR_IS_TTY = CachedBool()
_STDIN_IS_TTY = CachedBool()
_STDOUTERR_ARE_TTY = CachedBool()
_CLICOLOR = CachedBool()
_YES_COLOR = CachedBool()
_TTY_AND_COLOR = CachedBool()


def stdout_is_tty() -> bool:
    """Return True if stdout is a terminal (cached)."""
    return _STDOUT_IS_TTY.get_or_init(stdout_is_tty_live)


def stderr_is_tty() -> bool:
    """Return True if stderr is a terminal (cached)."""
    return _STDERR_IS_TTY.get_or_init(stderr_is_tty_live)


def stdin_is_tty() -> bool:
    """Return True if stdin is a terminal (cached)."""
    return _STDIN_IS_TTY.get_or_init(stdin_is_tty_live)


def stdouterr_are_tty() -> bool:
    """Return True if stdout and stderr are terminals (cached)."""
    return _STDOUTERR_ARE_TTY.get_or_init(stdouterr_are_tty_live)


def clicolor() -> bool:
    """Honor ``CLICOLOR_FORCE`` and ``CLICOLOR`` (cached)."""
    return _CLICOLOR.get_or_init(clicolor_live)


def yes_color() -> bool:
    """Return False when ``NO_COLOR`` is set (cached)."""
    return _YES_COLOR.get_or_init(yes_color_live)


def tty_and_color() -> bool:
    """Combine the cached TTY and environment detectors (cached)."""
    return _TTY_AND_COLOR.get_or_init(tty_and_color_live)


Condition.STDOUT_IS_TTY = Condition(stdout_is_tty)
Condition.STDOUT_IS_TTY_LIVE = Condition(stdout_is_tty_live)
Condition.STDERR_IS_TTY = Condition(stderr_is_tty)
Condition.STDERR_IS_TTY_LIVE = Condition(stderr_is_tty_live)
Condition.STDIN_IS_TTY = Condition(stdin_is_tty)
Condition.STDIN_IS_TTY_LIVE = Condition(stdin_is_tty_live)
Condition.STDOUTERR_ARE_TTY = Condition(stdouterr_are_tty)
Condition.STDOUTERR_ARE_TTY_LIVE = Condition(stdouterr_are_tty_live)
Condition.CLICOLOR = Condition(clicolor)
Condition.CLICOLOR_LIVE = Condition(clicolor_live)
Condition.YES_COLOR = Condition(yes_color)
Condition.YES_COLOR_LIVE = Condition(yes_color_live)
Condition.TTY_AND_COLOR = Condition(tty_and_color)
Condition.TTY_AND_COLOR_LIVE = Condition(tty_and_color_live)
