# tinct:header:start
#
#   project      : Tinct
#   file         : cached.py
#   file_relpath : src/tinct/core/cached.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Initialize-once boolean shared by the environment and console probes."""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable


class CachedBool:
    """Boolean computed at most once, even under concurrent first use.

    States:
        ``UNINIT`` until a caller claims initialization, ``INITING`` while the
        winner computes, then ``FALSE``/``TRUE`` forever. Callers that lose the
        claim spin (yielding the processor) until the winner publishes.

    Notes:
        The claim is a compare-and-swap emulated with a short critical section;
        the lock is never held while the probe runs.
    """

    FALSE: Final[int] = 0
    TRUE: Final[int] = 1
    UNINIT: Final[int] = 2
    INITING: Final[int] = 3

    __slots__ = ("_state", "_cas_lock")

    def __init__(self) -> None:
        self._state: int = self.UNINIT
        self._cas_lock = threading.Lock()

    def _compare_exchange(self, current: int, new: int) -> tuple[bool, int]:
        """Set the state to `new` if it equals `current`.

        Returns:
            tuple[bool, int]: ``(swapped, observed_state)``.
        """
        with self._cas_lock:
            observed: int = self._state
            if observed == current:
                self._state = new
                return True, observed
            return False, observed

    def get_or_init(self, f: Callable[[], bool]) -> bool:
        """Return the cached value, computing it with `f` on first use.

        Args:
            f (Callable[[], bool]): The probe; runs at most once per instance
                unless it raises.

        Returns:
            bool: The cached value.
        """
        while True:
            swapped, observed = self._compare_exchange(self.UNINIT, self.INITING)
            if swapped:
                try:
                    value = bool(f())
                except BaseException:
                    # Hand the claim back so the next caller can retry.
                    self._state = self.UNINIT
                    raise
                self._state = self.TRUE if value else self.FALSE
                return value

            while observed == self.INITING:
                time.sleep(0)
                observed = self._state
            if observed != self.UNINIT:
                return observed == self.TRUE

    @property
    def is_initialized(self) -> bool:
        """Return True once a value has been published."""
        return self._state in (self.FALSE, self.TRUE)

    def peek(self) -> bool | None:
        """Return the published value, or None if none is published yet."""
        state: int = self._state
        if state == self.TRUE:
            return True
        if state == self.FALSE:
            return False
        return None
