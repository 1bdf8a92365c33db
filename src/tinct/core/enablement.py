# tinct:header:start
#
#   project      : Tinct
#   file         : enablement.py
#   file_relpath : src/tinct/core/enablement.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Process-wide switch deciding whether any styling is emitted.

The switch holds a `Condition`, initially `Condition.DEFAULT` (styling on
whenever the OS terminal supports ANSI sequences). Renderers evaluate it on
every render, so changes are visible immediately in all threads.
"""

from __future__ import annotations

from tinct.config.logging import get_logger
from tinct.core.condition import AtomicCondition, Condition

logger = get_logger(__name__)

_ENABLED = AtomicCondition(Condition.DEFAULT)


def whenever(condition: Condition) -> None:
    """Enable styling globally whenever `condition` evaluates to True.

    Args:
        condition (Condition): The new global condition.
    """
    logger.trace("global styling condition set to %r", condition)
    _ENABLED.store(condition)


set_condition = whenever


def enable() -> None:
    """Unconditionally enable styling globally."""
    whenever(Condition.ALWAYS)


def disable() -> None:
    """Unconditionally disable styling globally."""
    whenever(Condition.NEVER)


def is_enabled() -> bool:
    """Return whether styling is currently enabled globally."""
    return _ENABLED.read()


def condition() -> Condition:
    """Return the current global condition without evaluating it."""
    return _ENABLED.load()
