# tinct:header:start
#
#   project      : Tinct
#   file         : styles.py
#   file_relpath : src/tinct/registry/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Named style registry.

Applications refer to styles by role (``"error"``, ``"hint"``, ...) instead of
repeating builder chains. The registry starts with a small set of built-in
styles; configuration files and code can add or override entries.

Notes:
    * Views (`as_mapping()`, `names()`) are derived from a **composed** registry
      (built-ins + local overrides − removals). `as_mapping()` returns a
      `MappingProxyType` to prevent accidental mutation.
    * `register()` / `unregister()` only touch the overlays; `reset()` drops them
      and restores the built-ins.
    * Process-global state guarded by an `RLock`.
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from tinct.config.logging import get_logger
from tinct.core.color import Color
from tinct.errors import DuplicateStyleError, UnknownStyleError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tinct.core.style import Style

logger = get_logger(__name__)

BUILTIN_STYLES: Final[Mapping[str, Style]] = MappingProxyType(
    {
        "alert": Color.YELLOW.on_white().bold().underline(),
        "error": Color.RED.bold(),
        "warning": Color.YELLOW.bold(),
        "success": Color.GREEN.bold(),
        "info": Color.CYAN.foreground(),
        "hint": Color.BRIGHT_BLACK.italic(),
    }
)


class StyleRegistry:
    """Registry of named styles."""

    _lock = RLock()

    _overrides: dict[str, Style] = {}
    _removals: set[str] = set()

    @classmethod
    def _compose(cls) -> dict[str, Style]:
        """Compose the built-ins with local overrides and removals."""
        composed: dict[str, Style] = dict(BUILTIN_STYLES)
        composed.update(cls._overrides)
        for name in cls._removals:
            composed.pop(name, None)
        return composed

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered style names (sorted)."""
        with cls._lock:
            return tuple(sorted(cls._compose()))

    @classmethod
    def get(cls, name: str) -> Style | None:
        """Return the style registered as `name`, or None.

        Args:
            name (str): Registered style name.

        Returns:
            Style | None: The style if found, else None.
        """
        with cls._lock:
            return cls._compose().get(name)

    @classmethod
    def require(cls, name: str) -> Style:
        """Return the style registered as `name`.

        Raises:
            UnknownStyleError: If no style is registered under `name`.
        """
        style: Style | None = cls.get(name)
        if style is None:
            raise UnknownStyleError(name)
        return style

    @classmethod
    def as_mapping(cls) -> Mapping[str, Style]:
        """Return a read-only ``name -> Style`` mapping.

        Notes:
            The returned mapping is a snapshot; later registrations do not
            show up in it.
        """
        with cls._lock:
            return MappingProxyType(cls._compose())

    @classmethod
    def register(cls, name: str, style: Style, *, replace: bool = False) -> None:
        """Register `style` under `name`.

        Args:
            name (str): Non-empty style name.
            style (Style): The style to register.
            replace (bool): Overwrite an existing entry instead of failing.

        Raises:
            ValueError: If `name` is empty.
            DuplicateStyleError: If `name` is taken and `replace` is False.
        """
        if not name:
            raise ValueError("Style name is required.")
        with cls._lock:
            if not replace and name in cls._compose():
                raise DuplicateStyleError(name)
            cls._overrides[name] = style
            cls._removals.discard(name)
        logger.debug("registered style %r: %r", name, style)

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Remove `name` from the registry.

        Returns:
            bool: True if a style was removed, False if `name` was unknown.
        """
        with cls._lock:
            if name not in cls._compose():
                return False
            cls._overrides.pop(name, None)
            if name in BUILTIN_STYLES:
                cls._removals.add(name)
        logger.debug("unregistered style %r", name)
        return True

    @classmethod
    def reset(cls) -> None:
        """Drop every override and removal, restoring the built-in styles."""
        with cls._lock:
            cls._overrides.clear()
            cls._removals.clear()
        logger.trace("style registry reset")
