# tinct:header:start
#
#   project      : Tinct
#   file         : windows.py
#   file_relpath : src/tinct/core/windows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Windows console enablement for ANSI escape sequences.

Legacy Windows consoles only interpret SGR sequences once
``ENABLE_VIRTUAL_TERMINAL_PROCESSING`` is set on the output handle. On every
other platform the probe reports support unconditionally.

`probe_and_enable_ansi()` is what renderers call: it runs the probe once per
process and caches the outcome.
"""

from __future__ import annotations

import sys
from typing import Final

from tinct.config.logging import get_logger
from tinct.core.cached import CachedBool

logger = get_logger(__name__)

ENABLE_VIRTUAL_TERMINAL_PROCESSING: Final[int] = 0x0004
STD_OUTPUT_HANDLE: Final[int] = -11
INVALID_HANDLE_VALUE: Final[int] = -1

_ANSI_ENABLED = CachedBool()


def _enable_windows_console() -> bool:
    """Switch the Win32 console attached to stdout into VT processing mode."""
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore[attr-defined]
    kernel32.GetStdHandle.restype = wintypes.HANDLE

    handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
    if handle is None or handle == ctypes.c_void_p(INVALID_HANDLE_VALUE).value:
        return False

    mode = wintypes.DWORD(0)
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return False

    return bool(kernel32.SetConsoleMode(handle, mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING))


def enable_ansi_colors() -> bool:
    """Try to enable ANSI sequence support on the current console.

    Returns:
        bool: True if the console supports ANSI sequences (always True outside
        Windows), False if the Windows console refused.
    """
    if sys.platform != "win32":
        return True
    try:
        enabled: bool = _enable_windows_console()
    except (AttributeError, OSError) as exc:
        logger.debug("Windows console probe failed: %s", exc)
        return False
    logger.debug("Windows console VT processing enabled: %s", enabled)
    return enabled


def probe_and_enable_ansi() -> bool:
    """Return whether ANSI sequences are supported, probing at most once.

    Returns:
        bool: The cached probe result.
    """
    return _ANSI_ENABLED.get_or_init(enable_ansi_colors)
