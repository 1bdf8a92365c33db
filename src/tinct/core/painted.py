# tinct:header:start
#
#   project      : Tinct
#   file         : painted.py
#   file_relpath : src/tinct/core/painted.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""A value paired with a `Style`, rendered when formatted.

`Painted` decides per render, from the global switch, the style's own
condition and the terminal probe, whether styling is emitted:

| enabled | MASK | WRAP | output                                          |
|---------|------|------|-------------------------------------------------|
| yes     | any  | yes  | prefix, value with embedded resets rewritten, suffix |
| yes     | any  | no   | prefix, value, suffix                           |
| no      | no   | yes  | value with every escape sequence stripped       |
| no      | no   | no   | value                                           |
| no      | yes  | any  | nothing                                         |

Nothing is cached between renders: a `Painted` reflects the global state at
the moment it is formatted.

Example:
    ```python
    from tinct import paint

    print(f"{paint('ok').green().bold():>6}")
    ```
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from tinct.core import enablement, windows
from tinct.core.attributes import Quirk
from tinct.core.builder import StyleBuilder
from tinct.core.style import ESC, RESET, Style

if TYPE_CHECKING:
    from tinct.core.application import Application
    from tinct.core.style import TextSink
    from tinct.hyperlink import PaintedLink

T = TypeVar("T")


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from `text`.

    Every run starting at ``ESC`` and ending at the next ``m`` (both included)
    is dropped; an unterminated sequence swallows the rest of the text.

    Args:
        text (str): The text to clean.

    Returns:
        str: `text` without escape sequences.
    """
    if ESC not in text:
        return text

    out: list[str] = []
    inside: bool = False
    for ch in text:
        if inside:
            if ch == "m":
                inside = False
        elif ch == ESC:
            inside = True
        else:
            out.append(ch)
    return "".join(out)


@dataclass(frozen=True)
class Painted(StyleBuilder["Painted[T]"], Generic[T]):
    """A value that renders with a style.

    Attributes:
        value (T): The wrapped value; rendered through its own ``__format__``.
        style (Style): The style applied around it.
    """

    value: T
    style: Style = field(default_factory=Style)

    def apply(self, application: Application) -> Painted[T]:
        """Return a copy whose style has `application` applied."""
        return replace(self, style=self.style.apply(application))

    def paint(self, style: Style | Any) -> Painted[T]:
        """Return a copy rendered with `style` instead of the current style.

        Args:
            style (Style | Any): Anything `Style.coerce()` accepts.

        Returns:
            Painted[T]: The repainted value.
        """
        return replace(self, style=Style.coerce(style))

    def link(self, url: str) -> PaintedLink[T]:
        """Turn this painted value into an OSC 8 terminal hyperlink to `url`."""
        from tinct.hyperlink import PaintedLink

        return PaintedLink(self, url)

    def enabled(self) -> bool:
        """Return True if styling would be emitted right now."""
        return (
            enablement.is_enabled()
            and self.style.enabled()
            and windows.probe_and_enable_ansi()
        )

    def fmt(self, sink: TextSink, format_spec: str = "") -> None:
        """Render to `sink`.

        Args:
            sink (TextSink): Destination; its write errors propagate.
            format_spec (str): Format spec forwarded to the value.
        """
        style: Style = self.style
        wrap: bool = style.has_quirk(Quirk.WRAP)

        if self.enabled():
            if wrap:
                self._fmt_wrapped(sink, format_spec)
                return
            style.fmt_prefix(sink)
            sink.write(format(self.value, format_spec))
            style.fmt_suffix(sink)
            return

        if style.has_quirk(Quirk.MASK):
            return

        text: str = format(self.value, format_spec)
        sink.write(strip_ansi(text) if wrap else text)

    def _fmt_wrapped(self, sink: TextSink, format_spec: str) -> None:
        style: Style = self.style
        text: str = format(self.value, format_spec)
        prefix: str = style.prefix()

        sink.write(prefix)
        if ESC in text:
            # Every embedded reset restores this style instead of the default.
            text = text.replace(RESET, RESET + prefix)
        sink.write(text)
        style.fmt_suffix(sink)

    def __format__(self, format_spec: str) -> str:
        buf = io.StringIO()
        self.fmt(buf, format_spec)
        return buf.getvalue()

    def __str__(self) -> str:
        return format(self, "")
