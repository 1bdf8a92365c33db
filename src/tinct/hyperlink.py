# tinct:header:start
#
#   project      : Tinct
#   file         : hyperlink.py
#   file_relpath : src/tinct/hyperlink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""OSC 8 terminal hyperlinks around painted values.

Terminals that understand OSC 8 make the text clickable; others ignore the
sequence. The link is emitted only while the inner painted value is enabled,
so disabling styling also removes the hyperlink markup.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final, Generic, TypeVar

from tinct.core.builder import StyleBuilder
from tinct.core.painted import Painted

if TYPE_CHECKING:
    from tinct.core.application import Application
    from tinct.core.style import TextSink

T = TypeVar("T")

OSC: Final[str] = "\x1b]"
ST: Final[str] = "\x1b\\"


@dataclass(frozen=True)
class PaintedLink(StyleBuilder["PaintedLink[T]"], Generic[T]):
    """A painted value that renders as a hyperlink to `url`.

    Attributes:
        painted (Painted[T]): The text of the link.
        url (str): The link target.
    """

    painted: Painted[T]
    url: str

    def apply(self, application: Application) -> PaintedLink[T]:
        """Apply a style edit to the link text."""
        return replace(self, painted=self.painted.apply(application))

    def fmt(self, sink: TextSink, format_spec: str = "") -> None:
        """Render to `sink`; see `Painted.fmt()`."""
        if not self.painted.enabled():
            self.painted.fmt(sink, format_spec)
            return
        sink.write(f"{OSC}8;;{self.url}{ST}")
        self.painted.fmt(sink, format_spec)
        sink.write(f"{OSC}8;;{ST}")

    def __format__(self, format_spec: str) -> str:
        buf = io.StringIO()
        self.fmt(buf, format_spec)
        return buf.getvalue()

    def __str__(self) -> str:
        return format(self, "")


def link(value: T, url: str) -> PaintedLink[T]:
    """Return `value`, unstyled, as a hyperlink to `url`."""
    return PaintedLink(Painted(value), url)
