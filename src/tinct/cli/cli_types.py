# tinct:header:start
#
#   project      : Tinct
#   file         : cli_types.py
#   file_relpath : src/tinct/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Click parameter types for style tokens.

The conversions delegate to `tinct.config.parse`, so the CLI accepts exactly the
tokens a style file does (``red``, ``bright-blue``, ``208``, ``#4682b4``, ...).
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, Generic, NoReturn, Protocol, TypeVar

import click

from tinct.config.parse import parse_attribute, parse_color, parse_quirk
from tinct.core.attributes import Attribute, Quirk
from tinct.core.color import ColorKind
from tinct.errors import StyleSpecError

if TYPE_CHECKING:
    from collections.abc import Callable
    from enum import Enum

    from click.shell_completion import CompletionItem as ClickCompletionItem

    from tinct.core.color import Color

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

T = TypeVar("T")


class StyleTokenParam(ParamTypeBase, Generic[T]):
    """A Click parameter type that converts a style token with a parse function."""

    name: str
    parser: Callable[[str], T]
    choices: list[str]

    def __init__(
        self,
        name: str,
        parser: Callable[[str], T],
        *,
        choices: list[str] | None = None,
    ) -> None:
        self.name = name
        self.parser = parser
        self.choices = choices or []

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> T | None:
        """Convert a token; values that are already converted pass through."""
        if value is None or not isinstance(value, str):
            return value
        try:
            return self.parser(value)
        except StyleSpecError as exc:
            self._fail_noreturn(str(exc), param, ctx)

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete)]


def _member_tokens(enum_cls: type[Enum]) -> list[str]:
    return [name.lower().replace("_", "-") for name in enum_cls.__members__]


def color_param(key: str) -> StyleTokenParam[Color]:
    """Return a parameter type accepting color tokens; errors name `key`."""
    names: list[str] = [t for t in _member_tokens(ColorKind) if t not in ("fixed", "rgb")]
    return StyleTokenParam("color", partial(parse_color, key=key), choices=names)


def attribute_param() -> StyleTokenParam[Attribute]:
    """Return a parameter type accepting attribute names."""
    return StyleTokenParam("attribute", parse_attribute, choices=_member_tokens(Attribute))


def quirk_param() -> StyleTokenParam[Quirk]:
    """Return a parameter type accepting quirk names."""
    return StyleTokenParam("quirk", parse_quirk, choices=_member_tokens(Quirk))
