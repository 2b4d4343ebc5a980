"""Duration parser - Lark grammar plus an Interpreter that accumulates components."""

from __future__ import annotations

import logging
import string

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput, UnexpectedToken
from lark.visitors import Interpreter

from durationflex._constants import MAX_SECONDS
from durationflex._errors import (
    ERR_MSG_EMPTY_INPUT,
    ERR_MSG_INVALID_NUMBER,
    ERR_MSG_TRAILING_INPUT,
    ERR_MSG_UNSUPPORTED_VALUE,
    EmptyInputError,
    InvalidNumberError,
    ParseError,
    TrailingInputError,
    UnknownUnitError,
    UnsupportedValueError,
)
from durationflex.duration import Duration
from durationflex.units import Accumulator, Component, Unit

logger = logging.getLogger(__name__)

# No %ignore: whitespace and anything else outside a token is an error.
GRAMMAR = r"""
start: component+
component: AMOUNT UNIT

AMOUNT: /[0-9]+/
UNIT: /[A-Za-z]/
"""

_lark = Lark(GRAMMAR, parser="lalr")


def amount_from_digits(digits: str) -> int | None:
    """Convert an ASCII digit run to an int, or None if it is wider than MAX_SECONDS.

    Leading zeros are dropped first, so they never count towards the width.
    """
    significant = digits.lstrip("0")
    if len(significant) > len(str(MAX_SECONDS)):
        return None
    return int(significant or "0")


class ComponentInterpreter(Interpreter):
    """Walks a parse tree left to right, feeding each component to an Accumulator."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._acc = Accumulator(text)

    @property
    def total(self) -> int:
        return self._acc.total

    def component(self, tree: Tree) -> None:
        amount_tok, unit_tok = tree.children
        self._acc.add(self._to_component(amount_tok, unit_tok))

    def _to_component(self, amount_tok: Token, unit_tok: Token) -> Component:
        position = amount_tok.start_pos
        fragment = self._text[position:unit_tok.end_pos]

        amount = amount_from_digits(str(amount_tok))
        if amount is None:
            raise InvalidNumberError(
                ERR_MSG_INVALID_NUMBER,
                f"amount {str(amount_tok)[:32]!r}... at position {position} exceeds {MAX_SECONDS}",
                text=self._text,
                position=position,
                fragment=fragment,
            )

        try:
            unit = Unit.from_tag(str(unit_tok))
        except UnknownUnitError as e:
            raise UnknownUnitError(
                e.user_message,
                f"{e.internal()} (at position {unit_tok.start_pos} of {self._text!r})",
                text=self._text,
                position=unit_tok.start_pos,
                fragment=str(unit_tok),
            ) from None

        return Component(unit, amount, position, fragment)


def _trailing_position(text: str, exc: UnexpectedInput) -> int:
    if isinstance(exc, UnexpectedToken) and exc.token.type == "$END":
        # Input ended after an amount with no unit; point at the dangling digits.
        return len(text.rstrip(string.digits))
    return exc.pos_in_stream or 0


def parse(text: str) -> Duration:
    """Parse duration text such as ``1w6d23h49m59s`` into a Duration.

    Args:
        text: Concatenated ``<digits><unit>`` tokens with units from
            ``w, d, h, m, s``, each at most once and in that order.

    Returns:
        The parsed Duration.

    Raises:
        EmptyInputError: If text is empty.
        InvalidNumberError: If an amount exceeds the representable range.
        UnknownUnitError: If a unit letter is not supported.
        OutOfOrderUnitError: If a unit repeats or is not smaller than the previous one.
        DurationOverflowError: If the total exceeds the representable range.
        TrailingInputError: If characters outside the grammar are present.
        UnsupportedValueError: If text is not a string.
    """
    if not isinstance(text, str):
        raise UnsupportedValueError(
            ERR_MSG_UNSUPPORTED_VALUE,
            f"cannot parse {type(text).__name__} as a duration",
        )
    if not text:
        raise EmptyInputError(
            ERR_MSG_EMPTY_INPUT,
            "empty string is not a duration",
            text=text,
            position=0,
            fragment="",
        )

    try:
        tree = _lark.parse(text)
    except UnexpectedInput as e:
        position = _trailing_position(text, e)
        error = TrailingInputError(
            ERR_MSG_TRAILING_INPUT,
            f"unexpected {text[position:position + 16]!r} at position {position} of {text!r}",
            wrapped=e,
            text=text,
            position=position,
            fragment=text[position:],
        )
        logger.debug("rejected duration: %s", error.internal())
        raise error from e

    interpreter = ComponentInterpreter(text)
    try:
        interpreter.visit(tree)
    except ParseError as e:
        logger.debug("rejected duration: %s", e.internal())
        raise

    logger.debug("parsed duration %r as %d seconds", text, interpreter.total)
    return Duration(interpreter.total)
