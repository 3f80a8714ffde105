"""Tokenizer and parser for a small expression language of sums and differences."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union

_U32_MAX = 2**32 - 1
_DIGITS = frozenset("0123456789")
_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_IDENT_REST = _LOWER | _DIGITS | {"_"}


class Op(Enum):
    """An arithmetic operator."""

    ADD = "+"
    SUB = "-"

    def __repr__(self) -> str:
        return self.name.capitalize()


class TokenKind(Enum):
    """The kinds of token in the expression language."""

    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    """A token: a number's digits, an identifier's name, or an operator."""

    kind: TokenKind
    value: Union[str, Op]


@dataclass(frozen=True)
class Var:
    """A reference to a variable."""

    name: str


@dataclass(frozen=True)
class Number:
    """A literal number."""

    value: int


@dataclass(frozen=True)
class Operation:
    """A binary operation."""

    left: Expression
    op: Op
    right: Expression


Expression = Union[Var, Number, Operation]


class TokenizerError(ValueError):
    """Raised on a character that cannot start a token."""

    def __init__(self, character: str) -> None:
        super().__init__(f"Unexpected character '{character}' in input")
        self.character = character


class ParserError(ValueError):
    """Raised when input is not a valid expression."""


class UnexpectedEOF(ParserError):
    """Raised when input ends where an operand is required."""

    def __init__(self) -> None:
        super().__init__("Unexpected end of input")


class UnexpectedToken(ParserError):
    """Raised on a token that cannot appear where it was found."""

    def __init__(self, token: Token) -> None:
        super().__init__(f"Unexpected token {token!r}")
        self.token = token


class InvalidNumber(ParserError):
    """Raised on a number that does not fit in 32 unsigned bits."""

    def __init__(self, digits: str) -> None:
        super().__init__("Invalid number")
        self.digits = digits


def tokenize(input_text: str) -> Iterator[Token]:
    """Yield the tokens of `input_text`, raising TokenizerError on a bad character."""
    position = 0
    length = len(input_text)
    while position < length:
        char = input_text[position]
        if char in _DIGITS or char in _LOWER:
            allowed = _DIGITS if char in _DIGITS else _IDENT_REST
            end = position + 1
            while end < length and input_text[end] in allowed:
                end += 1
            kind = TokenKind.NUMBER if char in _DIGITS else TokenKind.IDENTIFIER
            yield Token(kind, input_text[position:end])
            position = end
        elif char in ("+", "-"):
            yield Token(TokenKind.OPERATOR, Op(char))
            position += 1
        else:
            raise TokenizerError(char)


def _operand(token: Token) -> Expression:
    if token.kind is TokenKind.NUMBER:
        value = int(token.value)
        if value > _U32_MAX:
            raise InvalidNumber(str(token.value))
        return Number(value)
    if token.kind is TokenKind.IDENTIFIER:
        return Var(str(token.value))
    raise UnexpectedToken(token)


def _parse_tokens(tokens: Iterator[Token]) -> Expression:
    operands: list[Expression] = []
    operators: list[Op] = []
    while True:
        token = next(tokens, None)
        if token is None:
            raise UnexpectedEOF()
        operands.append(_operand(token))
        following = next(tokens, None)
        if following is None:
            break
        if following.kind is not TokenKind.OPERATOR:
            raise UnexpectedToken(following)
        operators.append(following.value)  # type: ignore[arg-type]

    # Operations group to the right: a+b-c is a+(b-c).
    expression = operands[-1]
    for left, op in zip(reversed(operands[:-1]), reversed(operators)):
        expression = Operation(left, op, expression)
    return expression


def parse(input_text: str) -> Expression:
    """Parse `input_text` into an expression tree."""
    try:
        return _parse_tokens(tokenize(input_text))
    except TokenizerError as err:
        raise ParserError(f"Tokenizer error: {err}") from err


def main(argv: list[str] | None = None) -> int:
    try:
        expression = parse("10+foo+20-30")
    except ParserError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print(repr(expression))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())