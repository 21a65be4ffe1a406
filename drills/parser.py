"""Tokenizer and parser for a tiny addition and subtraction language."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

_DIGITS = frozenset("0123456789")
_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_IDENT_START = _LOWER | {"_"}
_IDENT_CHARS = _IDENT_START | _DIGITS
_U32_MAX = 2**32 - 1


class Op(enum.Enum):
    """An arithmetic operator."""

    ADD = "+"
    SUB = "-"


class TokenKind(enum.Enum):
    """The kind of a token."""

    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    """A token: digits or a name as text, or an operator."""

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


class ParserError(Exception):
    """Base class for errors raised while parsing."""


class TokenizerError(ParserError):
    """An unexpected character was found in the input."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Unexpected character '{char}' in input")
        self.char = char


class UnexpectedEOF(ParserError):
    """The input ended where more was expected."""

    def __init__(self) -> None:
        super().__init__("Unexpected end of input")


class UnexpectedToken(ParserError):
    """A token appeared where it is not allowed."""

    def __init__(self, token: Token) -> None:
        super().__init__(f"Unexpected token {token!r}")
        self.token = token


class InvalidNumber(ParserError):
    """A number literal does not fit in an unsigned 32-bit integer."""

    def __init__(self, text: str) -> None:
        super().__init__("Invalid number")
        self.text = text


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of the text, raising TokenizerError on a bad character."""
    position = 0
    length = len(text)
    while position < length:
        char = text[position]
        if char in _DIGITS or char in _IDENT_START:
            allowed = _DIGITS if char in _DIGITS else _IDENT_CHARS
            kind = TokenKind.NUMBER if char in _DIGITS else TokenKind.IDENTIFIER
            end = position + 1
            while end < length and text[end] in allowed:
                end += 1
            yield Token(kind, text[position:end])
            position = end
        elif char == "+":
            yield Token(TokenKind.OPERATOR, Op.ADD)
            position += 1
        elif char == "-":
            yield Token(TokenKind.OPERATOR, Op.SUB)
            position += 1
        else:
            raise TokenizerError(char)


def _operand(token: Token) -> Expression:
    if token.kind is TokenKind.NUMBER:
        assert isinstance(token.value, str)
        value = int(token.value)
        if value > _U32_MAX:
            raise InvalidNumber(token.value)
        return Number(value)
    if token.kind is TokenKind.IDENTIFIER:
        assert isinstance(token.value, str)
        return Var(token.value)
    raise UnexpectedToken(token)


def parse(text: str) -> Expression:
    """Parse the text into an expression; operators group to the right."""
    tokens = tokenize(text)
    operands: list[Expression] = []
    operators: list[Op] = []
    while True:
        token = next(tokens, None)
        if token is None:
            raise UnexpectedEOF()
        operands.append(_operand(token))
        follower = next(tokens, None)
        if follower is None:
            break
        if follower.kind is not TokenKind.OPERATOR:
            raise UnexpectedToken(follower)
        assert isinstance(follower.value, Op)
        operators.append(follower.value)

    expression = operands[-1]
    for left, op in zip(reversed(operands[:-1]), reversed(operators)):
        expression = Operation(left, op, expression)
    return expression