"""Evaluation of arithmetic expressions held as trees."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class Operation(enum.Enum):
    """An operation to perform on two subexpressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class BinaryOp:
    """An operation on two subexpressions."""

    op: Operation
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Value:
    """A literal value."""

    value: int


Expression = Union[BinaryOp, Value]


class EvaluationError(ArithmeticError):
    """Raised when an expression cannot be evaluated."""


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: Expression) -> int:
    """Evaluate an expression tree.

    Division truncates toward zero; dividing by zero raises EvaluationError.
    """
    match expression:
        case Value(value=value):
            return value
        case BinaryOp(op=op, left=left_expr, right=right_expr):
            left = evaluate(left_expr)
            right = evaluate(right_expr)
            if op is Operation.ADD:
                return left + right
            if op is Operation.SUB:
                return left - right
            if op is Operation.MUL:
                return left * right
            if right == 0:
                raise EvaluationError("division by zero")
            return _truncating_divide(left, right)
    raise TypeError(f"not an expression: {expression!r}")