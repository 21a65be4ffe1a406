import pytest

from drills.tree_eval import BinaryOp, EvaluationError, Operation, Value, evaluate


def test_value():
    assert evaluate(Value(19)) == 19


def test_sum():
    assert evaluate(BinaryOp(Operation.ADD, Value(10), Value(20))) == 30


def test_recursion():
    term1 = BinaryOp(Operation.MUL, Value(10), Value(9))
    term2 = BinaryOp(
        Operation.MUL,
        BinaryOp(Operation.SUB, Value(3), Value(4)),
        Value(5),
    )
    assert evaluate(BinaryOp(Operation.ADD, term1, term2)) == 85


@pytest.mark.parametrize("op", [Operation.ADD, Operation.MUL, Operation.SUB])
def test_zeros(op):
    assert evaluate(BinaryOp(op, Value(0), Value(0))) == 0


def test_error():
    with pytest.raises(EvaluationError, match="division by zero"):
        evaluate(BinaryOp(Operation.DIV, Value(99), Value(0)))


def test_error_in_subexpression_propagates():
    inner = BinaryOp(Operation.DIV, Value(1), Value(0))
    with pytest.raises(EvaluationError, match="division by zero"):
        evaluate(BinaryOp(Operation.ADD, Value(1), inner))


def test_division_truncates_toward_zero():
    assert evaluate(BinaryOp(Operation.DIV, Value(-7), Value(2))) == -3
    assert evaluate(BinaryOp(Operation.DIV, Value(7), Value(-2))) == -3
    assert evaluate(BinaryOp(Operation.DIV, Value(7), Value(2))) == 3


def test_subtraction_of_twenty_and_ten():
    assert evaluate(BinaryOp(Operation.SUB, Value(20), Value(10))) == 10