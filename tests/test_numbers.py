import pytest

from drills.numbers import collatz_length, fib, luhn, main


def test_collatz_length():
    assert collatz_length(11) == 15


def test_collatz_length_of_one_and_below():
    assert collatz_length(1) == 1
    assert collatz_length(0) == 1


def test_collatz_length_step_invariant():
    for n in range(2, 50):
        following = n // 2 if n % 2 == 0 else 3 * n + 1
        assert collatz_length(n) == collatz_length(following) + 1


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


def test_fib_twenty():
    assert fib(20) == 6765


def test_fib_recurrence():
    for n in range(2, 30):
        assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_negative_raises():
    with pytest.raises(ValueError):
        fib(-1)


def test_valid_cc_number():
    assert luhn("4263 9826 4026 9299")
    assert luhn("4539 3195 0343 6467")
    assert luhn("7992 7398 713")


def test_invalid_cc_number():
    assert not luhn("4223 9826 4026 9299")
    assert not luhn("4539 3195 0343 6476")
    assert not luhn("8273 1232 7352 0569")


def test_non_digit_cc_number():
    assert not luhn("foo")
    assert not luhn("foo 0 0")


@pytest.mark.parametrize("text", ["", " ", "  ", "    "])
def test_empty_cc_number(text):
    assert not luhn(text)


def test_single_digit_cc_number():
    assert not luhn("0")


def test_two_digit_cc_number():
    assert luhn(" 0 0 ")


def test_main_prints_results(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "fib(20) = 6765" in out
    assert "Length: 15" in out
    assert "Is 7992 7398 713 a valid credit card number? yes" in out


def test_main_checks_given_numbers(capsys):
    assert main(["foo"]) == 0
    out = capsys.readouterr().out
    assert "Is foo a valid credit card number? no" in out