"""Small integer routines: Fibonacci numbers, Collatz lengths and the Luhn check."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_DIGITS = "0123456789"
_DEMO_NUMBER = "7992 7398 713"


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError(f"fib is not defined for negative n: {n}")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def collatz_length(n: int) -> int:
    """Return the length of the Collatz sequence starting at n, counting n itself."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def luhn(cc_number: str) -> bool:
    """Check a card number with the Luhn algorithm.

    Whitespace is ignored, any other non-digit makes the number invalid, and
    at least two digits are required.
    """
    total = 0
    digits = 0
    for char in reversed(cc_number):
        if char in _DIGITS:
            digit = int(char)
            if digits % 2 == 1:
                doubled = digit * 2
                total += doubled - 9 if doubled > 9 else doubled
            else:
                total += digit
            digits += 1
        elif char.isspace():
            continue
        else:
            return False
    return digits >= 2 and total % 10 == 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print a Fibonacci number, a Collatz length and Luhn verdicts."""
    parser = argparse.ArgumentParser(description="Number drills.")
    parser.add_argument("numbers", nargs="*", help="card numbers to check")
    args = parser.parse_args(argv)

    n = 20
    print(f"fib({n}) = {fib(n)}")
    print(f"Length: {collatz_length(11)}")
    for cc_number in args.numbers or [_DEMO_NUMBER]:
        verdict = "yes" if luhn(cc_number) else "no"
        print(f"Is {cc_number} a valid credit card number? {verdict}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())