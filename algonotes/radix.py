"""Conversion of integers to bases 2 through 16."""

from __future__ import annotations

import argparse
import sys

_DIGITS = "0123456789ABCDEF"


def _check_base(base: int) -> None:
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")


def to_base(number: int, base: int) -> str:
    """Render *number* in *base*, pushing digits on a stack and popping them."""
    _check_base(base)
    sign = "-" if number < 0 else ""
    number = abs(number)
    stack = []
    while True:
        number, digit = divmod(number, base)
        stack.append(_DIGITS[digit])
        if number == 0:
            break
    result = [sign]
    while stack:
        result.append(stack.pop())
    return "".join(result)


def to_base_reversed(number: int, base: int) -> str:
    """Render *number* in *base*, collecting digits low first and reversing."""
    _check_base(base)
    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = []
    while True:
        number, digit = divmod(number, base)
        digits.append(_DIGITS[digit])
        if number == 0:
            break
    digits.reverse()
    return sign + "".join(digits)


def main(argv: list[str] | None = None) -> int:
    """Print a number converted to the requested base, by both methods."""
    parser = argparse.ArgumentParser(description="Convert an integer to base 2-16.")
    parser.add_argument("number", type=int)
    parser.add_argument("base", type=int)
    args = parser.parse_args(argv)
    try:
        print(to_base(args.number, args.base))
        print(to_base_reversed(args.number, args.base))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())