#
# textfmt Phrase Helpers
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .integers import IntegerFormatter
from .numeric import std_integer
from .tools import fmt_type

_TWO_DIGITS = IntegerFormatter(min_digits=2)
_THREE_DIGITS = IntegerFormatter(min_digits=3)


# Methods --------------------------------------------------------------------------------------------------------------

def plural(count: int, zero: str, one: str, many: str) -> str:
    """
    Pick one of three words by count.

    Exact match on 0 and 1; every other count, negatives included, picks many.
    No locale plural rules.

    Examples:
        >>> plural(0, "no items", "one item", "items")
        'no items'
        >>> plural(1, "ZERO", "ONE", "MANY")
        'ONE'
        >>> plural(-5, "ZERO", "ONE", "MANY")
        'MANY'
    """
    count = std_integer(count)
    if count == 0:
        return zero
    elif count == 1:
        return one
    return many


def include_if(condition: bool, literal: str) -> str:
    """
    Return literal when condition is truthy, else an empty string.

    Example:
        >>> "Bacon" + include_if(starred, " (*)")
        'Bacon (*)'
    """
    if not isinstance(literal, str):
        raise TypeError(f"literal must be str, but got {fmt_type(literal)}")
    return literal if condition else ""


def two_digits(value: int | float) -> str:
    """
    Zero-pad a number to two integer digits, as in clock times.

    Integers are padded to two digits with the sign first. Floats below 10
    get one leading zero and keep their str() form.

    Examples:
        >>> two_digits(5)
        '05'
        >>> two_digits(55)
        '55'
        >>> two_digits(5.0)
        '05.0'
        >>> two_digits(-5)
        '-05'
    """
    if isinstance(value, float):
        return ("0" if 0 <= value < 10 else "") + str(value)
    return _TWO_DIGITS.format(value)


def three_digits(value: Any) -> str:
    """
    Zero-pad an integer to three digits.

    Examples:
        >>> three_digits(5)
        '005'
        >>> three_digits(55)
        '055'
        >>> three_digits(5555)
        '5555'
    """
    return _THREE_DIGITS.format(value)
