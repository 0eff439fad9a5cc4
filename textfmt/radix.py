#
# textfmt Radix Conversion
#

# Standard library -----------------------------------------------------------------------------------------------------
import string
from enum import IntEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_integer
from .tools import fmt_type, fmt_value


# @formatter:off

class RadixConf:
    """
    Constants for radix conversion.

    Attributes:
        DIGITS: Digit alphabet for bases up to 36, uppercase.
        MIN_RADIX, MAX_RADIX: Supported base range, inclusive.
        PREFIXES: Conventional literal prefixes by base. Bases not listed
            (decimal included) have no prefix.
        BYTEWISE_DIGITS: Digits used to show one byte in a given base when
            bytewise padding is on. Bases not listed keep the caller's
            min_digits.
    """
    DIGITS = string.digits + string.ascii_uppercase

    MIN_RADIX = 2
    MAX_RADIX = 36

    PREFIXES = {
        2: "0b",
        8: "0o",
        16: "0x",
    }

    BYTEWISE_DIGITS = {
        2: 8,   # 11111111
        8: 4,   # 0377
        16: 2,  # FF
    }

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Radix(IntEnum):
    """
    Named numeral bases.

    Any int in 2..36 is accepted wherever a Radix is expected; the named
    members only add readability and a conventional prefix.
    """
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16

    @property
    def prefix(self) -> str:
        """Conventional literal prefix, '0b', '0o', '0x' or '' for decimal."""
        return radix_prefix(self)


# Methods --------------------------------------------------------------------------------------------------------------

def validate_radix(radix: Radix | int) -> Radix | int:
    """
    Validate a numeral base and return it as Radix when it has a name.

    Returns:
        Radix member for 2, 8, 10 and 16, plain int for other bases.

    Raises:
        TypeError: If radix is not an int (bool included).
        ValueError: If radix is outside 2..36.

    Examples:
        >>> validate_radix(16)
        <Radix.HEX: 16>
        >>> validate_radix(36)
        36
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise TypeError(f"radix must be int, but got {fmt_type(radix)}")
    if not RadixConf.MIN_RADIX <= radix <= RadixConf.MAX_RADIX:
        raise ValueError(f"radix must be between {RadixConf.MIN_RADIX} and {RadixConf.MAX_RADIX}, "
                         f"but got {fmt_value(radix)}")
    try:
        return Radix(radix)
    except ValueError:
        return int(radix)


def radix_prefix(radix: Radix | int) -> str:
    """Conventional prefix for radix, empty string when none exists."""
    return RadixConf.PREFIXES.get(int(radix), "")


def radix_digits(value: int, radix: Radix | int = Radix.DECIMAL, *, uppercase: bool = True) -> str:
    """
    Convert the magnitude of an integer to a digit string in the given base.

    The sign is never part of the result; callers decide how to show it.

    Args:
        value: Integer to convert. Types implementing __index__ are accepted.
        radix: Numeral base, 2..36.
        uppercase: Use 'A'-'Z' for digits above 9, else 'a'-'z'.

    Returns:
        Non-empty digit string, "0" for zero.

    Raises:
        TypeError: If value is not integer-like or radix is not an int.
        ValueError: If radix is outside 2..36.

    Examples:
        >>> radix_digits(255, 16)
        'FF'
        >>> radix_digits(-5, Radix.BINARY)
        '101'
        >>> radix_digits(35, 36, uppercase=False)
        'z'
    """
    base = int(validate_radix(radix))
    n = abs(std_integer(value))

    # Builtin conversions are much faster for large ints
    if base == 10:
        return str(n)
    if base == 16:
        digits = format(n, 'X')
    elif base == 8:
        digits = format(n, 'o')
    elif base == 2:
        digits = format(n, 'b')
    else:
        chars = []
        while n:
            n, rem = divmod(n, base)
            chars.append(RadixConf.DIGITS[rem])
        digits = "".join(reversed(chars)) or "0"

    return digits if uppercase else digits.lower()
