"""
Integer formatting with radix, prefix, sign and zero-padding rules.

IntegerFormatter is a frozen configuration object. Build it once, through
the constructor or one of the radix presets, and reuse it for any number
of format() calls, from any number of threads.
"""

# ## Sign and zero padding
#
# Zero padding counts digits only. The sign always comes first, ahead of the
# radix prefix and the padding:
#
#   IntegerFormatter(min_digits=6).format(-1234)          -> "-001234"
#   IntegerFormatter.hex(uses_prefix=True, is_bytewise=True).format(-15) -> "-0x0F"
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .radix import Radix, RadixConf, radix_digits, radix_prefix, validate_radix
from .numeric import std_integer
from .sentinels import UNSET, UnsetType
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class IntegerFormatter:
    """
    Formats integers as digit strings in a chosen radix.

    Attributes:
        radix: Numeral base. Radix member or any int in 2..36.
        uses_prefix: Prepend the conventional radix prefix ('0b', '0o', '0x').
            Decimal and non-standard bases have no conventional prefix.
        explicit_positive_sign: Show '+' for non-negative decimal values.
        is_bytewise: Pad to the digits of one byte in the radix (binary 8,
            octal 4, hex 2). Overrides min_digits for those bases only.
        min_digits: Minimum digit count, zero-padded on the left. Never truncates.
        uppercase: Letter digits in uppercase ('FF') or lowercase ('ff').
        prefix: Explicit prefix, used instead of the conventional one. When set,
            it is always applied, regardless of uses_prefix.
        suffix: Text appended after the digits, e.g. 'h' for '0Fh'.

    Examples:
        >>> IntegerFormatter.hex().format(15)
        'F'
        >>> IntegerFormatter.hex(is_bytewise=True).format(15)
        '0F'
        >>> IntegerFormatter.hex(uses_prefix=True, is_bytewise=True).format(15)
        '0x0F'
        >>> IntegerFormatter.octal(min_digits=5, uses_prefix=True).format(1234)
        '0o02322'
        >>> IntegerFormatter(explicit_positive_sign=True).format(7)
        '+7'

    Formatter instances are callables, so they plug into any render= parameter:
        >>> present(255, render=IntegerFormatter.hex(uses_prefix=True))
        '0xFF'
    """
    radix: Radix | int = Radix.DECIMAL
    uses_prefix: bool = False
    explicit_positive_sign: bool = False
    is_bytewise: bool = False
    min_digits: int = 0
    uppercase: bool = True
    prefix: str | None = None
    suffix: str = ""

    def __post_init__(self):
        """Validate fields, normalize radix to a Radix member where possible."""
        object.__setattr__(self, 'radix', validate_radix(self.radix))

        for name in ('uses_prefix', 'explicit_positive_sign', 'is_bytewise', 'uppercase'):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be bool, but got {fmt_type(getattr(self, name))}")

        if isinstance(self.min_digits, bool) or not isinstance(self.min_digits, int):
            raise TypeError(f"min_digits must be int, but got {fmt_type(self.min_digits)}")
        if self.min_digits < 0:
            raise ValueError(f"min_digits must be >= 0, but got {fmt_value(self.min_digits)}")

        if not isinstance(self.prefix, (str, type(None))):
            raise TypeError(f"prefix must be str | None, but got {fmt_type(self.prefix)}")
        if not isinstance(self.suffix, str):
            raise TypeError(f"suffix must be str, but got {fmt_type(self.suffix)}")

    def __call__(self, value: Any) -> str:
        return self.format(value)

    # Presets ------------------------------------------

    @classmethod
    def binary(cls, **kwargs) -> Self:
        """Base 2 formatter, e.g. '1111' or '0b00001111' with prefix and bytewise padding."""
        return cls(radix=Radix.BINARY, **kwargs)

    @classmethod
    def octal(cls, **kwargs) -> Self:
        """Base 8 formatter, e.g. '17' or '0o0017' with prefix and bytewise padding."""
        return cls(radix=Radix.OCTAL, **kwargs)

    @classmethod
    def decimal(cls, **kwargs) -> Self:
        """Base 10 formatter, the only radix honoring explicit_positive_sign."""
        return cls(radix=Radix.DECIMAL, **kwargs)

    @classmethod
    def hex(cls, **kwargs) -> Self:
        """Base 16 formatter, e.g. 'F' or '0x0F' with prefix and bytewise padding."""
        return cls(radix=Radix.HEX, **kwargs)

    def merge(self,
              radix: Radix | int | UnsetType = UNSET,
              uses_prefix: bool | UnsetType = UNSET,
              explicit_positive_sign: bool | UnsetType = UNSET,
              is_bytewise: bool | UnsetType = UNSET,
              min_digits: int | UnsetType = UNSET,
              uppercase: bool | UnsetType = UNSET,
              prefix: str | None | UnsetType = UNSET,
              suffix: str | UnsetType = UNSET,
              ) -> "IntegerFormatter":
        """
        Create a new IntegerFormatter with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.
        The current instance is never modified.
        """
        return IntegerFormatter(
            radix=self.radix if radix is UNSET else radix,
            uses_prefix=self.uses_prefix if uses_prefix is UNSET else uses_prefix,
            explicit_positive_sign=(self.explicit_positive_sign if explicit_positive_sign is UNSET
                                    else explicit_positive_sign),
            is_bytewise=self.is_bytewise if is_bytewise is UNSET else is_bytewise,
            min_digits=self.min_digits if min_digits is UNSET else min_digits,
            uppercase=self.uppercase if uppercase is UNSET else uppercase,
            prefix=self.prefix if prefix is UNSET else prefix,
            suffix=self.suffix if suffix is UNSET else suffix,
        )

    # Formatting ---------------------------------------

    @property
    def effective_min_digits(self) -> int:
        """
        Minimum digit count applied by format().

        Bytewise padding replaces min_digits with the per-radix byte width,
        radices without a byte width keep min_digits. Derived on access,
        never stored.
        """
        if self.is_bytewise:
            return RadixConf.BYTEWISE_DIGITS.get(int(self.radix), self.min_digits)
        return self.min_digits

    @property
    def effective_prefix(self) -> str:
        """Prefix placed between the sign and the digits."""
        if self.prefix is not None:
            return self.prefix
        return radix_prefix(self.radix) if self.uses_prefix else ""

    def format(self, value: Any) -> str:
        """
        Format an integer.

        Args:
            value: int or integer-like value implementing __index__ (NumPy ints).

        Returns:
            Formatted string, never empty.

        Raises:
            TypeError: If value is not integer-like (bool and float included).
        """
        number = std_integer(value)

        digits = radix_digits(number, self.radix, uppercase=self.uppercase)
        digits = digits.rjust(self.effective_min_digits, "0")
        text = self.effective_prefix + digits + self.suffix

        if number < 0:
            return "-" + text
        if self.explicit_positive_sign and self.radix == Radix.DECIMAL:
            return "+" + text
        return text
