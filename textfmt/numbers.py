"""
Number formatting through pluggable formatters, with a safe fallback.

fmt_number() never raises for values a formatter cannot handle: it emits
'Unformattable<repr>' instead, so a bad value in a log line or a status
display does not take the caller down. Locale-aware formatting is left to
external NumberFormatter implementations; FractionFormatter is a plain,
locale-independent one.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import decimal
import logging
import math
from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_numeric
from .sentinels import UNSET, UnsetType
from .tools import fmt_type, fmt_value

logger = logging.getLogger(__name__)

ROUNDING_MODES = (
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
)


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class NumberFormatter(Protocol):
    """
    Protocol for number formatters used by fmt_number().

    format() returns the formatted text, or None when the value cannot be
    represented.
    """

    def format(self, value: Any) -> str | None: ...


@dataclass(frozen=True)
class FractionFormatter:
    """
    Formats numbers with a bounded count of fraction digits.

    Always shows at least one integer digit ('0.5', not '.5'). Fraction
    digits beyond min_fraction_digits are dropped when they are trailing zeros.

    Attributes:
        max_fraction_digits: Upper bound on fraction digits; extra digits are rounded.
        min_fraction_digits: Fraction digits always shown, zero-filled.
        grouping: Insert ',' thousands separators.
        rounding: A decimal module rounding mode, ROUND_HALF_EVEN by default.

    Examples:
        >>> FractionFormatter(max_fraction_digits=0).format(123.456)
        '123'
        >>> FractionFormatter(max_fraction_digits=2).format(123.456)
        '123.46'
        >>> FractionFormatter(max_fraction_digits=99).format(123.456)
        '123.456'
        >>> FractionFormatter(grouping=True).format(1234567.25)
        '1,234,567.2'
        >>> FractionFormatter().format(float('nan')) is None
        True
    """
    max_fraction_digits: int = 1
    min_fraction_digits: int = 0
    grouping: bool = False
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self):
        for name in ('max_fraction_digits', 'min_fraction_digits'):
            digits = getattr(self, name)
            if isinstance(digits, bool) or not isinstance(digits, int):
                raise TypeError(f"{name} must be int, but got {fmt_type(digits)}")
            if digits < 0:
                raise ValueError(f"{name} must be >= 0, but got {fmt_value(digits)}")

        if self.min_fraction_digits > self.max_fraction_digits:
            raise ValueError(f"min_fraction_digits must not exceed max_fraction_digits, "
                             f"but got {self.min_fraction_digits} > {self.max_fraction_digits}")

        if not isinstance(self.grouping, bool):
            raise TypeError(f"grouping must be bool, but got {fmt_type(self.grouping)}")

        if self.rounding not in ROUNDING_MODES:
            raise ValueError(f"rounding must be a decimal rounding mode, but got {fmt_value(self.rounding)}")

    def __call__(self, value: Any) -> str:
        return fmt_number(value, self)

    @classmethod
    def fraction_digits(cls, max_fraction_digits: int = 1) -> Self:
        """Preset with no grouping and up to max_fraction_digits fraction digits."""
        return cls(max_fraction_digits=max_fraction_digits)

    def merge(self,
              max_fraction_digits: int | UnsetType = UNSET,
              min_fraction_digits: int | UnsetType = UNSET,
              grouping: bool | UnsetType = UNSET,
              rounding: str | UnsetType = UNSET,
              ) -> "FractionFormatter":
        """
        Create a new FractionFormatter with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return FractionFormatter(
            max_fraction_digits=self.max_fraction_digits if max_fraction_digits is UNSET else max_fraction_digits,
            min_fraction_digits=self.min_fraction_digits if min_fraction_digits is UNSET else min_fraction_digits,
            grouping=self.grouping if grouping is UNSET else grouping,
            rounding=self.rounding if rounding is UNSET else rounding,
        )

    def format(self, value: Any) -> str | None:
        """
        Format value, or return None when it is not a finite number.

        bool, str and other non-numeric values are not formatted.
        """
        number = std_numeric(value, on_error="none")
        if number is None:
            return None
        if isinstance(number, float) and not math.isfinite(number):
            return None

        # repr() of a float is its shortest round-tripping form: 123.456, not 123.4560000000000030695...
        if isinstance(number, float):
            amount = decimal.Decimal(repr(float(number)))
        else:
            amount = decimal.Decimal(int(number))

        if -amount.as_tuple().exponent > self.max_fraction_digits:
            amount = amount.quantize(decimal.Decimal(1).scaleb(-self.max_fraction_digits),
                                     rounding=self.rounding)

        text = format(amount, ",f" if self.grouping else "f")
        return self._trim_fraction(text)

    def _trim_fraction(self, text: str) -> str:
        """Drop trailing fraction zeros beyond min_fraction_digits, zero-fill up to it."""
        integer, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0")
        fraction = fraction.ljust(self.min_fraction_digits, "0")
        return f"{integer}.{fraction}" if fraction else integer


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_number(value: Any, formatter: NumberFormatter) -> str:
    """
    Format a number with an external formatter, never failing.

    When the formatter returns None, or raises TypeError, ValueError or
    ArithmeticError, the result is 'Unformattable<repr(value)>'.

    Args:
        value: Any value; meant for numbers.
        formatter: Object implementing the NumberFormatter protocol.

    Returns:
        Formatted text or the Unformattable marker.

    Raises:
        TypeError: If formatter does not implement NumberFormatter. This is a
            programming error rather than an unformattable value.

    Examples:
        >>> fmt_number(123.456, FractionFormatter(max_fraction_digits=2))
        '123.46'
        >>> fmt_number(float('inf'), FractionFormatter())
        'Unformattable<inf>'
    """
    if not isinstance(formatter, NumberFormatter):
        raise TypeError(f"formatter must implement NumberFormatter, but got {fmt_type(formatter)}")

    try:
        text = formatter.format(value)
    except (TypeError, ValueError, ArithmeticError) as exc:
        logger.debug("formatter %s failed on %r: %s", type(formatter).__name__, value, exc)
        text = None

    if text is None:
        logger.debug("value %r is unformattable with %s", value, type(formatter).__name__)
        return unformattable(value)
    return text


def unformattable(value: Any) -> str:
    """Marker text for a value no formatter could represent."""
    try:
        value_repr = repr(value)
    except Exception as exc:
        value_repr = f"<{type(value).__name__} object (repr failed: {type(exc).__name__})>"
    return f"Unformattable<{value_repr}>"
