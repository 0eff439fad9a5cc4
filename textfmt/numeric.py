"""
Normalize numeric inputs before formatting.

Formatters accept values from the standard library and from third-party
libraries (NumPy scalars, Decimal, Fraction, pandas scalars). These helpers
reduce them to plain Python int or float so the formatting code only has
to deal with builtin types.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Any, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


# Methods --------------------------------------------------------------------------------------------------------------

def std_integer(value: Any) -> int:
    """
    Convert an integer-like value to a Python int.

    Parameters
    ----------
    value : int or any type implementing __index__
        NumPy integer scalars and other exact integer types are accepted.
        Floats are rejected even when integer-valued: formatting 15.0 as
        hex is almost always a caller bug.

    Returns
    -------
    int
        Exact value with arbitrary precision.

    Raises
    ------
    TypeError
        For bool, float, str and any type without __index__.

    Examples
    --------
    >>> std_integer(42)
    42
    >>> std_integer(numpy.uint8(255))
    255
    >>> std_integer(15.0)
    Traceback (most recent call last):
        ...
    TypeError: integer value expected, but got <type: float>
    """
    if isinstance(value, bool):
        raise TypeError(f"integer value expected, but got {fmt_type(value)}")
    if isinstance(value, int):
        return value
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(f"integer value expected, but got {fmt_type(value)}") from exc


def std_numeric(
        value: Any,
        *,
        on_error: Literal["raise", "nan", "none"] = "raise",
        allow_bool: bool = False,
) -> int | float | None:
    """
    Convert numeric types to standard Python int, float, or None.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float/None, Decimal,
        Fraction, and third-party types via __index__, .item() or __float__.

    on_error : {"raise", "nan", "none"}, default "raise"
        How to handle unsupported types (str, list, dict, ...):

        - "raise": Raise TypeError
        - "nan": Return float('nan')
        - "none": Return None

        Numeric edge cases (inf, nan, overflow) are valid values and are
        always returned as is.

    allow_bool : bool, default False
        If True, convert bool to int. If False, treat bool as a type error.

    Returns
    -------
    int
        For Python int, types implementing __index__ (NumPy integers) and
        integer-valued Decimal/Fraction.
    float
        For float and float-like values, including inf and nan.
    None
        For None, pandas.NA, or type errors when on_error="none".

    Examples
    --------
    >>> std_numeric(Decimal('42.0'))
    42
    >>> std_numeric(Fraction(1, 4))
    0.25
    >>> std_numeric("abc", on_error="none") is None
    True
    """
    if value is None:
        return None

    if isinstance(value, bool):
        if allow_bool:
            return int(value)
        return _on_error(on_error, f"boolean values not supported, got {value}")

    # Fast path for builtins
    if isinstance(value, (int, float)):
        return value

    # pandas.NA has __float__ but raises TypeError on it
    cls = type(value)
    if cls.__name__ == "NAType" and "pandas" in getattr(cls, "__module__", ""):
        return math.nan

    # Exact integers: NumPy integer scalars and friends
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as exc:
            return _on_error(on_error, f"cannot convert {fmt_type(value)} to int via __index__: {exc}")

    # Array and tensor scalars
    if callable(getattr(value, 'item', None)):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            return std_numeric(result, on_error=on_error, allow_bool=allow_bool)
        if isinstance(result, (int, float)):
            return result

    # Integer-valued Decimal/Fraction keep arbitrary precision
    if cls.__name__ in ('Decimal', 'Fraction') and hasattr(value, '__int__'):
        try:
            as_int = int(value)
            if value == cls(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            pass

    if hasattr(value, '__float__'):
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            return _on_error(on_error, f"cannot convert {fmt_type(value)} to float: {exc}")

    return _on_error(on_error, f"unsupported numeric type: {fmt_type(value)}")


# Private Methods ------------------------------------------------------------------------------------------------------

def _on_error(on_error: str, message: str) -> float | None:
    if on_error == "raise":
        raise TypeError(message)
    elif on_error == "nan":
        return math.nan
    elif on_error == "none":
        return None
    raise ValueError(f"on_error must be 'raise', 'nan' or 'none', but got {on_error!r}")
