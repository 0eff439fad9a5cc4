#
# textfmt Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, max_repr: int = 120) -> str:
    """
    Format type information for exception messages.

    Accepts both type objects and instances, so validation code can pass
    whatever it received without checking first.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
        >>> fmt_type(3.5)
        '<type: float>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)
    return f"<type: {_fmt_truncate(type_name, max_repr)}>"


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Handles broken __repr__ and very long representations, since the value
    being reported is usually the one that failed validation.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("abc")
        "<str: 'abc'>"
        >>> fmt_value("x" * 200, max_repr=8)
        "<str: 'xxxx...>"
    """
    t = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as exc:
        base_repr = f"<{t} object (repr failed: {type(exc).__name__})>"

    # Keep the wrapper brackets unambiguous
    base_repr = base_repr.replace(">", "\\>")
    return f"<{t}: {_fmt_truncate(base_repr, max_repr)}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "...") -> str:
    """Truncate s to at most max_len characters, ellipsis included."""
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s
    if max_len <= len(ellipsis):
        return ellipsis[:max_len]
    return s[:max_len - len(ellipsis)] + ellipsis
