"""
Sentinel used by formatter merge() overrides.

UNSET distinguishes an override that was not provided from one explicitly
set to None, which matters for fields such as IntegerFormatter.prefix where
None is a meaningful value ("use the conventional radix prefix").

Example:
    >>> hex_fmt = IntegerFormatter.hex(uses_prefix=True)
    >>> hex_fmt.merge(prefix=None)      # explicit None is kept
    >>> hex_fmt.merge()                 # UNSET fields are inherited
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, compared by identity and pickled back to the same instance.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""


# Methods --------------------------------------------------------------------------------------------------------------

def ifunset(value: Any, *, default: Any = None) -> Any:
    """
    Return default if value is UNSET, otherwise return value.

    Example:
        >>> ifunset(UNSET, default=8)
        8
        >>> ifunset(None, default=8) is None
        True
    """
    return default if value is UNSET else value
