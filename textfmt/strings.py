#
# textfmt Padding & Alignment
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, Callable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType
from .tools import fmt_type, fmt_value


# @formatter:off

class StringConf:
    """
    Default configuration constants for StringFormatter.

    Attributes:
        PADDING_CHARACTER: Fill character used when none is given.
        WIDTH: Minimum field width, 0 means no minimum.
    """
    PADDING_CHARACTER = " "
    WIDTH = 0

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Alignment(StrEnum):
    """
    Placement of text inside a padded field.

    Attributes:
        LEFT: Text first, padding on the right - "23   "
        RIGHT: Padding on the left, text last - "   23"
        CENTER: Padding on both sides, odd extra character on the left - "   23  "
    """
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class StringFormatter:
    """
    Pads the text form of any value to a minimum width.

    Attributes:
        alignment: Alignment member or its name ('left', 'right', 'center').
        padding_character: Single fill character.
        width: Minimum width; 0 disables padding.

    Examples:
        >>> StringFormatter(width=5).format(23)
        '   23'
        >>> StringFormatter(padding_character="0", width=5).format(23)
        '00023'
        >>> StringFormatter.left(5).format(23)
        '23   '
        >>> StringFormatter.center(7).format("23")
        '   23  '

    A non-zero width passed to format() wins over the stored width for that call:
        >>> StringFormatter(width=3).format(23, width=6)
        '    23'
    """
    alignment: Alignment | str = Alignment.RIGHT
    padding_character: str = StringConf.PADDING_CHARACTER
    width: int = StringConf.WIDTH

    def __post_init__(self):
        """Validate fields and coerce alignment names to Alignment."""
        object.__setattr__(self, 'alignment', _validate_alignment(self.alignment))
        _validate_padding_character(self.padding_character)
        _validate_width(self.width)

    def __call__(self, value: Any) -> str:
        return self.format(value)

    # Presets ------------------------------------------

    @classmethod
    def left(cls, width: int = StringConf.WIDTH, padding_character: str = StringConf.PADDING_CHARACTER) -> Self:
        return cls(alignment=Alignment.LEFT, padding_character=padding_character, width=width)

    @classmethod
    def right(cls, width: int = StringConf.WIDTH, padding_character: str = StringConf.PADDING_CHARACTER) -> Self:
        return cls(alignment=Alignment.RIGHT, padding_character=padding_character, width=width)

    @classmethod
    def center(cls, width: int = StringConf.WIDTH, padding_character: str = StringConf.PADDING_CHARACTER) -> Self:
        return cls(alignment=Alignment.CENTER, padding_character=padding_character, width=width)

    def merge(self,
              alignment: Alignment | str | UnsetType = UNSET,
              padding_character: str | UnsetType = UNSET,
              width: int | UnsetType = UNSET,
              ) -> "StringFormatter":
        """
        Create a new StringFormatter with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return StringFormatter(
            alignment=self.alignment if alignment is UNSET else alignment,
            padding_character=self.padding_character if padding_character is UNSET else padding_character,
            width=self.width if width is UNSET else width,
        )

    # Formatting ---------------------------------------

    def format(self, value: Any, width: int = 0, *, render: Callable[[Any], str] = str) -> str:
        """
        Render value to text and pad it.

        Args:
            value: Any value. A str is used as is, anything else goes through render.
            width: Call-site width; when non-zero it replaces the stored width
                for this call only.
            render: Conversion to text for non-str values, str() by default.

        Returns:
            Padded text, or the rendered text unchanged if already wide enough.

        Raises:
            ValueError: If width is negative.
        """
        _validate_width(width)
        text = value if isinstance(value, str) else render(value)
        if not isinstance(text, str):
            raise TypeError(f"render must return str, but got {fmt_type(text)}")
        return pad(text,
                   width or self.width,
                   alignment=self.alignment,
                   padding_character=self.padding_character)


# Methods --------------------------------------------------------------------------------------------------------------

def pad(text: str,
        width: int = 0,
        *,
        alignment: Alignment | str = Alignment.RIGHT,
        padding_character: str = StringConf.PADDING_CHARACTER) -> str:
    """
    Pad text to a minimum width.

    Text already at least width characters long is returned unchanged; text
    is never truncated. Centered padding puts deficit // 2 characters on the
    right and the rest on the left, so an odd extra character goes left.

    Args:
        text: Text to pad.
        width: Minimum resulting length.
        alignment: Where the text sits inside the field.
        padding_character: Single fill character.

    Returns:
        Padded text.

    Raises:
        TypeError: If text is not str.
        ValueError: If width is negative, padding_character is not a single
            character or alignment is unknown.

    Examples:
        >>> pad("23", 5)
        '   23'
        >>> pad("23", 5, alignment="left")
        '23   '
        >>> pad("23", 7, alignment="center", padding_character="-")
        '---23--'
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")
    _validate_width(width)
    _validate_padding_character(padding_character)
    alignment = _validate_alignment(alignment)

    deficit = width - len(text)
    if deficit <= 0:
        return text

    if alignment == Alignment.RIGHT:
        return padding_character * deficit + text
    elif alignment == Alignment.LEFT:
        return text + padding_character * deficit
    else:
        half = deficit // 2
        return padding_character * (deficit - half) + text + padding_character * half


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_alignment(alignment: Alignment | str) -> Alignment:
    if isinstance(alignment, Alignment):
        return alignment
    if not isinstance(alignment, str):
        raise TypeError(f"alignment must be Alignment or str, but got {fmt_type(alignment)}")
    try:
        return Alignment(alignment.lower())
    except ValueError:
        raise ValueError(f"alignment expected one of 'left', 'right', 'center' "
                         f"but found {fmt_value(alignment)}") from None


def _validate_padding_character(padding_character: str):
    if not isinstance(padding_character, str):
        raise TypeError(f"padding_character must be str, but got {fmt_type(padding_character)}")
    if len(padding_character) != 1:
        raise ValueError(f"padding_character must be a single character, "
                         f"but got {fmt_value(padding_character)}")


def _validate_width(width: int):
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"width must be int, but got {fmt_type(width)}")
    if width < 0:
        raise ValueError(f"width must be >= 0, but got {fmt_value(width)}")
