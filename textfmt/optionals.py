"""
Presentation of optional values, where None stands for "value absent".

Three styles are supported; see OptionalStyle. The absent text defaults to
'nil' and is configurable per formatter.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, Callable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType
from .tools import fmt_type, fmt_value


# @formatter:off

class OptionalConf:
    """
    Default configuration constants for OptionalFormatter.

    Attributes:
        ABSENT_TEXT: Text shown in place of an absent value.
        MARKER: Wrapper name used by the descriptive style, as in 'Optional(23)'.
    """
    ABSENT_TEXT = "nil"
    MARKER = "Optional"

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class OptionalStyle(StrEnum):
    """
    Rendering styles for optional values.

    Attributes:
        DESCRIPTIVE: Always wrapped - 'Optional(23)', 'Optional(nil)'
        STRIPPED: Never wrapped - '23', 'nil'
        SYSTEM: The renderer's own form with no wrapper added - '23', 'nil'.
            Unlike STRIPPED, str values are not taken as pre-rendered and go
            through the renderer as well, so render=repr shows "'abc'".
    """
    DESCRIPTIVE = "descriptive"
    STRIPPED = "stripped"
    SYSTEM = "system"


@dataclass(frozen=True)
class OptionalFormatter:
    """
    Formats values that may be absent (None).

    Attributes:
        style: OptionalStyle member or its name.
        absent_text: Text for the absent case.

    Examples:
        >>> OptionalFormatter.descriptive().format(23)
        'Optional(23)'
        >>> OptionalFormatter.descriptive().format(None)
        'Optional(nil)'
        >>> OptionalFormatter().format(23)
        '23'
        >>> OptionalFormatter(absent_text="-").format(None)
        '-'
    """
    style: OptionalStyle | str = OptionalStyle.STRIPPED
    absent_text: str = OptionalConf.ABSENT_TEXT

    def __post_init__(self):
        object.__setattr__(self, 'style', _validate_style(self.style))
        if not isinstance(self.absent_text, str):
            raise TypeError(f"absent_text must be str, but got {fmt_type(self.absent_text)}")

    def __call__(self, value: Any) -> str:
        return self.format(value)

    # Presets ------------------------------------------

    @classmethod
    def descriptive(cls, absent_text: str = OptionalConf.ABSENT_TEXT) -> Self:
        return cls(style=OptionalStyle.DESCRIPTIVE, absent_text=absent_text)

    @classmethod
    def stripped(cls, absent_text: str = OptionalConf.ABSENT_TEXT) -> Self:
        return cls(style=OptionalStyle.STRIPPED, absent_text=absent_text)

    @classmethod
    def system(cls, absent_text: str = OptionalConf.ABSENT_TEXT) -> Self:
        return cls(style=OptionalStyle.SYSTEM, absent_text=absent_text)

    def merge(self,
              style: OptionalStyle | str | UnsetType = UNSET,
              absent_text: str | UnsetType = UNSET,
              ) -> "OptionalFormatter":
        """
        Create a new OptionalFormatter with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return OptionalFormatter(
            style=self.style if style is UNSET else style,
            absent_text=self.absent_text if absent_text is UNSET else absent_text,
        )

    # Formatting ---------------------------------------

    def format(self, value: Any, *, render: Callable[[Any], str] = str) -> str:
        """
        Format an optional value according to style.

        Args:
            value: The value, or None when absent.
            render: Conversion to text for present values, str() by default.

        Returns:
            Formatted text.
        """
        if self.style == OptionalStyle.DESCRIPTIVE:
            inner = self.absent_text if value is None else _render(value, render)
            return f"{OptionalConf.MARKER}({inner})"
        elif self.style == OptionalStyle.STRIPPED:
            return self.absent_text if value is None else _render(value, render)
        else:
            # SYSTEM: no wrapper added here, and str values go through render too
            if value is None:
                return self.absent_text
            return _render(value, render, pre_rendered=False)


# Methods --------------------------------------------------------------------------------------------------------------

def present(value: Any,
            formatter: OptionalFormatter | None = None,
            *,
            render: Callable[[Any], str] = str) -> str:
    """
    Format an optional value, None meaning absent.

    Args:
        value: The value, or None.
        formatter: Style configuration; OptionalFormatter() (stripped, 'nil') if None.
        render: Conversion to text for present values.

    Examples:
        >>> present(23)
        '23'
        >>> present(None)
        'nil'
        >>> present(None, OptionalFormatter.descriptive())
        'Optional(nil)'
        >>> present(15, render=IntegerFormatter.hex(is_bytewise=True))
        '0F'
    """
    formatter = OptionalFormatter() if formatter is None else formatter
    if not isinstance(formatter, OptionalFormatter):
        raise TypeError(f"formatter must be OptionalFormatter or None, but got {fmt_type(formatter)}")
    return formatter.format(value, render=render)


def or_default(value: Any, default: str, *, render: Callable[[Any], str] = str) -> str:
    """
    Render value, or return default text when value is None.

    Examples:
        >>> or_default(1, "-NIL-")
        '1'
        >>> or_default(None, "-NIL-")
        '-NIL-'
    """
    if not isinstance(default, str):
        raise TypeError(f"default must be str, but got {fmt_type(default)}")
    return default if value is None else _render(value, render)


# Private Methods ------------------------------------------------------------------------------------------------------

def _render(value: Any, render: Callable[[Any], str], pre_rendered: bool = True) -> str:
    if pre_rendered and isinstance(value, str):
        return value
    text = render(value)
    if not isinstance(text, str):
        raise TypeError(f"render must return str, but got {fmt_type(text)}")
    return text


def _validate_style(style: OptionalStyle | str) -> OptionalStyle:
    if isinstance(style, OptionalStyle):
        return style
    if not isinstance(style, str):
        raise TypeError(f"style must be OptionalStyle or str, but got {fmt_type(style)}")
    try:
        return OptionalStyle(style.lower())
    except ValueError:
        raise ValueError(f"style expected one of 'descriptive', 'stripped', 'system' "
                         f"but found {fmt_value(style)}") from None
