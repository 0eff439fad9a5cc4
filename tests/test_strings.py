#
# textfmt - Padding & Alignment Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import FrozenInstanceError

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from textfmt.integers import IntegerFormatter
from textfmt.strings import Alignment, StringFormatter, pad


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPad:

    @pytest.mark.parametrize(
        "text, width, alignment, expected",
        [
            pytest.param("23", 5, Alignment.RIGHT, "   23", id="right"),
            pytest.param("23", 5, Alignment.LEFT, "23   ", id="left"),
            pytest.param("23", 7, Alignment.CENTER, "   23  ", id="center-odd-extra-left"),
            pytest.param("23", 6, Alignment.CENTER, "  23  ", id="center-even"),
            pytest.param("23", 3, Alignment.CENTER, " 23", id="center-one"),
            pytest.param("", 3, Alignment.LEFT, "   ", id="empty-text"),
        ],
    )
    def test_alignment(self, text, width, alignment, expected):
        assert pad(text, width, alignment=alignment) == expected

    def test_default_is_right(self):
        assert pad("23", 5) == "   23"

    def test_padding_character(self):
        assert pad("23", 7, alignment="center", padding_character="-") == "---23--"
        assert pad("23", 5, padding_character="0") == "00023"

    @pytest.mark.parametrize(
        "width",
        [
            pytest.param(0, id="zero"),
            pytest.param(2, id="exact"),
            pytest.param(1, id="narrower"),
        ],
    )
    @pytest.mark.parametrize("alignment", list(Alignment))
    def test_never_truncates(self, width, alignment):
        assert pad("23", width, alignment=alignment) == "23"

    @pytest.mark.parametrize("alignment", list(Alignment))
    def test_idempotent(self, alignment):
        once = pad("abc", 8, alignment=alignment, padding_character="*")
        assert pad(once, 8, alignment=alignment, padding_character="*") == once
        assert len(once) == 8

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            pytest.param({"width": -1}, ValueError, id="negative-width"),
            pytest.param({"width": 5.0}, TypeError, id="float-width"),
            pytest.param({"padding_character": ""}, ValueError, id="empty-fill"),
            pytest.param({"padding_character": "ab"}, ValueError, id="long-fill"),
            pytest.param({"alignment": "middle"}, ValueError, id="unknown-alignment"),
            pytest.param({"alignment": 3}, TypeError, id="int-alignment"),
        ],
    )
    def test_invalid_arguments(self, kwargs, error):
        with pytest.raises(error):
            pad("23", **kwargs)

    def test_text_must_be_str(self):
        with pytest.raises(TypeError, match="text must be str"):
            pad(23, 5)


class TestStringFormatter:

    @pytest.mark.parametrize(
        "formatter, value, expected",
        [
            pytest.param(StringFormatter(width=5), 23, "   23", id="int"),
            pytest.param(StringFormatter(padding_character="0", width=5), 23, "00023", id="zero-fill"),
            pytest.param(StringFormatter(alignment=Alignment.LEFT, width=5), 23, "23   ", id="left"),
            pytest.param(StringFormatter(width=5), 23.0, " 23.0", id="float"),
            pytest.param(StringFormatter(width=8), True, "    True", id="bool"),
            pytest.param(StringFormatter.center(7), "23", "   23  ", id="center-preset"),
            pytest.param(StringFormatter(), "abc", "abc", id="no-width"),
        ],
    )
    def test_format(self, formatter, value, expected):
        assert formatter.format(value) == expected

    def test_call_site_width_overrides(self, field5):
        assert field5.format(23, width=8) == "      23"
        assert field5.width == 5
        assert field5.format(23) == "   23"

    def test_call_site_zero_width_uses_stored(self, field5):
        assert field5.format(23, width=0) == "   23"

    def test_call_site_negative_width(self, field5):
        with pytest.raises(ValueError):
            field5.format(23, width=-2)

    def test_render(self, field5):
        hex_fmt = IntegerFormatter.hex(uses_prefix=True)
        assert StringFormatter(width=6).format(255, render=hex_fmt) == "  0xFF"
        assert field5.format(2.5, render=lambda x: f"{x:.2f}") == " 2.50"

    def test_str_is_pre_rendered(self, field5):
        """Strings are padded as given, render is not applied."""
        assert field5.format("ab", render=repr) == "   ab"

    def test_render_must_return_str(self, field5):
        with pytest.raises(TypeError, match="render must return str"):
            field5.format(23, render=lambda x: x)

    def test_callable(self, field5):
        assert field5(42) == "   42"

    @pytest.mark.parametrize(
        "name, expected",
        [
            pytest.param("left", Alignment.LEFT, id="lower"),
            pytest.param("CENTER", Alignment.CENTER, id="upper"),
            pytest.param(Alignment.RIGHT, Alignment.RIGHT, id="member"),
        ],
    )
    def test_alignment_coercion(self, name, expected):
        assert StringFormatter(alignment=name).alignment is expected

    @pytest.mark.parametrize(
        "preset, alignment",
        [
            pytest.param(StringFormatter.left, Alignment.LEFT, id="left"),
            pytest.param(StringFormatter.right, Alignment.RIGHT, id="right"),
            pytest.param(StringFormatter.center, Alignment.CENTER, id="center"),
        ],
    )
    def test_presets(self, preset, alignment):
        f = preset(9, "_")
        assert f == StringFormatter(alignment=alignment, padding_character="_", width=9)

    def test_merge(self, field5):
        merged = field5.merge(alignment="left", padding_character=".")
        assert merged.format(1) == "1...."
        assert field5.format(1) == "    1"

    def test_frozen(self, field5):
        with pytest.raises(FrozenInstanceError):
            field5.width = 10

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            pytest.param({"width": -1}, ValueError, id="negative-width"),
            pytest.param({"width": True}, TypeError, id="bool-width"),
            pytest.param({"padding_character": ""}, ValueError, id="empty-fill"),
            pytest.param({"padding_character": "--"}, ValueError, id="long-fill"),
            pytest.param({"padding_character": 0}, TypeError, id="int-fill"),
            pytest.param({"alignment": "justify"}, ValueError, id="unknown-alignment"),
        ],
    )
    def test_invalid_config(self, kwargs, error):
        with pytest.raises(error):
            StringFormatter(**kwargs)
