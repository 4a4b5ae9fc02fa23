# %%
import pytest

from plotwire.color import (
    ColorScalePalette,
    NamedColor,
    Rgb,
    Rgba,
    to_color,
    to_color_array,
    to_color_scale,
)


def test_named_color():
    assert to_color(NamedColor.RED) == "red"
    assert to_color(NamedColor.ALICE_BLUE) == "aliceblue"
    assert to_color(NamedColor.TRANSPARENT) == "transparent"


def test_rgb_and_rgba():
    assert to_color(Rgb(255, 0, 10)) == "rgb(255, 0, 10)"
    assert to_color(Rgba(211, 211, 211, 1.0)) == "rgba(211, 211, 211, 1)"
    assert to_color(Rgba(0, 0, 0, 0.5)) == "rgba(0, 0, 0, 0.5)"


def test_tuple_shorthand():
    assert to_color((1, 2, 3)) == "rgb(1, 2, 3)"
    assert to_color((1, 2, 3, 0.25)) == "rgba(1, 2, 3, 0.25)"


def test_strings_pass_through():
    # no validation of free-form colors
    assert to_color("#CE2029") == "#CE2029"
    assert to_color("not a color") == "not a color"


def test_unsupported_color():
    with pytest.raises(TypeError):
        to_color(42)
    with pytest.raises(TypeError):
        to_color((1, 2))


def test_color_array():
    assert to_color_array([NamedColor.BLUE, (0, 0, 0), "#fff"]) == [
        "blue",
        "rgb(0, 0, 0)",
        "#fff",
    ]


def test_color_scale():
    assert to_color_scale(ColorScalePalette.VIRIDIS) == "Viridis"
    assert to_color_scale("Hot") == "Hot"
    assert to_color_scale([(0, "red"), (1.0, NamedColor.BLUE)]) == [
        [0, "red"],
        [1.0, "blue"],
    ]
