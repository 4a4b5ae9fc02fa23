# %%
import datetime
import json

import pytest

from plotwire.color import NamedColor, Rgba
from plotwire.common import DashType, Line
from plotwire.shape import FillRule, Shape, ShapeLayer, ShapeType, SizeMode


def test_rect_shape_keys():
    shape = (
        Shape()
        .shape_type(ShapeType.RECT)
        .x_ref("x")
        .y_ref("paper")
        .x0(2.0)
        .y0(0.0)
        .x1(3.0)
        .y1(1.0)
        .fill_color(Rgba(211, 211, 211, 1.0))
        .opacity(0.2)
        .layer(ShapeLayer.BELOW)
        .line(Line().width(0))
    )
    assert shape.for_json() == {
        "type": "rect",
        "xref": "x",
        "yref": "paper",
        "x0": 2.0,
        "y0": 0.0,
        "x1": 3.0,
        "y1": 1.0,
        "fillcolor": "rgba(211, 211, 211, 1)",
        "opacity": 0.2,
        "layer": "below",
        "line": {"width": 0},
    }


def test_line_shape_dash():
    shape = (
        Shape()
        .shape_type(ShapeType.LINE)
        .line(Line().color("CE2029").width(4).dash(DashType.DASH_DOT))
    )
    assert shape.for_json() == {
        "type": "line",
        "line": {"color": "CE2029", "width": 4, "dash": "dashdot"},
    }
    assert Line().dash("5px,10px").for_json() == {"dash": "5px,10px"}


def test_date_coordinates():
    shape = Shape().x0("2015-02-04").x1(datetime.date(2015, 2, 6)).y0(0)
    assert json.loads(shape.to_json()) == {
        "x0": "2015-02-04",
        "x1": "2015-02-06",
        "y0": 0,
    }


def test_pixel_sizing_and_path():
    shape = (
        Shape()
        .shape_type(ShapeType.PATH)
        .path("M 0 0 L 1 1 Z")
        .x_size_mode(SizeMode.PIXEL)
        .x_anchor(1)
        .fill_rule(FillRule.EVEN_ODD)
        .fill_color(NamedColor.BLUE)
    )
    assert shape.for_json() == {
        "type": "path",
        "path": "M 0 0 L 1 1 Z",
        "xsizemode": "pixel",
        "xanchor": 1,
        "fillrule": "evenodd",
        "fillcolor": "blue",
    }


def test_coordinates_reject_bool():
    with pytest.raises(TypeError):
        Shape().x0(True)
