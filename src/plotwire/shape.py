from enum import Enum
from typing import Any

from plotwire.color import ColorLike, to_color
from plotwire.common import Line
from plotwire.encoding import PlotlyObject, num_or_string


class ShapeType(str, Enum):
    CIRCLE = "circle"
    RECT = "rect"
    PATH = "path"
    LINE = "line"


class ShapeLayer(str, Enum):
    ABOVE = "above"
    BELOW = "below"


class SizeMode(str, Enum):
    SCALED = "scaled"
    PIXEL = "pixel"


class FillRule(str, Enum):
    EVEN_ODD = "evenodd"
    NON_ZERO = "nonzero"


class Shape(PlotlyObject):
    """
    A line, rectangle, circle or SVG path drawn on the plot.

    Coordinates are interpreted according to `x_ref`/`y_ref`: "x"/"y" (the
    default) places them in data space, "paper" in [0, 1] relative to the plot
    area. Coordinates accept numbers or strings, so shapes can sit on date and
    category axes:

        Shape().shape_type(ShapeType.RECT).x0("2015-02-04").x1("2015-02-06")
    """

    _aliases = {
        "shape_type": "type",
        "x_ref": "xref",
        "x_size_mode": "xsizemode",
        "x_anchor": "xanchor",
        "y_ref": "yref",
        "y_size_mode": "ysizemode",
        "y_anchor": "yanchor",
        "fill_color": "fillcolor",
        "fill_rule": "fillrule",
        "template_item_name": "templateitemname",
    }

    def visible(self, visible: bool) -> "Shape":
        return self._set("visible", visible)

    def shape_type(self, shape_type: ShapeType) -> "Shape":
        return self._set("shape_type", shape_type)

    def layer(self, layer: ShapeLayer) -> "Shape":
        return self._set("layer", layer)

    def x_ref(self, x_ref: str) -> "Shape":
        return self._set("x_ref", x_ref)

    def x_size_mode(self, x_size_mode: SizeMode) -> "Shape":
        return self._set("x_size_mode", x_size_mode)

    def x_anchor(self, x_anchor: Any) -> "Shape":
        return self._set("x_anchor", num_or_string(x_anchor))

    def x0(self, x0: Any) -> "Shape":
        return self._set("x0", num_or_string(x0))

    def x1(self, x1: Any) -> "Shape":
        return self._set("x1", num_or_string(x1))

    def y_ref(self, y_ref: str) -> "Shape":
        return self._set("y_ref", y_ref)

    def y_size_mode(self, y_size_mode: SizeMode) -> "Shape":
        return self._set("y_size_mode", y_size_mode)

    def y_anchor(self, y_anchor: Any) -> "Shape":
        return self._set("y_anchor", num_or_string(y_anchor))

    def y0(self, y0: Any) -> "Shape":
        return self._set("y0", num_or_string(y0))

    def y1(self, y1: Any) -> "Shape":
        return self._set("y1", num_or_string(y1))

    def path(self, path: str) -> "Shape":
        return self._set("path", path)

    def opacity(self, opacity: float) -> "Shape":
        return self._set("opacity", opacity)

    def line(self, line: Line) -> "Shape":
        return self._set("line", line)

    def fill_color(self, fill_color: ColorLike) -> "Shape":
        return self._set("fill_color", to_color(fill_color))

    def fill_rule(self, fill_rule: FillRule) -> "Shape":
        return self._set("fill_rule", fill_rule)

    def editable(self, editable: bool) -> "Shape":
        return self._set("editable", editable)

    def name(self, name: str) -> "Shape":
        return self._set("name", name)

    def template_item_name(self, template_item_name: str) -> "Shape":
        return self._set("template_item_name", template_item_name)
