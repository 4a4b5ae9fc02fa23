from enum import Enum
from typing import Any, List, Sequence, Union

import numpy as np

from plotwire.color import (
    ColorLike,
    ColorScaleLike,
    to_color,
    to_color_or_array,
    to_color_scale,
)
from plotwire.encoding import PlotlyObject, num_or_string_array, to_array


class Anchor(str, Enum):
    AUTO = "auto"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class Side(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class Orientation(str, Enum):
    VERTICAL = "v"
    HORIZONTAL = "h"


class TickMode(str, Enum):
    AUTO = "auto"
    LINEAR = "linear"
    ARRAY = "array"


class TicksDirection(str, Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


class ThicknessMode(str, Enum):
    FRACTION = "fraction"
    PIXELS = "pixels"


class DashType(str, Enum):
    SOLID = "solid"
    DOT = "dot"
    DASH = "dash"
    LONG_DASH = "longdash"
    DASH_DOT = "dashdot"
    LONG_DASH_DOT = "longdashdot"


class LineShape(str, Enum):
    LINEAR = "linear"
    SPLINE = "spline"
    HV = "hv"
    VH = "vh"
    HVH = "hvh"
    VHV = "vhv"


class Calendar(str, Enum):
    GREGORIAN = "gregorian"
    CHINESE = "chinese"
    COPTIC = "coptic"
    DISCWORLD = "discworld"
    ETHIOPIAN = "ethiopian"
    HEBREW = "hebrew"
    ISLAMIC = "islamic"
    JULIAN = "julian"
    MAYAN = "mayan"
    NANAKSHAHI = "nanakshahi"
    NEPALI = "nepali"
    PERSIAN = "persian"
    JALALI = "jalali"
    TAIWAN = "taiwan"
    THAI = "thai"
    UMMALQURA = "ummalqura"


def to_dash(dash: Union[DashType, str]) -> str:
    # free-form dash lengths such as "5px,10px,2px" are passed through
    if isinstance(dash, DashType):
        return dash.value
    return dash


class Font(PlotlyObject):
    def family(self, family: str) -> "Font":
        return self._set("family", family)

    def size(self, size: int) -> "Font":
        return self._set("size", size)

    def color(self, color: ColorLike) -> "Font":
        return self._set("color", to_color(color))


class Pad(PlotlyObject):
    _aliases = {"top": "t", "bottom": "b", "left": "l"}

    def top(self, top: int) -> "Pad":
        return self._set("top", top)

    def bottom(self, bottom: int) -> "Pad":
        return self._set("bottom", bottom)

    def left(self, left: int) -> "Pad":
        return self._set("left", left)


class Title(PlotlyObject):
    _aliases = {
        "x_ref": "xref",
        "y_ref": "yref",
        "x_anchor": "xanchor",
        "y_anchor": "yanchor",
    }

    def __init__(self, text: str | None = None) -> None:
        super().__init__()
        if text is not None:
            self._values["text"] = text

    def text(self, text: str) -> "Title":
        return self._set("text", text)

    def font(self, font: Font) -> "Title":
        return self._set("font", font)

    def side(self, side: Side) -> "Title":
        return self._set("side", side)

    def x(self, x: float) -> "Title":
        return self._set("x", x)

    def y(self, y: float) -> "Title":
        return self._set("y", y)

    def x_ref(self, x_ref: str) -> "Title":
        return self._set("x_ref", x_ref)

    def y_ref(self, y_ref: str) -> "Title":
        return self._set("y_ref", y_ref)

    def x_anchor(self, x_anchor: Anchor) -> "Title":
        return self._set("x_anchor", x_anchor)

    def y_anchor(self, y_anchor: Anchor) -> "Title":
        return self._set("y_anchor", y_anchor)

    def pad(self, pad: Pad) -> "Title":
        return self._set("pad", pad)


def to_title(title: Union[Title, str]) -> Title:
    return Title(title) if isinstance(title, str) else title


class Label(PlotlyObject):
    """Hover label styling."""

    _aliases = {
        "background_color": "bgcolor",
        "border_color": "bordercolor",
        "name_length": "namelength",
    }

    def background_color(self, background_color: ColorLike) -> "Label":
        return self._set("background_color", to_color(background_color))

    def border_color(self, border_color: ColorLike) -> "Label":
        return self._set("border_color", to_color(border_color))

    def font(self, font: Font) -> "Label":
        return self._set("font", font)

    def align(self, align: str) -> "Label":
        return self._set("align", align)

    def name_length(self, name_length: int) -> "Label":
        return self._set("name_length", name_length)


class TickFormatStop(PlotlyObject):
    _aliases = {"dtick_range": "dtickrange", "template_item_name": "templateitemname"}

    def enabled(self, enabled: bool) -> "TickFormatStop":
        return self._set("enabled", enabled)

    def dtick_range(self, dtick_range: Sequence[Any]) -> "TickFormatStop":
        return self._set("dtick_range", num_or_string_array(dtick_range))

    def value(self, value: str) -> "TickFormatStop":
        return self._set("value", value)

    def name(self, name: str) -> "TickFormatStop":
        return self._set("name", name)

    def template_item_name(self, template_item_name: str) -> "TickFormatStop":
        return self._set("template_item_name", template_item_name)


class ColorBar(PlotlyObject):
    _aliases = {
        "thickness_mode": "thicknessmode",
        "length_mode": "lenmode",
        "length": "len",
        "x_anchor": "xanchor",
        "x_pad": "xpad",
        "y_anchor": "yanchor",
        "y_pad": "ypad",
        "outline_color": "outlinecolor",
        "outline_width": "outlinewidth",
        "border_color": "bordercolor",
        "border_width": "borderwidth",
        "background_color": "bgcolor",
        "tick_mode": "tickmode",
        "n_ticks": "nticks",
        "tick_values": "tickvals",
        "tick_text": "ticktext",
        "tick_length": "ticklen",
        "tick_width": "tickwidth",
        "tick_color": "tickcolor",
        "show_tick_labels": "showticklabels",
        "tick_font": "tickfont",
        "tick_angle": "tickangle",
        "tick_format": "tickformat",
        "tick_prefix": "tickprefix",
        "tick_suffix": "ticksuffix",
    }

    def thickness_mode(self, thickness_mode: ThicknessMode) -> "ColorBar":
        return self._set("thickness_mode", thickness_mode)

    def thickness(self, thickness: int) -> "ColorBar":
        return self._set("thickness", thickness)

    def length_mode(self, length_mode: ThicknessMode) -> "ColorBar":
        return self._set("length_mode", length_mode)

    def length(self, length: float) -> "ColorBar":
        return self._set("length", length)

    def x(self, x: float) -> "ColorBar":
        return self._set("x", x)

    def x_anchor(self, x_anchor: Anchor) -> "ColorBar":
        return self._set("x_anchor", x_anchor)

    def x_pad(self, x_pad: float) -> "ColorBar":
        return self._set("x_pad", x_pad)

    def y(self, y: float) -> "ColorBar":
        return self._set("y", y)

    def y_anchor(self, y_anchor: Anchor) -> "ColorBar":
        return self._set("y_anchor", y_anchor)

    def y_pad(self, y_pad: float) -> "ColorBar":
        return self._set("y_pad", y_pad)

    def outline_color(self, outline_color: ColorLike) -> "ColorBar":
        return self._set("outline_color", to_color(outline_color))

    def outline_width(self, outline_width: int) -> "ColorBar":
        return self._set("outline_width", outline_width)

    def border_color(self, border_color: ColorLike) -> "ColorBar":
        return self._set("border_color", to_color(border_color))

    def border_width(self, border_width: int) -> "ColorBar":
        return self._set("border_width", border_width)

    def background_color(self, background_color: ColorLike) -> "ColorBar":
        return self._set("background_color", to_color(background_color))

    def tick_mode(self, tick_mode: TickMode) -> "ColorBar":
        return self._set("tick_mode", tick_mode)

    def n_ticks(self, n_ticks: int) -> "ColorBar":
        return self._set("n_ticks", n_ticks)

    def tick0(self, tick0: float) -> "ColorBar":
        return self._set("tick0", tick0)

    def dtick(self, dtick: float) -> "ColorBar":
        return self._set("dtick", dtick)

    def tick_values(self, tick_values: Sequence[float]) -> "ColorBar":
        return self._set("tick_values", to_array(tick_values))

    def tick_text(self, tick_text: Sequence[str]) -> "ColorBar":
        return self._set("tick_text", list(tick_text))

    def ticks(self, ticks: TicksDirection) -> "ColorBar":
        return self._set("ticks", ticks)

    def tick_length(self, tick_length: int) -> "ColorBar":
        return self._set("tick_length", tick_length)

    def tick_width(self, tick_width: int) -> "ColorBar":
        return self._set("tick_width", tick_width)

    def tick_color(self, tick_color: ColorLike) -> "ColorBar":
        return self._set("tick_color", to_color(tick_color))

    def show_tick_labels(self, show_tick_labels: bool) -> "ColorBar":
        return self._set("show_tick_labels", show_tick_labels)

    def tick_font(self, tick_font: Font) -> "ColorBar":
        return self._set("tick_font", tick_font)

    def tick_angle(self, tick_angle: float) -> "ColorBar":
        return self._set("tick_angle", tick_angle)

    def tick_format(self, tick_format: str) -> "ColorBar":
        return self._set("tick_format", tick_format)

    def tick_prefix(self, tick_prefix: str) -> "ColorBar":
        return self._set("tick_prefix", tick_prefix)

    def tick_suffix(self, tick_suffix: str) -> "ColorBar":
        return self._set("tick_suffix", tick_suffix)

    def title(self, title: Union[Title, str]) -> "ColorBar":
        return self._set("title", to_title(title))


class Line(PlotlyObject):
    """Stroke settings, shared by shapes and trace lines."""

    def color(self, color: ColorLike) -> "Line":
        return self._set("color", to_color(color))

    def width(self, width: float) -> "Line":
        return self._set("width", width)

    def dash(self, dash: Union[DashType, str]) -> "Line":
        return self._set("dash", to_dash(dash))

    def shape(self, shape: LineShape) -> "Line":
        return self._set("shape", shape)

    def smoothing(self, smoothing: float) -> "Line":
        return self._set("smoothing", smoothing)


class Marker(PlotlyObject):
    _aliases = {
        "color_scale": "colorscale",
        "show_scale": "showscale",
        "color_bar": "colorbar",
    }

    def symbol(self, symbol: str) -> "Marker":
        return self._set("symbol", symbol)

    def size(self, size: Union[float, List[float]]) -> "Marker":
        if np.isscalar(size):
            return self._set("size", size)
        return self._set("size", to_array(size))

    def color(self, color: Any) -> "Marker":
        """A single color, a list of colors, or numbers mapped through `color_scale`."""
        return self._set("color", to_color_or_array(color))

    def opacity(self, opacity: float) -> "Marker":
        return self._set("opacity", opacity)

    def line(self, line: Line) -> "Marker":
        return self._set("line", line)

    def color_scale(self, color_scale: ColorScaleLike) -> "Marker":
        return self._set("color_scale", to_color_scale(color_scale))

    def show_scale(self, show_scale: bool) -> "Marker":
        return self._set("show_scale", show_scale)

    def color_bar(self, color_bar: ColorBar) -> "Marker":
        return self._set("color_bar", color_bar)
