from enum import Enum
from typing import Any, Sequence, Union

from plotwire.axis import Axis
from plotwire.color import ColorLike, ColorScaleLike, to_color, to_color_array, to_color_scale
from plotwire.common import Anchor, Calendar, ColorBar, Font, Label, Orientation, Title, to_title
from plotwire.encoding import PlotlyObject, TruthyEnum
from plotwire.shape import Shape


class BarMode(str, Enum):
    STACK = "stack"
    GROUP = "group"
    OVERLAY = "overlay"
    RELATIVE = "relative"


class BarNorm(str, Enum):
    EMPTY = ""
    FRACTION = "fraction"
    PERCENT = "percent"


class BoxMode(str, Enum):
    GROUP = "group"
    OVERLAY = "overlay"


class ViolinMode(str, Enum):
    GROUP = "group"
    OVERLAY = "overlay"


class WaterfallMode(str, Enum):
    GROUP = "group"
    OVERLAY = "overlay"


class Align(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class RowOrder(str, Enum):
    TOP_TO_BOTTOM = "top to bottom"
    BOTTOM_TO_TOP = "bottom to top"


class GridPattern(str, Enum):
    INDEPENDENT = "independent"
    COUPLED = "coupled"


class GridXSide(str, Enum):
    BOTTOM = "bottom"
    BOTTOM_PLOT = "bottom plot"
    TOP_PLOT = "top plot"
    TOP = "top"


class GridYSide(str, Enum):
    LEFT = "left"
    LEFT_PLOT = "left plot"
    RIGHT_PLOT = "right plot"
    RIGHT = "right"


class UniformTextMode(str, Enum):
    FALSE = "false"
    HIDE = "hide"
    SHOW = "show"


class HoverMode(str, Enum):
    X = "x"
    Y = "y"
    CLOSEST = "closest"
    FALSE = "false"
    X_UNIFIED = "x unified"
    Y_UNIFIED = "y unified"


class Legend(PlotlyObject):
    _aliases = {
        "background_color": "bgcolor",
        "border_color": "bordercolor",
        "border_width": "borderwidth",
        "trace_order": "traceorder",
        "trace_group_gap": "tracegroupgap",
        "item_sizing": "itemsizing",
        "item_click": "itemclick",
        "item_double_click": "itemdoubleclick",
        "x_anchor": "xanchor",
        "y_anchor": "yanchor",
    }

    def background_color(self, background_color: ColorLike) -> "Legend":
        return self._set("background_color", to_color(background_color))

    def border_color(self, border_color: ColorLike) -> "Legend":
        return self._set("border_color", to_color(border_color))

    def border_width(self, border_width: int) -> "Legend":
        return self._set("border_width", border_width)

    def font(self, font: Font) -> "Legend":
        return self._set("font", font)

    def orientation(self, orientation: Orientation) -> "Legend":
        return self._set("orientation", orientation)

    def trace_order(self, trace_order: str) -> "Legend":
        return self._set("trace_order", trace_order)

    def trace_group_gap(self, trace_group_gap: int) -> "Legend":
        return self._set("trace_group_gap", trace_group_gap)

    def item_sizing(self, item_sizing: str) -> "Legend":
        return self._set("item_sizing", item_sizing)

    def item_click(self, item_click: str) -> "Legend":
        return self._set("item_click", item_click)

    def item_double_click(self, item_double_click: str) -> "Legend":
        return self._set("item_double_click", item_double_click)

    def x(self, x: float) -> "Legend":
        return self._set("x", x)

    def x_anchor(self, x_anchor: Anchor) -> "Legend":
        return self._set("x_anchor", x_anchor)

    def y(self, y: float) -> "Legend":
        return self._set("y", y)

    def y_anchor(self, y_anchor: Anchor) -> "Legend":
        return self._set("y_anchor", y_anchor)

    def valign(self, valign: Align) -> "Legend":
        return self._set("valign", valign)

    def title(self, title: Union[Title, str]) -> "Legend":
        return self._set("title", to_title(title))


class Margin(PlotlyObject):
    """Plot margins in pixels."""

    _aliases = {
        "left": "l",
        "right": "r",
        "top": "t",
        "bottom": "b",
        "auto_expand": "autoexpand",
    }

    def left(self, left: int) -> "Margin":
        return self._set("left", left)

    def right(self, right: int) -> "Margin":
        return self._set("right", right)

    def top(self, top: int) -> "Margin":
        return self._set("top", top)

    def bottom(self, bottom: int) -> "Margin":
        return self._set("bottom", bottom)

    def pad(self, pad: int) -> "Margin":
        return self._set("pad", pad)

    def auto_expand(self, auto_expand: bool) -> "Margin":
        return self._set("auto_expand", auto_expand)


class LayoutColorScale(PlotlyObject):
    _aliases = {"sequential_minus": "sequentialminus"}

    def sequential(self, sequential: ColorScaleLike) -> "LayoutColorScale":
        return self._set("sequential", to_color_scale(sequential))

    def sequential_minus(self, sequential_minus: ColorScaleLike) -> "LayoutColorScale":
        return self._set("sequential_minus", to_color_scale(sequential_minus))

    def diverging(self, diverging: ColorScaleLike) -> "LayoutColorScale":
        return self._set("diverging", to_color_scale(diverging))


class ColorAxis(PlotlyObject):
    _aliases = {
        "auto_color_scale": "autocolorscale",
        "color_scale": "colorscale",
        "reverse_scale": "reversescale",
        "show_scale": "showscale",
        "color_bar": "colorbar",
    }

    def cauto(self, cauto: bool) -> "ColorAxis":
        return self._set("cauto", cauto)

    def cmin(self, cmin: float) -> "ColorAxis":
        return self._set("cmin", cmin)

    def cmax(self, cmax: float) -> "ColorAxis":
        return self._set("cmax", cmax)

    def cmid(self, cmid: float) -> "ColorAxis":
        return self._set("cmid", cmid)

    def color_scale(self, color_scale: ColorScaleLike) -> "ColorAxis":
        return self._set("color_scale", to_color_scale(color_scale))

    def auto_color_scale(self, auto_color_scale: bool) -> "ColorAxis":
        return self._set("auto_color_scale", auto_color_scale)

    def reverse_scale(self, reverse_scale: bool) -> "ColorAxis":
        return self._set("reverse_scale", reverse_scale)

    def show_scale(self, show_scale: bool) -> "ColorAxis":
        return self._set("show_scale", show_scale)

    def color_bar(self, color_bar: ColorBar) -> "ColorAxis":
        return self._set("color_bar", color_bar)


class GridDomain(PlotlyObject):
    def x(self, x: Sequence[float]) -> "GridDomain":
        return self._set("x", list(x))

    def y(self, y: Sequence[float]) -> "GridDomain":
        return self._set("y", list(y))


class LayoutGrid(PlotlyObject):
    """Subplot grid. `subplots` is a 2d list of axis-pair ids such as "xy" or "x2y2"."""

    _aliases = {
        "row_order": "roworder",
        "sub_plots": "subplots",
        "x_axes": "xaxes",
        "y_axes": "yaxes",
        "x_gap": "xgap",
        "y_gap": "ygap",
        "x_side": "xside",
        "y_side": "yside",
    }

    def rows(self, rows: int) -> "LayoutGrid":
        return self._set("rows", rows)

    def row_order(self, row_order: RowOrder) -> "LayoutGrid":
        return self._set("row_order", row_order)

    def columns(self, columns: int) -> "LayoutGrid":
        return self._set("columns", columns)

    def sub_plots(self, sub_plots: Sequence[Sequence[str]]) -> "LayoutGrid":
        return self._set("sub_plots", [list(row) for row in sub_plots])

    def x_axes(self, x_axes: Sequence[str]) -> "LayoutGrid":
        return self._set("x_axes", list(x_axes))

    def y_axes(self, y_axes: Sequence[str]) -> "LayoutGrid":
        return self._set("y_axes", list(y_axes))

    def pattern(self, pattern: GridPattern) -> "LayoutGrid":
        return self._set("pattern", pattern)

    def x_gap(self, x_gap: float) -> "LayoutGrid":
        return self._set("x_gap", x_gap)

    def y_gap(self, y_gap: float) -> "LayoutGrid":
        return self._set("y_gap", y_gap)

    def domain(self, domain: GridDomain) -> "LayoutGrid":
        return self._set("domain", domain)

    def x_side(self, x_side: GridXSide) -> "LayoutGrid":
        return self._set("x_side", x_side)

    def y_side(self, y_side: GridYSide) -> "LayoutGrid":
        return self._set("y_side", y_side)


class UniformText(PlotlyObject):
    _aliases = {"min_size": "minsize"}

    def mode(self, mode: UniformTextMode) -> "UniformText":
        return self._set("mode", TruthyEnum(mode))

    def min_size(self, min_size: int) -> "UniformText":
        return self._set("min_size", min_size)


class ModeBar(PlotlyObject):
    _aliases = {"background_color": "bgcolor", "active_color": "activecolor"}

    def orientation(self, orientation: Orientation) -> "ModeBar":
        return self._set("orientation", orientation)

    def background_color(self, background_color: ColorLike) -> "ModeBar":
        return self._set("background_color", to_color(background_color))

    def color(self, color: ColorLike) -> "ModeBar":
        return self._set("color", to_color(color))

    def active_color(self, active_color: ColorLike) -> "ModeBar":
        return self._set("active_color", to_color(active_color))


def _axis_setter(field: str):
    def setter(self: "Layout", axis: Axis) -> "Layout":
        return self._set(field, axis)

    setter.__name__ = field
    setter.__qualname__ = f"Layout.{field}"
    setter.__doc__ = f"Set the `{field.replace('_', '')}` axis."
    return setter


_AXIS_FIELDS = ["x_axis", "y_axis"] + [
    f"{dim}_axis{i}" for i in range(2, 9) for dim in ("x", "y")
]


class Layout(PlotlyObject):
    """
    Chart-wide configuration: title, legend, axes, shapes, colors and the
    per trace family grouping modes.

        Layout().title("Revenue").x_axis(Axis().title("Year")).bar_mode(BarMode.STACK)

    `x_axis`/`y_axis` address the primary axes; `x_axis2` .. `x_axis8` and
    `y_axis2` .. `y_axis8` the overlay axes referenced by traces as "x2", "y3"
    and so on.
    """

    _aliases = {
        "show_legend": "showlegend",
        "auto_size": "autosize",
        "uniform_text": "uniformtext",
        "paper_background_color": "paper_bgcolor",
        "plot_background_color": "plot_bgcolor",
        "color_scale": "colorscale",
        "color_way": "colorway",
        "color_axis": "coloraxis",
        "mode_bar": "modebar",
        "hover_mode": "hovermode",
        "click_mode": "clickmode",
        "drag_mode": "dragmode",
        "select_direction": "selectdirection",
        "hover_distance": "hoverdistance",
        "spike_distance": "spikedistance",
        "hover_label": "hoverlabel",
        "box_mode": "boxmode",
        "box_gap": "boxgap",
        "box_group_gap": "boxgroupgap",
        "bar_mode": "barmode",
        "bar_norm": "barnorm",
        "bar_gap": "bargap",
        "bar_group_gap": "bargroupgap",
        "violin_mode": "violinmode",
        "violin_gap": "violingap",
        "violin_group_gap": "violingroupgap",
        "waterfall_mode": "waterfallmode",
        "waterfall_gap": "waterfallgap",
        "waterfall_group_gap": "waterfallgroupgap",
        "pie_color_way": "piecolorway",
        "extend_pie_colors": "extendpiecolors",
        "sunburst_color_way": "sunburstcolorway",
        "extend_sunburst_colors": "extendsunburstcolors",
        **{field: field.replace("_", "") for field in _AXIS_FIELDS},
    }

    x_axis = _axis_setter("x_axis")
    y_axis = _axis_setter("y_axis")
    x_axis2 = _axis_setter("x_axis2")
    y_axis2 = _axis_setter("y_axis2")
    x_axis3 = _axis_setter("x_axis3")
    y_axis3 = _axis_setter("y_axis3")
    x_axis4 = _axis_setter("x_axis4")
    y_axis4 = _axis_setter("y_axis4")
    x_axis5 = _axis_setter("x_axis5")
    y_axis5 = _axis_setter("y_axis5")
    x_axis6 = _axis_setter("x_axis6")
    y_axis6 = _axis_setter("y_axis6")
    x_axis7 = _axis_setter("x_axis7")
    y_axis7 = _axis_setter("y_axis7")
    x_axis8 = _axis_setter("x_axis8")
    y_axis8 = _axis_setter("y_axis8")

    def title(self, title: Union[Title, str]) -> "Layout":
        return self._set("title", to_title(title))

    def show_legend(self, show_legend: bool) -> "Layout":
        return self._set("show_legend", show_legend)

    def legend(self, legend: Legend) -> "Layout":
        return self._set("legend", legend)

    def margin(self, margin: Margin) -> "Layout":
        return self._set("margin", margin)

    def auto_size(self, auto_size: bool) -> "Layout":
        return self._set("auto_size", auto_size)

    def width(self, width: int) -> "Layout":
        return self._set("width", width)

    def height(self, height: int) -> "Layout":
        return self._set("height", height)

    def font(self, font: Font) -> "Layout":
        return self._set("font", font)

    def uniform_text(self, uniform_text: UniformText) -> "Layout":
        return self._set("uniform_text", uniform_text)

    def separators(self, separators: str) -> "Layout":
        return self._set("separators", separators)

    def paper_background_color(self, paper_background_color: ColorLike) -> "Layout":
        return self._set("paper_background_color", to_color(paper_background_color))

    def plot_background_color(self, plot_background_color: ColorLike) -> "Layout":
        return self._set("plot_background_color", to_color(plot_background_color))

    def color_scale(self, color_scale: LayoutColorScale) -> "Layout":
        return self._set("color_scale", color_scale)

    def color_way(self, color_way: Sequence[ColorLike]) -> "Layout":
        return self._set("color_way", to_color_array(color_way))

    def color_axis(self, color_axis: ColorAxis) -> "Layout":
        return self._set("color_axis", color_axis)

    def mode_bar(self, mode_bar: ModeBar) -> "Layout":
        return self._set("mode_bar", mode_bar)

    def hover_mode(self, hover_mode: HoverMode) -> "Layout":
        return self._set("hover_mode", TruthyEnum(hover_mode))

    def click_mode(self, click_mode: str) -> "Layout":
        return self._set("click_mode", click_mode)

    def drag_mode(self, drag_mode: str) -> "Layout":
        return self._set("drag_mode", drag_mode)

    def select_direction(self, select_direction: str) -> "Layout":
        return self._set("select_direction", select_direction)

    def hover_distance(self, hover_distance: int) -> "Layout":
        return self._set("hover_distance", hover_distance)

    def spike_distance(self, spike_distance: int) -> "Layout":
        return self._set("spike_distance", spike_distance)

    def hover_label(self, hover_label: Label) -> "Layout":
        return self._set("hover_label", hover_label)

    def template(self, template: Any) -> "Layout":
        """A template name such as "plotly_dark", or a template object as a dict."""
        return self._set("template", template)

    def grid(self, grid: LayoutGrid) -> "Layout":
        return self._set("grid", grid)

    def calendar(self, calendar: Calendar) -> "Layout":
        return self._set("calendar", calendar)

    def shapes(self, shapes: Sequence[Shape]) -> "Layout":
        return self._set("shapes", list(shapes))

    def add_shape(self, shape: Shape) -> "Layout":
        return self._set("shapes", [*self._values.get("shapes", []), shape])

    def box_mode(self, box_mode: BoxMode) -> "Layout":
        return self._set("box_mode", box_mode)

    def box_gap(self, box_gap: float) -> "Layout":
        return self._set("box_gap", box_gap)

    def box_group_gap(self, box_group_gap: float) -> "Layout":
        return self._set("box_group_gap", box_group_gap)

    def bar_mode(self, bar_mode: BarMode) -> "Layout":
        return self._set("bar_mode", bar_mode)

    def bar_norm(self, bar_norm: BarNorm) -> "Layout":
        return self._set("bar_norm", bar_norm)

    def bar_gap(self, bar_gap: float) -> "Layout":
        return self._set("bar_gap", bar_gap)

    def bar_group_gap(self, bar_group_gap: float) -> "Layout":
        return self._set("bar_group_gap", bar_group_gap)

    def violin_mode(self, violin_mode: ViolinMode) -> "Layout":
        return self._set("violin_mode", violin_mode)

    def violin_gap(self, violin_gap: float) -> "Layout":
        return self._set("violin_gap", violin_gap)

    def violin_group_gap(self, violin_group_gap: float) -> "Layout":
        return self._set("violin_group_gap", violin_group_gap)

    def waterfall_mode(self, waterfall_mode: WaterfallMode) -> "Layout":
        return self._set("waterfall_mode", waterfall_mode)

    def waterfall_gap(self, waterfall_gap: float) -> "Layout":
        return self._set("waterfall_gap", waterfall_gap)

    def waterfall_group_gap(self, waterfall_group_gap: float) -> "Layout":
        return self._set("waterfall_group_gap", waterfall_group_gap)

    def pie_color_way(self, pie_color_way: Sequence[ColorLike]) -> "Layout":
        return self._set("pie_color_way", to_color_array(pie_color_way))

    def extend_pie_colors(self, extend_pie_colors: bool) -> "Layout":
        return self._set("extend_pie_colors", extend_pie_colors)

    def sunburst_color_way(self, sunburst_color_way: Sequence[ColorLike]) -> "Layout":
        return self._set("sunburst_color_way", to_color_array(sunburst_color_way))

    def extend_sunburst_colors(self, extend_sunburst_colors: bool) -> "Layout":
        return self._set("extend_sunburst_colors", extend_sunburst_colors)
