from enum import Enum
from typing import Any, Sequence, Union

from plotwire.color import ColorLike, to_color
from plotwire.common import (
    Anchor,
    Calendar,
    DashType,
    Font,
    Side,
    TickFormatStop,
    TickMode,
    TicksDirection,
    Title,
    to_dash,
    to_title,
)
from plotwire.encoding import PlotlyObject, num_or_string_array, to_array


class AxisType(str, Enum):
    DEFAULT = "-"
    LINEAR = "linear"
    LOG = "log"
    DATE = "date"
    CATEGORY = "category"
    MULTI_CATEGORY = "multicategory"


class AxisConstrain(str, Enum):
    RANGE = "range"
    DOMAIN = "domain"


class ConstrainDirection(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class RangeMode(str, Enum):
    NORMAL = "normal"
    TO_ZERO = "tozero"
    NON_NEGATIVE = "nonnegative"


class TicksPosition(str, Enum):
    LABELS = "labels"
    BOUNDARIES = "boundaries"


class ArrayShow(str, Enum):
    ALL = "all"
    FIRST = "first"
    LAST = "last"
    NONE = "none"


class SliderRangeMode(str, Enum):
    AUTO = "auto"
    FIXED = "fixed"
    MATCH = "match"


class SelectorStep(str, Enum):
    MONTH = "month"
    YEAR = "year"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    ALL = "all"


class StepMode(str, Enum):
    BACKWARD = "backward"
    TO_DATE = "todate"


class RangeSliderYAxis(PlotlyObject):
    _aliases = {"range_mode": "rangemode"}

    def range_mode(self, range_mode: SliderRangeMode) -> "RangeSliderYAxis":
        return self._set("range_mode", range_mode)

    def range(self, range: Sequence[Any]) -> "RangeSliderYAxis":
        return self._set("range", num_or_string_array(range))


class RangeSlider(PlotlyObject):
    _aliases = {
        "background_color": "bgcolor",
        "border_color": "bordercolor",
        "border_width": "borderwidth",
        "auto_range": "autorange",
        "y_axis": "yaxis",
    }

    def background_color(self, background_color: ColorLike) -> "RangeSlider":
        return self._set("background_color", to_color(background_color))

    def border_color(self, border_color: ColorLike) -> "RangeSlider":
        return self._set("border_color", to_color(border_color))

    def border_width(self, border_width: int) -> "RangeSlider":
        return self._set("border_width", border_width)

    def auto_range(self, auto_range: bool) -> "RangeSlider":
        return self._set("auto_range", auto_range)

    def range(self, range: Sequence[Any]) -> "RangeSlider":
        return self._set("range", num_or_string_array(range))

    def thickness(self, thickness: float) -> "RangeSlider":
        return self._set("thickness", thickness)

    def visible(self, visible: bool) -> "RangeSlider":
        return self._set("visible", visible)

    def y_axis(self, y_axis: RangeSliderYAxis) -> "RangeSlider":
        return self._set("y_axis", y_axis)


class SelectorButton(PlotlyObject):
    _aliases = {"step_mode": "stepmode", "template_item_name": "templateitemname"}

    def visible(self, visible: bool) -> "SelectorButton":
        return self._set("visible", visible)

    def step(self, step: SelectorStep) -> "SelectorButton":
        return self._set("step", step)

    def step_mode(self, step_mode: StepMode) -> "SelectorButton":
        return self._set("step_mode", step_mode)

    def count(self, count: int) -> "SelectorButton":
        return self._set("count", count)

    def label(self, label: str) -> "SelectorButton":
        return self._set("label", label)

    def name(self, name: str) -> "SelectorButton":
        return self._set("name", name)

    def template_item_name(self, template_item_name: str) -> "SelectorButton":
        return self._set("template_item_name", template_item_name)


class RangeSelector(PlotlyObject):
    """Buttons above a date axis that jump to preset ranges."""

    _aliases = {
        "x_anchor": "xanchor",
        "y_anchor": "yanchor",
        "background_color": "bgcolor",
        "active_color": "activecolor",
        "border_color": "bordercolor",
        "border_width": "borderwidth",
    }

    def visible(self, visible: bool) -> "RangeSelector":
        return self._set("visible", visible)

    def buttons(self, buttons: Sequence[SelectorButton]) -> "RangeSelector":
        return self._set("buttons", list(buttons))

    def x(self, x: float) -> "RangeSelector":
        return self._set("x", x)

    def x_anchor(self, x_anchor: Anchor) -> "RangeSelector":
        return self._set("x_anchor", x_anchor)

    def y(self, y: float) -> "RangeSelector":
        return self._set("y", y)

    def y_anchor(self, y_anchor: Anchor) -> "RangeSelector":
        return self._set("y_anchor", y_anchor)

    def font(self, font: Font) -> "RangeSelector":
        return self._set("font", font)

    def background_color(self, background_color: ColorLike) -> "RangeSelector":
        return self._set("background_color", to_color(background_color))

    def active_color(self, active_color: ColorLike) -> "RangeSelector":
        return self._set("active_color", to_color(active_color))

    def border_color(self, border_color: ColorLike) -> "RangeSelector":
        return self._set("border_color", to_color(border_color))

    def border_width(self, border_width: int) -> "RangeSelector":
        return self._set("border_width", border_width)


class Axis(PlotlyObject):
    """
    A cartesian axis. Attached to a `Layout` as `x_axis`/`y_axis` or one of the
    numbered overlay axes `x_axis2` .. `y_axis8`.

    `range` accepts numbers for linear/log axes and strings (or dates) for date
    and category axes; values are written as given.
    """

    _aliases = {
        "auto_range": "autorange",
        "range_mode": "rangemode",
        "fixed_range": "fixedrange",
        "constrain_toward": "constraintoward",
        "tick_mode": "tickmode",
        "n_ticks": "nticks",
        "tick_values": "tickvals",
        "tick_text": "ticktext",
        "ticks_on": "tickson",
        "tick_length": "ticklen",
        "tick_width": "tickwidth",
        "tick_color": "tickcolor",
        "show_tick_labels": "showticklabels",
        "auto_margin": "automargin",
        "show_spikes": "showspikes",
        "spike_color": "spikecolor",
        "spike_thickness": "spikethickness",
        "spike_dash": "spikedash",
        "spike_mode": "spikemode",
        "spike_snap": "spikesnap",
        "tick_font": "tickfont",
        "tick_angle": "tickangle",
        "tick_prefix": "tickprefix",
        "show_tick_prefix": "showtickprefix",
        "tick_suffix": "ticksuffix",
        "show_tick_suffix": "showticksuffix",
        "show_exponent": "showexponent",
        "exponent_format": "exponentformat",
        "separate_thousands": "separatethousands",
        "tick_format": "tickformat",
        "tick_format_stops": "tickformatstops",
        "hover_format": "hoverformat",
        "show_line": "showline",
        "line_color": "linecolor",
        "line_width": "linewidth",
        "show_grid": "showgrid",
        "grid_color": "gridcolor",
        "grid_width": "gridwidth",
        "zero_line": "zeroline",
        "zero_line_color": "zerolinecolor",
        "zero_line_width": "zerolinewidth",
        "show_dividers": "showdividers",
        "divider_color": "dividercolor",
        "divider_width": "dividerwidth",
        "range_slider": "rangeslider",
        "range_selector": "rangeselector",
    }

    def visible(self, visible: bool) -> "Axis":
        return self._set("visible", visible)

    def color(self, color: ColorLike) -> "Axis":
        return self._set("color", to_color(color))

    def title(self, title: Union[Title, str]) -> "Axis":
        return self._set("title", to_title(title))

    def type_(self, axis_type: AxisType) -> "Axis":
        return self._set("type", axis_type)

    def auto_range(self, auto_range: bool) -> "Axis":
        return self._set("auto_range", auto_range)

    def range_mode(self, range_mode: RangeMode) -> "Axis":
        return self._set("range_mode", range_mode)

    def range(self, range: Sequence[Any]) -> "Axis":
        return self._set("range", num_or_string_array(range))

    def fixed_range(self, fixed_range: bool) -> "Axis":
        return self._set("fixed_range", fixed_range)

    def constrain(self, constrain: AxisConstrain) -> "Axis":
        return self._set("constrain", constrain)

    def constrain_toward(self, constrain_toward: ConstrainDirection) -> "Axis":
        return self._set("constrain_toward", constrain_toward)

    def tick_mode(self, tick_mode: TickMode) -> "Axis":
        return self._set("tick_mode", tick_mode)

    def n_ticks(self, n_ticks: int) -> "Axis":
        return self._set("n_ticks", n_ticks)

    def tick0(self, tick0: float) -> "Axis":
        return self._set("tick0", tick0)

    def dtick(self, dtick: float) -> "Axis":
        return self._set("dtick", dtick)

    def tick_values(self, tick_values: Sequence[float]) -> "Axis":
        return self._set("tick_values", to_array(tick_values))

    def tick_text(self, tick_text: Sequence[str]) -> "Axis":
        return self._set("tick_text", list(tick_text))

    def ticks(self, ticks: TicksDirection) -> "Axis":
        return self._set("ticks", ticks)

    def ticks_on(self, ticks_on: TicksPosition) -> "Axis":
        return self._set("ticks_on", ticks_on)

    def mirror(self, mirror: bool) -> "Axis":
        return self._set("mirror", mirror)

    def tick_length(self, tick_length: int) -> "Axis":
        return self._set("tick_length", tick_length)

    def tick_width(self, tick_width: int) -> "Axis":
        return self._set("tick_width", tick_width)

    def tick_color(self, tick_color: ColorLike) -> "Axis":
        return self._set("tick_color", to_color(tick_color))

    def show_tick_labels(self, show_tick_labels: bool) -> "Axis":
        return self._set("show_tick_labels", show_tick_labels)

    def auto_margin(self, auto_margin: bool) -> "Axis":
        return self._set("auto_margin", auto_margin)

    def show_spikes(self, show_spikes: bool) -> "Axis":
        return self._set("show_spikes", show_spikes)

    def spike_color(self, spike_color: ColorLike) -> "Axis":
        return self._set("spike_color", to_color(spike_color))

    def spike_thickness(self, spike_thickness: int) -> "Axis":
        return self._set("spike_thickness", spike_thickness)

    def spike_dash(self, spike_dash: Union[DashType, str]) -> "Axis":
        return self._set("spike_dash", to_dash(spike_dash))

    def spike_mode(self, spike_mode: str) -> "Axis":
        return self._set("spike_mode", spike_mode)

    def spike_snap(self, spike_snap: str) -> "Axis":
        return self._set("spike_snap", spike_snap)

    def tick_font(self, tick_font: Font) -> "Axis":
        return self._set("tick_font", tick_font)

    def tick_angle(self, tick_angle: float) -> "Axis":
        return self._set("tick_angle", tick_angle)

    def tick_prefix(self, tick_prefix: str) -> "Axis":
        return self._set("tick_prefix", tick_prefix)

    def show_tick_prefix(self, show_tick_prefix: ArrayShow) -> "Axis":
        return self._set("show_tick_prefix", show_tick_prefix)

    def tick_suffix(self, tick_suffix: str) -> "Axis":
        return self._set("tick_suffix", tick_suffix)

    def show_tick_suffix(self, show_tick_suffix: ArrayShow) -> "Axis":
        return self._set("show_tick_suffix", show_tick_suffix)

    def show_exponent(self, show_exponent: ArrayShow) -> "Axis":
        return self._set("show_exponent", show_exponent)

    def exponent_format(self, exponent_format: str) -> "Axis":
        return self._set("exponent_format", exponent_format)

    def separate_thousands(self, separate_thousands: bool) -> "Axis":
        return self._set("separate_thousands", separate_thousands)

    def tick_format(self, tick_format: str) -> "Axis":
        return self._set("tick_format", tick_format)

    def tick_format_stops(self, tick_format_stops: Sequence[TickFormatStop]) -> "Axis":
        return self._set("tick_format_stops", list(tick_format_stops))

    def hover_format(self, hover_format: str) -> "Axis":
        return self._set("hover_format", hover_format)

    def show_line(self, show_line: bool) -> "Axis":
        return self._set("show_line", show_line)

    def line_color(self, line_color: ColorLike) -> "Axis":
        return self._set("line_color", to_color(line_color))

    def line_width(self, line_width: int) -> "Axis":
        return self._set("line_width", line_width)

    def show_grid(self, show_grid: bool) -> "Axis":
        return self._set("show_grid", show_grid)

    def grid_color(self, grid_color: ColorLike) -> "Axis":
        return self._set("grid_color", to_color(grid_color))

    def grid_width(self, grid_width: int) -> "Axis":
        return self._set("grid_width", grid_width)

    def zero_line(self, zero_line: bool) -> "Axis":
        return self._set("zero_line", zero_line)

    def zero_line_color(self, zero_line_color: ColorLike) -> "Axis":
        return self._set("zero_line_color", to_color(zero_line_color))

    def zero_line_width(self, zero_line_width: int) -> "Axis":
        return self._set("zero_line_width", zero_line_width)

    def show_dividers(self, show_dividers: bool) -> "Axis":
        return self._set("show_dividers", show_dividers)

    def divider_color(self, divider_color: ColorLike) -> "Axis":
        return self._set("divider_color", to_color(divider_color))

    def divider_width(self, divider_width: int) -> "Axis":
        return self._set("divider_width", divider_width)

    def anchor(self, anchor: str) -> "Axis":
        return self._set("anchor", anchor)

    def side(self, side: Side) -> "Axis":
        return self._set("side", side)

    def overlaying(self, overlaying: str) -> "Axis":
        return self._set("overlaying", overlaying)

    def domain(self, domain: Sequence[float]) -> "Axis":
        return self._set("domain", list(domain))

    def position(self, position: float) -> "Axis":
        return self._set("position", position)

    def range_slider(self, range_slider: RangeSlider) -> "Axis":
        return self._set("range_slider", range_slider)

    def range_selector(self, range_selector: RangeSelector) -> "Axis":
        return self._set("range_selector", range_selector)

    def calendar(self, calendar: Calendar) -> "Axis":
        return self._set("calendar", calendar)
