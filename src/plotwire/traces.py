from enum import Enum
from typing import Any, Dict, Protocol, Sequence, Union, runtime_checkable

from plotwire.color import ColorLike, to_color
from plotwire.common import Line, Marker, Orientation
from plotwire.encoding import PlotlyObject, num_or_string, to_array


@runtime_checkable
class Trace(Protocol):
    """
    Anything a `Plot` can hold as a data series.

    `to_json` must return a complete JSON object for a single plotly.js trace,
    including its "type" key. Traces are serialized in the order they were
    added to the plot.
    """

    def to_json(self) -> str: ...


class Mode(str, Enum):
    LINES = "lines"
    MARKERS = "markers"
    TEXT = "text"
    LINES_MARKERS = "lines+markers"
    LINES_TEXT = "lines+text"
    MARKERS_TEXT = "markers+text"
    LINES_MARKERS_TEXT = "lines+markers+text"
    NONE = "none"


class Fill(str, Enum):
    NONE = "none"
    TO_ZERO_Y = "tozeroy"
    TO_ZERO_X = "tozerox"
    TO_NEXT_Y = "tonexty"
    TO_NEXT_X = "tonextx"
    TO_SELF = "toself"
    TO_NEXT = "tonext"


class TextPosition(str, Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    AUTO = "auto"
    NONE = "none"


def _data(values: Any) -> Any:
    # dates and numpy scalars are normalized, arrays are kept for a fast tolist()
    if hasattr(values, "dtype"):
        return to_array(values)
    return [num_or_string(v) for v in values]


def _text(text: Union[str, Sequence[str]]) -> Union[str, list]:
    return text if isinstance(text, str) else list(text)


class _TraceObject(PlotlyObject):
    trace_type = ""

    def __init__(self, x: Any = None, y: Any = None) -> None:
        super().__init__()
        if x is not None:
            self._values["x"] = _data(x)
        if y is not None:
            self._values["y"] = _data(y)

    def for_json(self) -> Dict[str, Any]:
        return {"type": self.trace_type, **super().for_json()}


def is_trace(obj: Any) -> bool:
    """
    True for built-in traces and custom `Trace` implementations. Layout and
    other configuration objects also have `to_json()`, but are not traces.
    """
    if isinstance(obj, PlotlyObject):
        return isinstance(obj, _TraceObject)
    return isinstance(obj, Trace)


class Scatter(_TraceObject):
    """
    Points, lines or filled areas.

        Scatter([1, 2, 3], [4, 1, 7]).name("trace 0").mode(Mode.LINES_MARKERS)
    """

    trace_type = "scatter"
    _aliases = {
        "show_legend": "showlegend",
        "legend_group": "legendgroup",
        "hover_text": "hovertext",
        "hover_info": "hoverinfo",
        "fill_color": "fillcolor",
        "connect_gaps": "connectgaps",
        "x_axis": "xaxis",
        "y_axis": "yaxis",
    }

    def name(self, name: str) -> "Scatter":
        return self._set("name", name)

    def mode(self, mode: Mode) -> "Scatter":
        return self._set("mode", mode)

    def visible(self, visible: bool) -> "Scatter":
        return self._set("visible", visible)

    def show_legend(self, show_legend: bool) -> "Scatter":
        return self._set("show_legend", show_legend)

    def legend_group(self, legend_group: str) -> "Scatter":
        return self._set("legend_group", legend_group)

    def opacity(self, opacity: float) -> "Scatter":
        return self._set("opacity", opacity)

    def text(self, text: Union[str, Sequence[str]]) -> "Scatter":
        return self._set("text", _text(text))

    def hover_text(self, hover_text: Union[str, Sequence[str]]) -> "Scatter":
        return self._set("hover_text", _text(hover_text))

    def hover_info(self, hover_info: str) -> "Scatter":
        return self._set("hover_info", hover_info)

    def line(self, line: Line) -> "Scatter":
        return self._set("line", line)

    def marker(self, marker: Marker) -> "Scatter":
        return self._set("marker", marker)

    def fill(self, fill: Fill) -> "Scatter":
        return self._set("fill", fill)

    def fill_color(self, fill_color: ColorLike) -> "Scatter":
        return self._set("fill_color", to_color(fill_color))

    def connect_gaps(self, connect_gaps: bool) -> "Scatter":
        return self._set("connect_gaps", connect_gaps)

    def x_axis(self, x_axis: str) -> "Scatter":
        return self._set("x_axis", x_axis)

    def y_axis(self, y_axis: str) -> "Scatter":
        return self._set("y_axis", y_axis)


class Bar(_TraceObject):
    trace_type = "bar"
    _aliases = {
        "show_legend": "showlegend",
        "text_position": "textposition",
        "x_axis": "xaxis",
        "y_axis": "yaxis",
    }

    def name(self, name: str) -> "Bar":
        return self._set("name", name)

    def orientation(self, orientation: Orientation) -> "Bar":
        return self._set("orientation", orientation)

    def visible(self, visible: bool) -> "Bar":
        return self._set("visible", visible)

    def show_legend(self, show_legend: bool) -> "Bar":
        return self._set("show_legend", show_legend)

    def opacity(self, opacity: float) -> "Bar":
        return self._set("opacity", opacity)

    def text(self, text: Union[str, Sequence[str]]) -> "Bar":
        return self._set("text", _text(text))

    def text_position(self, text_position: TextPosition) -> "Bar":
        return self._set("text_position", text_position)

    def marker(self, marker: Marker) -> "Bar":
        return self._set("marker", marker)

    def width(self, width: float) -> "Bar":
        return self._set("width", width)

    def offset(self, offset: float) -> "Bar":
        return self._set("offset", offset)

    def base(self, base: Any) -> "Bar":
        return self._set("base", num_or_string(base))

    def x_axis(self, x_axis: str) -> "Bar":
        return self._set("x_axis", x_axis)

    def y_axis(self, y_axis: str) -> "Bar":
        return self._set("y_axis", y_axis)
