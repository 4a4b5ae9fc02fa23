# %%
import datetime
import json

import numpy as np

from plotwire.common import Line, Marker, Orientation
from plotwire.traces import Bar, Fill, Mode, Scatter, TextPosition, Trace


def test_scatter_minimal():
    assert Scatter([1, 2], [3, 4]).for_json() == {"type": "scatter", "x": [1, 2], "y": [3, 4]}
    assert json.loads(Scatter([1, 2], [3, 4]).to_json())["type"] == "scatter"


def test_scatter_fields():
    trace = (
        Scatter([1, 2, 3], ["a", "b", "c"])
        .name("trace1")
        .mode(Mode.LINES_MARKERS)
        .show_legend(False)
        .fill(Fill.TO_ZERO_Y)
        .fill_color("#abc")
        .line(Line().width(2))
        .marker(Marker().size(8).color([1, 2, 3]))
        .hover_text(["p", "q", "r"])
        .y_axis("y2")
    )
    assert trace.for_json() == {
        "type": "scatter",
        "x": [1, 2, 3],
        "y": ["a", "b", "c"],
        "name": "trace1",
        "mode": "lines+markers",
        "showlegend": False,
        "fill": "tozeroy",
        "fillcolor": "#abc",
        "line": {"width": 2},
        "marker": {"size": 8, "color": [1, 2, 3]},
        "hovertext": ["p", "q", "r"],
        "yaxis": "y2",
    }


def test_numpy_and_dates():
    trace = Scatter(np.array([1, 2]), np.array([0.5, 1.5]))
    assert trace.for_json()["x"] == [1, 2]
    assert trace.for_json()["y"] == [0.5, 1.5]

    dates = Scatter([datetime.date(2020, 1, 1), datetime.date(2020, 1, 2)], [1, 2])
    assert dates.for_json()["x"] == ["2020-01-01", "2020-01-02"]


def test_numpy_datetimes():
    days = np.array(["2020-01-01", "2020-01-02"], dtype="datetime64[ns]")
    trace = Scatter(days, [1, 2])
    assert json.loads(trace.to_json())["x"] == ["2020-01-01", "2020-01-02"]

    stamps = np.array(["2020-01-01T12:30"], dtype="datetime64[ns]")
    assert Scatter(stamps, [1]).for_json()["x"] == ["2020-01-01T12:30"]


def test_scalar_marker_color():
    assert Marker().color(0.5).for_json() == {"color": 0.5}
    assert Marker().color(3).for_json() == {"color": 3}
    assert Marker().color(np.float64(0.25)).for_json() == {"color": 0.25}


def test_input_array_is_copied():
    xs = np.array([1, 2])
    trace = Scatter(xs, [1, 2])
    xs[0] = 100
    assert trace.for_json()["x"] == [1, 2]


def test_bar():
    trace = (
        Bar(["a", "b"], [3, 5])
        .orientation(Orientation.VERTICAL)
        .text(["3", "5"])
        .text_position(TextPosition.OUTSIDE)
        .marker(Marker().color("red"))
        .base(1)
    )
    assert trace.for_json() == {
        "type": "bar",
        "x": ["a", "b"],
        "y": [3, 5],
        "orientation": "v",
        "text": ["3", "5"],
        "textposition": "outside",
        "marker": {"color": "red"},
        "base": 1,
    }


def test_trace_protocol():
    class Custom:
        def to_json(self):
            return '{"type": "pie", "values": [1, 2]}'

    assert isinstance(Scatter([], []), Trace)
    assert isinstance(Bar([], []), Trace)
    assert isinstance(Custom(), Trace)
    assert not isinstance(object(), Trace)
