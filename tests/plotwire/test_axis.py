# %%
import datetime

from plotwire.axis import (
    Axis,
    AxisType,
    RangeMode,
    RangeSelector,
    RangeSlider,
    RangeSliderYAxis,
    SelectorButton,
    SelectorStep,
    SliderRangeMode,
    StepMode,
)
from plotwire.color import NamedColor
from plotwire.common import DashType, Font, TickFormatStop, Title


def test_unset_axis_is_empty():
    assert Axis().for_json() == {}


def test_axis_wire_keys():
    axis = (
        Axis()
        .auto_range(True)
        .tick_text(["low", "high"])
        .tick_values([0, 10])
        .type_(AxisType.LOG)
        .range_mode(RangeMode.TO_ZERO)
        .show_grid(False)
        .zero_line_color(NamedColor.GRAY)
    )
    assert axis.for_json() == {
        "autorange": True,
        "ticktext": ["low", "high"],
        "tickvals": [0, 10],
        "type": "log",
        "rangemode": "tozero",
        "showgrid": False,
        "zerolinecolor": "gray",
    }


def test_axis_range_numbers_and_strings():
    assert Axis().range([0, 10]).for_json() == {"range": [0, 10]}
    assert Axis().range(["2020-01-01", "2020-12-31"]).for_json() == {
        "range": ["2020-01-01", "2020-12-31"]
    }
    assert Axis().range([datetime.date(2020, 1, 1), 2.5]).for_json() == {
        "range": ["2020-01-01", 2.5]
    }


def test_axis_title_and_fonts():
    axis = Axis().title("Year").tick_font(Font().size(10)).spike_dash(DashType.DOT)
    assert axis.for_json() == {
        "title": {"text": "Year"},
        "tickfont": {"size": 10},
        "spikedash": "dot",
    }
    assert Axis().title(Title("t").x(0.5)).for_json() == {"title": {"text": "t", "x": 0.5}}


def test_tick_format_stops():
    stops = [TickFormatStop().dtick_range([0, 1000]).value("%H:%M")]
    assert Axis().tick_format_stops(stops).for_json() == {
        "tickformatstops": [{"dtickrange": [0, 1000], "value": "%H:%M"}]
    }


def test_range_selector_active_color():
    selector = RangeSelector().active_color("red").background_color(NamedColor.BLUE)
    assert selector.for_json() == {"activecolor": "red", "bgcolor": "blue"}


def test_range_slider_nesting():
    slider = (
        RangeSlider()
        .visible(True)
        .auto_range(False)
        .range([1, 5])
        .y_axis(RangeSliderYAxis().range_mode(SliderRangeMode.FIXED).range([0, 1]))
    )
    assert Axis().range_slider(slider).for_json() == {
        "rangeslider": {
            "visible": True,
            "autorange": False,
            "range": [1, 5],
            "yaxis": {"rangemode": "fixed", "range": [0, 1]},
        }
    }


def test_selector_buttons():
    button = (
        SelectorButton()
        .count(1)
        .label("1m")
        .step(SelectorStep.MONTH)
        .step_mode(StepMode.BACKWARD)
    )
    all_button = SelectorButton().step(SelectorStep.ALL)
    axis = Axis().range_selector(RangeSelector().buttons([button, all_button]))
    assert axis.for_json() == {
        "rangeselector": {
            "buttons": [
                {"count": 1, "label": "1m", "step": "month", "stepmode": "backward"},
                {"step": "all"},
            ]
        }
    }
