# %%
import json

from plotwire.axis import Axis
from plotwire.color import ColorScalePalette, NamedColor, Rgb
from plotwire.common import Font, Orientation
from plotwire.layout import (
    BarMode,
    BarNorm,
    ColorAxis,
    GridDomain,
    GridPattern,
    GridXSide,
    HoverMode,
    Layout,
    LayoutColorScale,
    LayoutGrid,
    Legend,
    Margin,
    ModeBar,
    RowOrder,
    UniformText,
    UniformTextMode,
)
from plotwire.shape import Shape, ShapeType


def test_empty_layout():
    assert Layout().for_json() == {}
    assert Layout().to_json() == "{}"


def test_title_from_string():
    assert Layout().title("Revenue").for_json() == {"title": {"text": "Revenue"}}


def test_only_set_fields_are_emitted():
    layout = Layout().width(800).show_legend(False)
    assert layout.for_json() == {"width": 800, "showlegend": False}
    assert "null" not in layout.to_json()


def test_numbered_axes():
    layout = (
        Layout()
        .x_axis(Axis().title("x"))
        .y_axis(Axis())
        .x_axis8(Axis().overlaying("x"))
        .y_axis3(Axis().side("right"))
    )
    assert layout.for_json() == {
        "xaxis": {"title": {"text": "x"}},
        "yaxis": {},
        "xaxis8": {"overlaying": "x"},
        "yaxis3": {"side": "right"},
    }
    assert Layout.x_axis2.__name__ == "x_axis2"


def test_hover_mode_false():
    assert json.loads(Layout().hover_mode(HoverMode.FALSE).to_json()) == {
        "hovermode": False
    }
    assert Layout().hover_mode(HoverMode.Y_UNIFIED).for_json() == {
        "hovermode": "y unified"
    }


def test_uniform_text():
    text = UniformText().mode(UniformTextMode.FALSE).min_size(10)
    assert Layout().uniform_text(text).for_json() == {
        "uniformtext": {"mode": False, "minsize": 10}
    }


def test_margin_and_legend_aliases():
    margin = Margin().left(1).right(2).top(3).bottom(4).pad(5).auto_expand(True)
    assert margin.for_json() == {"l": 1, "r": 2, "t": 3, "b": 4, "pad": 5, "autoexpand": True}

    legend = (
        Legend()
        .background_color(Rgb(1, 2, 3))
        .border_width(1)
        .orientation(Orientation.HORIZONTAL)
        .x(0.5)
        .trace_group_gap(4)
        .title("Series")
    )
    assert Layout().legend(legend).for_json() == {
        "legend": {
            "bgcolor": "rgb(1, 2, 3)",
            "borderwidth": 1,
            "orientation": "h",
            "x": 0.5,
            "tracegroupgap": 4,
            "title": {"text": "Series"},
        }
    }


def test_colors():
    layout = (
        Layout()
        .paper_background_color(NamedColor.WHITE)
        .plot_background_color("#eee")
        .color_way([NamedColor.RED, (0, 0, 255)])
        .sunburst_color_way(["#111"])
        .extend_sunburst_colors(True)
        .color_scale(LayoutColorScale().sequential(ColorScalePalette.JET).diverging("RdBu"))
        .color_axis(ColorAxis().cmin(0).cmax(1).color_scale(ColorScalePalette.HOT))
    )
    assert layout.for_json() == {
        "paper_bgcolor": "white",
        "plot_bgcolor": "#eee",
        "colorway": ["red", "rgb(0, 0, 255)"],
        "sunburstcolorway": ["#111"],
        "extendsunburstcolors": True,
        "colorscale": {"sequential": "Jet", "diverging": "RdBu"},
        "coloraxis": {"cmin": 0, "cmax": 1, "colorscale": "Hot"},
    }


def test_trace_family_modes():
    layout = (
        Layout()
        .bar_mode(BarMode.STACK)
        .bar_norm(BarNorm.EMPTY)
        .bar_gap(0.1)
        .box_group_gap(0.2)
    )
    assert layout.for_json() == {
        "barmode": "stack",
        "barnorm": "",
        "bargap": 0.1,
        "boxgroupgap": 0.2,
    }


def test_grid():
    grid = (
        LayoutGrid()
        .rows(2)
        .columns(2)
        .pattern(GridPattern.COUPLED)
        .row_order(RowOrder.BOTTOM_TO_TOP)
        .sub_plots([["xy", "x2y"], ["xy2", "x2y2"]])
        .x_side(GridXSide.BOTTOM_PLOT)
        .domain(GridDomain().x([0, 1]).y([0, 0.9]))
    )
    assert Layout().grid(grid).for_json() == {
        "grid": {
            "rows": 2,
            "columns": 2,
            "pattern": "coupled",
            "roworder": "bottom to top",
            "subplots": [["xy", "x2y"], ["xy2", "x2y2"]],
            "xside": "bottom plot",
            "domain": {"x": [0, 1], "y": [0, 0.9]},
        }
    }


def test_mode_bar():
    mode_bar = ModeBar().active_color("red").background_color("blue").orientation(
        Orientation.VERTICAL
    )
    assert mode_bar.for_json() == {"activecolor": "red", "bgcolor": "blue", "orientation": "v"}


def test_add_shape_copies():
    base = Layout().shapes([Shape().shape_type(ShapeType.LINE)])
    extended = base.add_shape(Shape().shape_type(ShapeType.RECT))
    assert len(base.for_json()["shapes"]) == 1
    assert [s["type"] for s in extended.for_json()["shapes"]] == ["line", "rect"]
    assert Layout().add_shape(Shape()).for_json() == {"shapes": [{}]}


def test_shared_nested_entity():
    font = Font().size(12)
    first = Layout().font(font)
    second = Layout().font(font.color("red"))
    assert first.for_json() == {"font": {"size": 12}}
    assert second.for_json() == {"font": {"size": 12, "color": "red"}}
