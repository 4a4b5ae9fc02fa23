# %%
import json

from plotwire.plot import Layout, Plot, Scatter
from plotwire.widget import PlotWidget


def test_widget_figure():
    widget = PlotWidget('{"data":[],"layout":{}}')
    assert json.loads(widget.figure) == {"data": [], "layout": {}}
    assert "plotly.js-dist-min@1.54.6" in widget._esm


def test_plot_widget_is_cached_and_updated():
    plot = Plot(Scatter([1], [2]))
    widget = plot.widget()
    assert json.loads(widget.figure)["data"] == [{"type": "scatter", "x": [1], "y": [2]}]

    plot.set_layout(Layout().title("updated"))
    assert plot.widget() is widget
    assert json.loads(widget.figure)["layout"] == {"title": {"text": "updated"}}
