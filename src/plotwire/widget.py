import anywidget
import traitlets

from plotwire.util import CONFIG

_ESM = """
import Plotly from "https://esm.sh/plotly.js-dist-min@{version}";

function render({{ model, el }}) {{
    const draw = () => {{
        const figure = JSON.parse(model.get("figure"));
        Plotly.react(el, figure.data, figure.layout, {{responsive: true}});
    }};
    draw();
    model.on("change:figure", draw);
    return () => Plotly.purge(el);
}}

export default {{ render }};
"""


class PlotWidget(anywidget.AnyWidget):
    """Notebook widget drawing a `{"data": ..., "layout": ...}` document."""

    figure = traitlets.Unicode("{}").tag(sync=True)

    def __init__(self, figure: str = "{}"):
        self._esm = _ESM.format(version=CONFIG["plotly_js_version"])
        super().__init__(figure=figure)
