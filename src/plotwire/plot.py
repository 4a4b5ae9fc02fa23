# ruff: noqa: F401
import os
import tempfile
import warnings
from enum import Enum
from typing import Any, Iterable, List, Optional

import plotwire.templates as templates
from plotwire.axis import (
    ArrayShow,
    Axis,
    AxisConstrain,
    AxisType,
    ConstrainDirection,
    RangeMode,
    RangeSelector,
    RangeSlider,
    RangeSliderYAxis,
    SelectorButton,
    SelectorStep,
    SliderRangeMode,
    StepMode,
    TicksPosition,
)
from plotwire.color import ColorScalePalette, NamedColor, Rgb, Rgba
from plotwire.common import (
    Anchor,
    Calendar,
    ColorBar,
    DashType,
    Font,
    Label,
    Line,
    LineShape,
    Marker,
    Orientation,
    Pad,
    Side,
    ThicknessMode,
    TickFormatStop,
    TickMode,
    TicksDirection,
    Title,
)
from plotwire.encoding import TruthyEnum
from plotwire.layout import (
    Align,
    BarMode,
    BarNorm,
    BoxMode,
    ColorAxis,
    GridDomain,
    GridPattern,
    GridXSide,
    GridYSide,
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
    ViolinMode,
    WaterfallMode,
)
from plotwire.shape import FillRule, Shape, ShapeLayer, ShapeType, SizeMode
from plotwire.traces import Bar, Fill, Mode, Scatter, TextPosition, Trace, is_trace
from plotwire.util import (
    CONFIG,
    DefaultAppNotFoundError,
    configure,
    create_parent_dir,
    open_with_default_app,
    plotly_js_url,
    random_id,
)
from plotwire.widget import PlotWidget


class ImageFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"
    SVG = "svg"
    PDF = "pdf"
    EPS = "eps"


class Plot:
    """
    An ordered collection of traces plus an optional layout, rendered to
    plotly.js JSON or html.

        plot = Plot(Scatter([1, 2, 3], [4, 1, 7]), layout=Layout().title("Demo"))
        plot.add_trace(Bar(["a", "b"], [3, 5]))
        plot.write_html("demo.html")

    Traces are rendered in the order they were added, which plotly.js uses for
    trace indices, legend entries and the color cycle. A plot can be rendered
    any number of times and changed between renders.
    """

    def __init__(self, *traces: Trace, layout: Optional[Layout] = None):
        self.traces: List[Trace] = []
        self.layout: Optional[Layout] = None
        self.remote_plotly_js: bool = CONFIG["remote_plotly_js"]
        self._widget = None
        self.add_traces(traces)
        if layout is not None:
            self.set_layout(layout)

    def add_trace(self, trace: Trace) -> "Plot":
        if not is_trace(trace):
            raise TypeError(
                f"Expected a trace with a to_json() method, got {type(trace).__name__}"
            )
        self.traces.append(trace)
        return self

    def add_traces(self, traces: Iterable[Trace]) -> "Plot":
        for trace in traces:
            self.add_trace(trace)
        return self

    def set_layout(self, layout: Layout) -> "Plot":
        self.layout = layout
        return self

    def use_local_plotly(self) -> "Plot":
        """
        Embed the plotly.js source in standalone html instead of loading it
        from the CDN. The output works offline but is several megabytes larger.
        """
        self.remote_plotly_js = False
        return self

    def _layout_json(self) -> str:
        return self.layout.to_json() if self.layout is not None else "{}"

    def to_json(self) -> str:
        """The `{"data": [...], "layout": {...}}` document used for static export."""
        data = ",".join(trace.to_json() for trace in self.traces)
        return f'{{"data":[{data}],"layout":{self._layout_json()}}}'

    def render_plot_data(self) -> str:
        """Javascript binding each trace, then `data` and `layout`, to variables."""
        lines = [
            f"var trace_{i} = {trace.to_json()};" for i, trace in enumerate(self.traces)
        ]
        names = ",".join(f"trace_{i}" for i in range(len(self.traces)))
        lines.append(f"var data = [{names}];")
        lines.append(f"var layout = {self._layout_json()};")
        return "\n".join(lines)

    def _standalone(self, export_image: bool = False, image_format=None, width=0, height=0):
        plotly_javascript = None if self.remote_plotly_js else templates.plotly_js_source()
        return templates.standalone(
            self.render_plot_data(),
            plotly_javascript=plotly_javascript,
            remote_plotly_js=self.remote_plotly_js,
            export_image=export_image,
            image_type=ImageFormat(image_format).value if image_format else "png",
            image_width=width,
            image_height=height,
        )

    def to_html(self) -> str:
        return self._standalone()

    def to_inline_html(self, plot_div_id: Optional[str] = None) -> str:
        """
        Html for embedding in a page that already loads plotly.js.

        Args:
            plot_div_id: id of the generated div. A random 20 character id is
                used when omitted.
        """
        return templates.inline(self.render_plot_data(), plot_div_id or random_id())

    def write_html(self, path: str) -> None:
        create_parent_dir(path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_html())
        print(f"HTML saved to {path}")

    def _show_page(self, html: str) -> str:
        path = os.path.join(tempfile.gettempdir(), f"plotly_{random_id(22)}.html")
        with open(path, "w", encoding="utf-8") as f:
            f.write(html)
        open_with_default_app(path)
        return path

    def show(self) -> str:
        """Open the plot in the default html viewer. Returns the temporary file path."""
        return self._show_page(self.to_html())

    def show_image(self, image_format: ImageFormat, width: int, height: int) -> str:
        """Like `show`, but the page displays a static image rendered by plotly.js."""
        return self._show_page(
            self._standalone(True, image_format, width, height)
        )

    def show_png(self, width: int, height: int) -> str:
        return self.show_image(ImageFormat.PNG, width, height)

    def show_jpeg(self, width: int, height: int) -> str:
        return self.show_image(ImageFormat.JPEG, width, height)

    def save(
        self,
        path: str,
        image_format: Optional[ImageFormat] = None,
        width: int = 800,
        height: int = 600,
        scale: float = 1.0,
    ) -> None:
        """
        Export a static image. Requires the `export` extra.

        The format is taken from the file extension when `image_format` is
        omitted.
        """
        from plotwire.export import save_image

        if image_format is None:
            extension = os.path.splitext(path)[1].lstrip(".").lower()
            image_format = ImageFormat("jpeg" if extension == "jpg" else extension)
        save_image(self.to_json(), path, ImageFormat(image_format).value, width, height, scale)

    def _deprecated_save(self, image_format: ImageFormat, path: str, width: int, height: int):
        warnings.warn(
            f"'to_{image_format.value}' is deprecated. Use 'save' instead.",
            DeprecationWarning,
            stacklevel=3,
        )
        self.save(path, image_format, width, height)

    def to_png(self, path: str, width: int, height: int) -> None:
        self._deprecated_save(ImageFormat.PNG, path, width, height)

    def to_jpeg(self, path: str, width: int, height: int) -> None:
        self._deprecated_save(ImageFormat.JPEG, path, width, height)

    def to_webp(self, path: str, width: int, height: int) -> None:
        self._deprecated_save(ImageFormat.WEBP, path, width, height)

    def to_svg(self, path: str, width: int, height: int) -> None:
        self._deprecated_save(ImageFormat.SVG, path, width, height)

    def to_pdf(self, path: str, width: int, height: int) -> None:
        self._deprecated_save(ImageFormat.PDF, path, width, height)

    def to_eps(self, path: str, width: int, height: int) -> None:
        self._deprecated_save(ImageFormat.EPS, path, width, height)

    def widget(self):
        """
        Lazily create & cache a notebook widget for this plot.
        Later calls push the current traces and layout to it.
        """
        if self._widget is None:
            self._widget = PlotWidget(self.to_json())
        else:
            self._widget.figure = self.to_json()
        return self._widget

    def _repr_mimebundle_(self, **kwargs: Any) -> Any:
        if CONFIG["display_as"] == "widget":
            return self.widget()._repr_mimebundle_(**kwargs)
        html = f'<script src="{plotly_js_url()}"></script>\n' + self.to_inline_html()
        return {"text/html": html}, {}
