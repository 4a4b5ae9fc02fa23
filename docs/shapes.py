# %% [markdown]
# Shapes are lines, rectangles, circles and SVG paths drawn on top of (or below) the data.
# They live in the layout, next to the axes and the legend.

# %%
import plotwire.plot as Plot

# %% [markdown]
# Three traces to draw on:

# %%
trace1 = Plot.Scatter([1, 2, 3, 4], [10, 15, 13, 17]).name("trace1").mode(Plot.Mode.MARKERS)
trace2 = Plot.Scatter([2, 3, 4, 5], [16, 5, 11, 9]).name("trace2").mode(Plot.Mode.LINES)
trace3 = Plot.Scatter([1, 2, 3, 4], [12, 9, 15, 12]).name("trace3")

# %% [markdown]
# A rectangle spanning the full plot height between x=2 and x=3. `y_ref("paper")` measures
# `y0`/`y1` relative to the plot area, so 0 and 1 are the bottom and top edges.

# %%
band = (
    Plot.Shape()
    .shape_type(Plot.ShapeType.RECT)
    .x_ref("x")
    .y_ref("paper")
    .x0(2.0)
    .y0(0.0)
    .x1(3.0)
    .y1(1.0)
    .fill_color(Plot.Rgba(211, 211, 211, 1.0))
    .opacity(0.2)
    .layer(Plot.ShapeLayer.BELOW)
    .line(Plot.Line().width(0))
)

# %% [markdown]
# A circle in data coordinates, and a dashed line. Every setter returns a new shape,
# so a base shape can be reused as a template.

# %%
circle = (
    Plot.Shape()
    .shape_type(Plot.ShapeType.CIRCLE)
    .x_ref("x")
    .y_ref("y")
    .x0(2.0)
    .y0(13.0)
    .x1(4.0)
    .y1(17.0)
    .opacity(0.2)
    .fill_color(Plot.NamedColor.BLUE)
    .line(Plot.Line().color(Plot.NamedColor.RED))
)
line = (
    Plot.Shape()
    .shape_type(Plot.ShapeType.LINE)
    .x0(1.5)
    .y0(16.0)
    .x1(4.0)
    .y1(6.0)
    .line(Plot.Line().color("#CE2029").width(4).dash(Plot.DashType.DASH_DOT))
)

# %%
plot = Plot.Plot(trace1, trace2, trace3, layout=Plot.Layout().shapes([band, circle, line]))
plot

# %% [markdown]
# The same plot as the JSON document plotly.js consumes, and as a standalone page:

# %%
print(plot.to_json())
plot.write_html("scratch/shapes.html")
