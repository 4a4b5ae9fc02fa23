# %% [markdown]
# To use plotwire, first import it:

# %%
import numpy as np

import plotwire.plot as Plot

# %% [markdown]
# A plot is a list of traces plus an optional layout. Traces take their data as lists,
# tuples or numpy arrays:

# %%
xs = np.linspace(0, 2 * np.pi, 50)
Plot.Plot(Plot.Scatter(xs, np.sin(xs)).name("sin"))

# %% [markdown]
# ## Configuring the layout
#
# Configuration objects are built by chaining setters. Only the fields you set are
# sent to plotly.js, everything else keeps the renderer's defaults.

# %%
layout = (
    Plot.Layout()
    .title("Quarterly revenue")
    .bar_mode(Plot.BarMode.GROUP)
    .hover_mode(Plot.HoverMode.X_UNIFIED)
    .x_axis(Plot.Axis().title("Quarter"))
    .y_axis(Plot.Axis().title("Revenue").range_mode(Plot.RangeMode.TO_ZERO))
    .legend(Plot.Legend().orientation(Plot.Orientation.HORIZONTAL).y(-0.2))
)

quarters = ["Q1", "Q2", "Q3", "Q4"]
revenue = Plot.Plot(
    Plot.Bar(quarters, [20, 14, 23, 25]).name("2023"),
    Plot.Bar(quarters, [12, 18, 29, 31]).name("2024"),
    layout=layout,
)
revenue

# %% [markdown]
# ## Secondary axes
#
# Up to eight overlay axes per dimension are available as `x_axis2` .. `x_axis8` and
# `y_axis2` .. `y_axis8`. Traces refer to them as "x2", "y2" and so on.

# %%
Plot.Plot(
    Plot.Scatter([1, 2, 3], [40, 50, 60]).name("temperature"),
    Plot.Scatter([1, 2, 3], [4, 5, 6]).name("pressure").y_axis("y2"),
    layout=Plot.Layout().y_axis2(
        Plot.Axis().title("pressure").overlaying("y").side(Plot.Side.RIGHT)
    ),
)

# %% [markdown]
# ## Saving
#
# `write_html` produces a standalone page, `show` opens one in the default browser.
# Static images need the `export` extra (`pip install plotwire[export]`).

# %%
revenue.write_html("scratch/revenue.html")
revenue.save("scratch/revenue.png", width=800, height=500, scale=2)

# %% [markdown]
# Plots display as html in notebooks. To use a live widget instead:

# %%
Plot.configure(display_as="widget")
revenue
