import pathlib
from typing import Optional

import requests

from plotwire.util import CONFIG, PARENT_PATH, plotly_js_url


def _script_safe(text: str) -> str:
    # keeps "</script>" inside string data from closing the surrounding tag
    return text.replace("</", "<\\/")


def plotly_js_source(cache_dir: Optional[pathlib.Path] = None) -> str:
    """
    Return the plotly.js source text for embedding in a standalone page.

    The script is downloaded once from the configured CDN url and cached as
    `plotly-<version>.min.js` inside the package (or `cache_dir`).
    """
    cache_dir = pathlib.Path(cache_dir) if cache_dir is not None else PARENT_PATH / "js"
    path = cache_dir / f"plotly-{CONFIG['plotly_js_version']}.min.js"
    if not path.exists():
        response = requests.get(plotly_js_url(), timeout=60)
        response.raise_for_status()
        cache_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(response.text, encoding="utf-8")
    return path.read_text(encoding="utf-8")


def _plotly_script(remote_plotly_js: bool, plotly_javascript: Optional[str]) -> str:
    if remote_plotly_js:
        return f'<script src="{plotly_js_url()}"></script>'
    return f'<script type="text/javascript">{plotly_javascript}</script>'


def _export_script(image_type: str, image_width: int, image_height: int) -> str:
    return f"""
        var img_element = document.getElementById("plotly-img-element");
        Plotly.toImage(plot_element, {{format: "{image_type}", width: {image_width}, height: {image_height}}})
            .then(function (url) {{
                img_element.src = url;
                return Plotly.purge(plot_element);
            }});"""


def standalone(
    plot_data: str,
    plotly_javascript: Optional[str] = None,
    remote_plotly_js: bool = True,
    export_image: bool = False,
    image_type: str = "png",
    image_width: int = 0,
    image_height: int = 0,
) -> str:
    """
    A complete html page rendering `plot_data` (the output of
    `Plot.render_plot_data`).

    With `export_image` the interactive plot is replaced by an `<img>` holding
    the renderer's own raster export in the requested format and size.
    """
    export = _export_script(image_type, image_width, image_height) if export_image else ""
    image = '<img id="plotly-img-element">' if export_image else ""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8" />
</head>
<body>
    <div>
        {_plotly_script(remote_plotly_js, plotly_javascript)}
        <div id="plotly-html-element" class="plotly-graph-div" style="height:100%; width:100%;"></div>
        {image}
        <script type="text/javascript">
            {_script_safe(plot_data)}
            var plot_element = document.getElementById("plotly-html-element");
            Plotly.newPlot(plot_element, data, layout, {{"responsive": true}});{export}
        </script>
    </div>
</body>
</html>
"""


def inline(plot_data: str, plot_div_id: str) -> str:
    """
    An embeddable fragment: one div and the script drawing into it. The host
    page must already load plotly.js.
    """
    return f"""<div id="{plot_div_id}" class="plotly-graph-div" style="height:100%; width:100%;"></div>
<script type="text/javascript">
    {_script_safe(plot_data)}
    Plotly.newPlot(document.getElementById("{plot_div_id}"), data, layout, {{"responsive": true}});
</script>
"""


def figure_page(figure_json: str, width: int, height: int) -> str:
    """Fixed size page holding a static plot, for screenshot based export."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8" />
    <style>body {{ margin: 0; }}</style>
    <script src="{plotly_js_url()}"></script>
</head>
<body>
    <div id="figure" style="width:{width}px; height:{height}px;"></div>
    <script type="text/javascript">
        var figure = {_script_safe(figure_json)};
        Plotly.newPlot("figure", figure.data, figure.layout, {{staticPlot: true}});
    </script>
</body>
</html>
"""
