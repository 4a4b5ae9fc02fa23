# %%
import pytest
import requests

import plotwire.templates as templates


class FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


def test_plotly_js_source_is_cached(monkeypatch, tmp_path):
    urls = []

    def get(url, timeout):
        urls.append(url)
        return FakeResponse("/* plotly */")

    monkeypatch.setattr(requests, "get", get)

    assert templates.plotly_js_source(tmp_path) == "/* plotly */"
    assert templates.plotly_js_source(tmp_path) == "/* plotly */"
    assert urls == ["https://cdn.plot.ly/plotly-1.54.6.min.js"]
    assert (tmp_path / "plotly-1.54.6.min.js").read_text() == "/* plotly */"


def test_plotly_js_source_http_error(monkeypatch, tmp_path):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse("", 404))
    with pytest.raises(requests.HTTPError):
        templates.plotly_js_source(tmp_path)
    assert not (tmp_path / "plotly-1.54.6.min.js").exists()


def test_standalone_embeds_local_script():
    html = templates.standalone(
        "var data = [];\nvar layout = {};",
        plotly_javascript="/* source */",
        remote_plotly_js=False,
    )
    assert '<script type="text/javascript">/* source */</script>' in html
    assert "var data = [];" in html
    assert "cdn.plot.ly" not in html


def test_standalone_export_image():
    html = templates.standalone(
        "var data = [];\nvar layout = {};",
        export_image=True,
        image_type="webp",
        image_width=300,
        image_height=200,
    )
    assert 'Plotly.toImage(plot_element, {format: "webp", width: 300, height: 200})' in html
    assert '<img id="plotly-img-element">' in html


def test_inline_fragment():
    html = templates.inline("var data = [];\nvar layout = {};", "plot-1")
    assert html.startswith('<div id="plot-1"')
    assert "<html" not in html
    assert "<script src" not in html


def test_figure_page():
    html = templates.figure_page('{"data":[],"layout":{}}', 640, 480)
    assert "width:640px; height:480px;" in html
    assert 'var figure = {"data":[],"layout":{}};' in html
    assert "staticPlot: true" in html
