import importlib.util
import os
import pathlib
import random
import string
import subprocess
import sys
from typing import Any, Dict, Optional

PARENT_PATH = pathlib.Path(importlib.util.find_spec("plotwire.util").origin).parent

CONFIG: Dict[str, Any] = {
    "display_as": "html",
    "remote_plotly_js": True,
    "plotly_js_version": "1.54.6",
    "plotly_js_url": "https://cdn.plot.ly/plotly-{version}.min.js",
}


def configure(options: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
    """
    Update the global plotwire configuration.

    Args:
        options (dict, optional): Options to merge into the configuration.
        **kwargs: Options passed as keyword arguments, applied after `options`.

    Known options:
        display_as: 'html' or 'widget', how plots render in notebooks.
        remote_plotly_js: whether new plots reference plotly.js from the CDN.
        plotly_js_version: plotly.js release used for the CDN url and local cache.
        plotly_js_url: url template with a `{version}` placeholder.
    """
    updates = {**(options or {}), **kwargs}
    for key in updates:
        if key not in CONFIG:
            raise KeyError(f"Unknown configuration option: {key}")
    if updates.get("display_as", CONFIG["display_as"]) not in ["html", "widget"]:
        raise ValueError("display_as must be either 'html' or 'widget'")
    CONFIG.update(updates)


def plotly_js_url() -> str:
    return CONFIG["plotly_js_url"].format(version=CONFIG["plotly_js_version"])


def create_parent_dir(path: str) -> None:
    """Create parent directory if it doesn't exist."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def random_id(length: int = 20) -> str:
    """Alphanumeric id for plot divs and temp files. Not suitable for secrets."""
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


DEFAULT_HTML_APP_NOT_FOUND = """Could not find default application for HTML files.
Consider using the `write_html` method to save the plot instead. If the `export` extra
is installed the `save` method can also write the following formats:
- png
- jpeg
- webp
- pdf
- eps
"""


class DefaultAppNotFoundError(OSError):
    """Raised when the host has no application registered to open HTML files."""


def open_with_default_app(path: str) -> None:
    if sys.platform.startswith("linux"):
        command = ["xdg-open", path]
    elif sys.platform == "darwin":
        command = ["open", path]
    elif sys.platform == "win32":
        command = ["cmd", "/C", "start", "", path]
    else:
        raise DefaultAppNotFoundError(DEFAULT_HTML_APP_NOT_FOUND)

    try:
        subprocess.run(command, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise DefaultAppNotFoundError(DEFAULT_HTML_APP_NOT_FOUND) from e
