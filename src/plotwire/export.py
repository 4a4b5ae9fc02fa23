import tempfile

from html2image import Html2Image
from PIL import Image

from plotwire.templates import figure_page
from plotwire.util import create_parent_dir

# Pillow writer names for the formats a raster screenshot can produce
PIL_FORMATS = {
    "png": "PNG",
    "jpeg": "JPEG",
    "webp": "WEBP",
    "pdf": "PDF",
    "eps": "EPS",
}


class ExportError(RuntimeError):
    """Raised when a static image could not be produced."""


def save_image(
    figure_json: str,
    path: str,
    image_format: str = "png",
    width: int = 800,
    height: int = 600,
    scale: float = 1.0,
) -> None:
    """
    Render a `{"data": ..., "layout": ...}` document in a headless browser and
    save the result as a static image.

    The page is `width` by `height` css pixels, screenshotted with a device
    scale factor of `scale` (so the image is `width * scale` pixels wide),
    cropped to its non-transparent bounding box and converted with Pillow.
    """
    if image_format not in PIL_FORMATS:
        raise ExportError(f"Cannot export {path}: unsupported format {image_format!r}")

    create_parent_dir(path)

    with tempfile.TemporaryDirectory() as tmp:
        hti = Html2Image(
            output_path=tmp,
            size=(width, height),
            custom_flags=[
                f"--force-device-scale-factor={scale}",
                "--hide-scrollbars",
                # replacing the default flags drops the transparent background
                "--default-background-color=00000000",
            ],
        )
        try:
            screenshots = hti.screenshot(
                html_str=figure_page(figure_json, width, height), save_as="figure.png"
            )
            img = Image.open(screenshots[0])
            img.load()
        except (OSError, IndexError) as e:
            raise ExportError(f"Cannot export {path}: {e}") from e

    # Crop transparent regions
    bbox = img.getbbox()
    if bbox is not None:
        img = img.crop(bbox)
    if image_format in ("jpeg", "pdf", "eps"):
        img = img.convert("RGB")

    try:
        img.save(path, format=PIL_FORMATS[image_format])
    except (OSError, ValueError) as e:
        raise ExportError(f"Cannot export {path}: {e}") from e

    print(f"Image saved to {path}")
