"""SVG -> PNG export at a fixed 4x supersampling factor.

The raster is drawn directly at 4x the declared size and is not
downsampled afterwards. Antialiasing and image interpolation are switched
off so module edges stay hard. The canvas is filled with the configured
background before the SVG is composited onto it, so the output is always
opaque.
"""

from __future__ import annotations

import asyncio
import base64
import io
import logging
import xml.etree.ElementTree as ET
from urllib.parse import unquote_to_bytes

import cairosvg
from cairosvg.url import safe_fetch
from PIL import Image, ImageColor

from brandqr.engine.geometry import plan_geometry
from brandqr.engine.session import GenerationResult
from brandqr.errors import ExportError
from brandqr.models.images import RasterImage, VectorImage
from brandqr.svg.parser import parse_svg, set_root_attributes

logger = logging.getLogger(__name__)

SUPERSAMPLE = 4

# Rendering hints understood by CairoSVG: no antialiasing on shapes, fast
# (nearest) filtering for embedded images.
_CRISP_ATTRS = {
    "shape-rendering": "crispEdges",
    "image-rendering": "optimizeSpeed",
}


def check_embedded_image(href: str) -> None:
    """Raise ExportError if an embedded ``data:`` image cannot be decoded.

    SVG payloads are left to CairoSVG. Anything other than a ``data:`` URL
    is rejected, since export never fetches external resources.
    """
    if not href.startswith("data:"):
        raise ExportError("Embedded image must be a data: URL")
    header, sep, payload = href[len("data:"):].partition(",")
    if not sep:
        raise ExportError("Embedded logo is not a valid data URL")
    media_type = header.split(";", 1)[0].strip().lower()
    if media_type == "image/svg+xml":
        return
    try:
        if header.lower().endswith(";base64"):
            raw = base64.b64decode(payload, validate=True)
        else:
            raw = unquote_to_bytes(payload)
    except ValueError as e:
        raise ExportError("Embedded logo data is not valid base64") from e

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.verify()
    except (OSError, ValueError, SyntaxError) as e:
        raise ExportError(f"Embedded logo format is not supported ({media_type or 'unknown'})") from e


def natural_size(image: VectorImage) -> tuple[float, float]:
    """Width/height declared on the SVG root; (0, 0) when absent."""
    try:
        doc = parse_svg(image.svg)
    except ET.ParseError as e:
        raise ExportError(f"Vector image could not be parsed: {e}") from e
    for href in doc.embedded_images:
        check_embedded_image(href)
    return doc.width, doc.height


def rasterize_svg(svg_text: str, width: float, height: float, background_color: str) -> RasterImage:
    """Draw ``svg_text`` onto an opaque ``4*width x 4*height`` canvas and encode PNG."""
    px_w = max(1, round(width * SUPERSAMPLE))
    px_h = max(1, round(height * SUPERSAMPLE))
    fill = ImageColor.getrgb(background_color)

    prepared = set_root_attributes(
        svg_text,
        {k: v for k, v in _CRISP_ATTRS.items() if f"{k}=" not in svg_text},
    )
    try:
        drawn_png = cairosvg.svg2png(
            bytestring=prepared.encode("utf-8"),
            output_width=px_w,
            output_height=px_h,
            background_color=background_color,
            url_fetcher=safe_fetch,
        )
    except Exception as e:
        raise ExportError(f"Failed to rasterize SVG: {e}") from e

    try:
        with (
            Image.open(io.BytesIO(drawn_png)) as drawn,
            drawn.convert("RGBA") as layer,
            Image.new("RGBA", (px_w, px_h), fill) as canvas,
        ):
            canvas.alpha_composite(layer)
            with canvas.convert("RGB") as flattened, io.BytesIO() as buf:
                flattened.save(buf, format="PNG")
                data = buf.getvalue()
    except (OSError, ValueError) as e:
        raise ExportError(f"Failed to encode PNG: {e}") from e

    return RasterImage(data=data, width=px_w, height=px_h)


def render_png(result: GenerationResult) -> RasterImage:
    """Export the result's vector image as PNG. Blocking."""
    width, height = natural_size(result.image)
    if width <= 0 or height <= 0:
        size = plan_geometry(result.matrix_size, result.config).total_size
        logger.warning(
            "SVG reports zero natural size, using computed size %s", size,
        )
        width = height = size

    raster = rasterize_svg(result.image.svg, width, height, result.config.background_color)
    logger.debug("Exported PNG %dx%d (%d bytes)", raster.width, raster.height, len(raster.data))
    return raster


async def export_png(result: GenerationResult) -> RasterImage:
    """Run :func:`render_png` off the event loop.

    The export works on the immutable result it was handed, so a newer
    generation for the same session does not affect it.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, render_png, result)
