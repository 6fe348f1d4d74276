"""Module matrix -> branded SVG.

Draw order is fixed: background rect, one compound path for all dark
modules, optional logo backing, optional logo image. The logo is drawn on
top of the modules; modules underneath are not masked.
"""

from __future__ import annotations

import logging

from brandqr.engine.geometry import Geometry, plan_geometry
from brandqr.models.images import VectorImage
from brandqr.models.qr import ModuleMatrix
from brandqr.models.render_config import RenderConfig
from brandqr.svg.serializer import format_number, serialize_svg

logger = logging.getLogger(__name__)


def module_path_data(matrix: ModuleMatrix, geometry: Geometry) -> str:
    """Path data with one closed unit square per dark module."""
    s = format_number(geometry.module_scale)
    parts: list[str] = []
    for x, y in matrix.dark_modules():
        px, py = geometry.module_origin(x, y)
        parts.append(f"M{format_number(px)},{format_number(py)}h{s}v{s}h-{s}z")
    return "".join(parts)


def render_svg(matrix: ModuleMatrix, config: RenderConfig) -> VectorImage:
    geometry = plan_geometry(matrix.size, config)

    elements: list[dict] = [
        {"tag": "rect", "width": "100%", "height": "100%", "fill": config.background_color},
        {"tag": "path", "d": module_path_data(matrix, geometry), "fill": config.foreground_color},
    ]

    logo = config.logo
    if logo is not None and geometry.logo is not None:
        backing = geometry.backing
        backing_color = logo.backing_color
        if backing_color is not None and backing is not None:
            elements.append({
                "tag": "rect",
                "x": backing.x,
                "y": backing.y,
                "width": backing.width,
                "height": backing.height,
                "fill": backing_color,
                "rx": backing.radius,
            })
        elements.append({
            "tag": "image",
            "x": geometry.logo.x,
            "y": geometry.logo.y,
            "width": geometry.logo.size,
            "height": geometry.logo.size,
            "href": logo.href,
        })

    svg = serialize_svg(
        elements,
        geometry.total_size,
        geometry.total_size,
        root_attrs={"stroke": "none"},
    )
    logger.debug(
        "Rendered %dx%d matrix to %s px SVG (%d bytes)",
        matrix.size, matrix.size, format_number(geometry.total_size), len(svg),
    )
    return VectorImage(svg=svg, width=geometry.total_size, height=geometry.total_size)
