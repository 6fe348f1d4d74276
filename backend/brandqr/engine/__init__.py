"""BrandQR rendering and branding pipeline."""

from brandqr.engine.geometry import Geometry, plan_geometry
from brandqr.engine.rasterizer import export_png, render_png
from brandqr.engine.renderer import render_svg
from brandqr.engine.session import GenerationResult, generate
from brandqr.engine.share import ShareDocumentBuilder
from brandqr.engine.url_classifier import is_url, normalize_url

__all__ = [
    "Geometry",
    "plan_geometry",
    "render_svg",
    "is_url",
    "normalize_url",
    "render_png",
    "export_png",
    "ShareDocumentBuilder",
    "GenerationResult",
    "generate",
]
