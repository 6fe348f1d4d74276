"""Rendered artifacts handed between the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VectorImage:
    """Serialized SVG document plus its declared pixel size."""

    svg: str
    width: float
    height: float


@dataclass(frozen=True)
class RasterImage:
    """Encoded raster payload."""

    data: bytes
    width: int
    height: int
    media_type: str = "image/png"
