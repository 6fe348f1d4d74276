"""Shared test fixtures."""

from __future__ import annotations

import base64
import io

import numpy as np
import pytest
from PIL import Image
from svgpathtools import parse_path

from brandqr.models.qr import EccLevel, ModuleMatrix
from brandqr.svg.parser import parse_svg


# Synthetic 21x21 symbol: three finder patterns plus timing rows, enough
# structure to tell rows from columns.
def _finder_matrix(size: int = 21) -> np.ndarray:
    grid = np.zeros((size, size), dtype=bool)
    for ox, oy in ((0, 0), (size - 7, 0), (0, size - 7)):
        grid[oy:oy + 7, ox:ox + 7] = True
        grid[oy + 1:oy + 6, ox + 1:ox + 6] = False
        grid[oy + 2:oy + 5, ox + 2:ox + 5] = True
    grid[6, 8:size - 8:2] = True
    grid[8:size - 8:2, 6] = True
    grid[12, 14] = True  # asymmetric marker
    return grid


FINDER_21 = _finder_matrix()

CHECKER_5 = np.indices((5, 5)).sum(axis=0) % 2 == 0


def make_png(color: tuple[int, int, int] = (255, 0, 0), size: int = 8) -> bytes:
    with Image.new("RGB", (size, size), color) as img, io.BytesIO() as buf:
        img.save(buf, format="PNG")
        return buf.getvalue()


RED_LOGO_URL = "data:image/png;base64," + base64.b64encode(make_png()).decode("ascii")


def fixed_encoder(modules: np.ndarray):
    """Encoder capability that ignores its input and returns ``modules``."""
    calls: list[tuple[str, EccLevel]] = []

    def _encode(text: str, ecc: EccLevel) -> ModuleMatrix:
        calls.append((text, ecc))
        return ModuleMatrix(modules)

    _encode.calls = calls  # type: ignore[attr-defined]
    return _encode


def covered_modules(svg: str, size: int, scale: float, offset: float) -> np.ndarray:
    """Re-read the module path: which unit squares does it cover?"""
    doc = parse_svg(svg)
    paths = doc.find("path")
    assert len(paths) == 1
    grid = np.zeros((size, size), dtype=bool)
    d = paths[0].path_data or ""
    if not d:
        return grid
    for sub in parse_path(d).continuous_subpaths():
        xmin, xmax, ymin, ymax = sub.bbox()
        assert xmax - xmin == pytest.approx(scale)
        assert ymax - ymin == pytest.approx(scale)
        x = round((xmin - offset) / scale)
        y = round((ymin - offset) / scale)
        assert not grid[y, x], f"module ({x}, {y}) drawn twice"
        grid[y, x] = True
    return grid


@pytest.fixture
def finder_matrix() -> ModuleMatrix:
    return ModuleMatrix(FINDER_21)


@pytest.fixture
def checker_matrix() -> ModuleMatrix:
    return ModuleMatrix(CHECKER_5)


@pytest.fixture
def red_logo_url() -> str:
    return RED_LOGO_URL
