"""Pixel geometry for a rendered QR code.

Everything is derived from the matrix size and the render config:

    total_size = (matrix_size + 2 * border_modules) * module_scale

The logo box is centered with side ``total_size * size_percent / 100``.
Its backing rectangle pads the box by 10% of the logo side on every edge
and uses the padding as corner radius.
"""

from __future__ import annotations

from dataclasses import dataclass

from brandqr.errors import ConfigurationError
from brandqr.models.render_config import RenderConfig

# Backing padding as a fraction of the logo side, per edge.
LOGO_PADDING_RATIO = 0.1


@dataclass(frozen=True)
class LogoBox:
    x: float
    y: float
    size: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.size / 2, self.y + self.size / 2)


@dataclass(frozen=True)
class BackingRect:
    x: float
    y: float
    width: float
    height: float
    radius: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class Geometry:
    total_size: float
    offset: float
    module_scale: float
    logo: LogoBox | None = None
    backing: BackingRect | None = None

    def module_origin(self, x: int, y: int) -> tuple[float, float]:
        """Top-left pixel corner of module (x, y)."""
        return (x * self.module_scale + self.offset, y * self.module_scale + self.offset)


def total_size(matrix_size: int, config: RenderConfig) -> float:
    return plan_geometry(matrix_size, config).total_size


def plan_geometry(matrix_size: int, config: RenderConfig) -> Geometry:
    """Compute canvas, module and logo geometry. Pure; raises ConfigurationError."""
    if not config.module_scale > 0:
        raise ConfigurationError(f"module_scale must be positive, got {config.module_scale}")
    if config.border_modules < 0:
        raise ConfigurationError(f"border_modules must be non-negative, got {config.border_modules}")
    if matrix_size <= 0:
        raise ConfigurationError(f"matrix size must be positive, got {matrix_size}")

    scale = config.module_scale
    offset = config.border_modules * scale
    size = matrix_size * scale + offset * 2

    if config.logo is None:
        return Geometry(total_size=size, offset=offset, module_scale=scale)

    side = size * config.logo.size_percent / 100
    corner = (size - side) / 2
    padding = side * LOGO_PADDING_RATIO
    logo = LogoBox(x=corner, y=corner, size=side)
    backing = BackingRect(
        x=corner - padding,
        y=corner - padding,
        width=side + padding * 2,
        height=side + padding * 2,
        radius=padding,
    )
    return Geometry(total_size=size, offset=offset, module_scale=scale, logo=logo, backing=backing)
