"""Render configuration value objects.

All three are frozen dataclasses validated at construction. Invalid
geometry or colors raise ConfigurationError; values are never clamped.
"""

from __future__ import annotations

import base64
import io
import math
from dataclasses import dataclass
from enum import Enum

from PIL import Image, ImageColor, UnidentifiedImageError

from brandqr.errors import ConfigurationError


class LogoBackground(str, Enum):
    NONE = "none"
    WHITE = "white"
    CUSTOM = "custom"


class CaptionSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


def validate_color(value: str, field_name: str) -> str:
    """Accept any opaque color Pillow can parse (``#rgb``, ``#rrggbb``, names, ``rgb()``)."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{field_name} must be a color string")
    try:
        rgb = ImageColor.getrgb(value.strip())
    except ValueError as e:
        raise ConfigurationError(f"{field_name} is not a valid color: {value!r}") from e
    if len(rgb) == 4 and rgb[3] != 255:
        raise ConfigurationError(f"{field_name} must be opaque: {value!r}")
    return value.strip()


def logo_data_url(data: bytes, media_type: str | None = None) -> str:
    """Build a base64 data URL for an uploaded logo.

    When ``media_type`` is not given, Pillow sniffs the format.
    """
    if not data:
        raise ConfigurationError("Logo image is empty")
    if media_type is None:
        try:
            with Image.open(io.BytesIO(data)) as img:
                media_type = Image.MIME.get(img.format or "", "")
        except UnidentifiedImageError as e:
            raise ConfigurationError("Logo image format not recognised") from e
        if not media_type:
            raise ConfigurationError("Logo image format not recognised")
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


@dataclass(frozen=True)
class LogoConfig:
    href: str
    size_percent: float = 20.0
    background: LogoBackground = LogoBackground.NONE
    custom_color: str = "#ffffff"

    def __post_init__(self) -> None:
        if not self.href:
            raise ConfigurationError("Logo image reference must not be empty")
        # Logos are embedded, never fetched.
        if not self.href.startswith("data:"):
            raise ConfigurationError("Logo image must be a data: URL")
        if not (0 < self.size_percent <= 100):
            raise ConfigurationError(
                f"Logo size must be in (0, 100] percent, got {self.size_percent}"
            )
        try:
            object.__setattr__(self, "background", LogoBackground(self.background))
        except ValueError as e:
            raise ConfigurationError(f"Unknown logo background mode: {self.background!r}") from e
        object.__setattr__(self, "custom_color", validate_color(self.custom_color, "custom_color"))

    @property
    def backing_color(self) -> str | None:
        """Fill of the rounded backing shape, or None when no backing is drawn."""
        if self.background is LogoBackground.WHITE:
            return "#ffffff"
        if self.background is LogoBackground.CUSTOM:
            return self.custom_color
        return None


@dataclass(frozen=True)
class CaptionConfig:
    text: str
    color: str = "#000000"
    size: CaptionSize = CaptionSize.MEDIUM

    def __post_init__(self) -> None:
        text = (self.text or "").strip()
        if not text:
            raise ConfigurationError("Caption text must not be empty")
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "color", validate_color(self.color, "caption color"))
        try:
            object.__setattr__(self, "size", CaptionSize(self.size))
        except ValueError as e:
            raise ConfigurationError(f"Unknown caption size: {self.size!r}") from e


@dataclass(frozen=True)
class RenderConfig:
    module_scale: float = 10.0
    border_modules: int = 4
    foreground_color: str = "#000000"
    background_color: str = "#ffffff"
    logo: LogoConfig | None = None
    caption: CaptionConfig | None = None

    def __post_init__(self) -> None:
        if isinstance(self.module_scale, bool) or not isinstance(self.module_scale, (int, float)):
            raise ConfigurationError("module_scale must be a number")
        if not self.module_scale > 0 or math.isinf(self.module_scale):
            raise ConfigurationError(f"module_scale must be positive, got {self.module_scale}")
        if isinstance(self.border_modules, bool) or not isinstance(self.border_modules, int):
            raise ConfigurationError("border_modules must be an integer")
        if self.border_modules < 0:
            raise ConfigurationError(f"border_modules must be non-negative, got {self.border_modules}")
        object.__setattr__(
            self, "foreground_color", validate_color(self.foreground_color, "foreground_color")
        )
        object.__setattr__(
            self, "background_color", validate_color(self.background_color, "background_color")
        )
