"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from brandqr.config import Settings, settings
from brandqr.models.render_config import CaptionConfig, LogoConfig, RenderConfig


class LogoRequest(BaseModel):
    data_url: str = Field(..., description="Logo image as a data: URL (see POST /api/logos)")
    size_percent: float | None = Field(
        default=None,
        description="Logo side as a percentage of the whole canvas, in (0, 100]",
    )
    background: str = Field(default="none", description="Backing shape: none, white or custom")
    custom_color: str = Field(default="#ffffff", description="Backing color for custom mode")


class CaptionRequest(BaseModel):
    text: str = Field(default="", description="Caption text; blank means no caption")
    color: str = Field(default="#000000", description="Caption color")
    size: str = Field(default="medium", description="Caption size: small, medium or large")


class GenerateRequest(BaseModel):
    text: str = Field(..., description="Text or URL to encode")
    error_correction: str = Field(
        default="MEDIUM",
        description="LOW, MEDIUM, QUARTILE or HIGH (unknown values mean MEDIUM)",
    )
    module_scale: float | None = Field(
        default=None, le=settings.max_module_scale, description="Pixels per module"
    )
    border_modules: int | None = Field(
        default=None, le=settings.max_border_modules, description="Quiet zone width in modules"
    )
    foreground_color: str = Field(default="#000000")
    background_color: str = Field(default="#ffffff")
    make_clickable: bool = Field(
        default=False,
        description="Open the encoded URL when the preview is clicked",
    )
    logo: LogoRequest | None = None
    caption: CaptionRequest | None = None
    session_id: str | None = Field(
        default=None,
        description="Replace the current image of this session instead of starting a new one",
    )

    def to_render_config(self, defaults: Settings = settings) -> RenderConfig:
        """Build the validated render config. Raises ConfigurationError."""
        logo = None
        if self.logo is not None:
            logo = LogoConfig(
                href=self.logo.data_url,
                size_percent=(
                    self.logo.size_percent
                    if self.logo.size_percent is not None
                    else defaults.default_logo_size_percent
                ),
                background=self.logo.background,
                custom_color=self.logo.custom_color,
            )
        caption = None
        if self.caption is not None and self.caption.text.strip():
            caption = CaptionConfig(
                text=self.caption.text,
                color=self.caption.color,
                size=self.caption.size,
            )
        return RenderConfig(
            module_scale=(
                self.module_scale if self.module_scale is not None else defaults.default_module_scale
            ),
            border_modules=(
                self.border_modules
                if self.border_modules is not None
                else defaults.default_border_modules
            ),
            foreground_color=self.foreground_color,
            background_color=self.background_color,
            logo=logo,
            caption=caption,
        )


class ClassifyRequest(BaseModel):
    text: str = Field(..., description="Text to classify")
