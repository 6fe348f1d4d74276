"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ClassifyResponse(BaseModel):
    is_url: bool
    normalized_url: str


class GenerateResponse(BaseModel):
    session_id: str
    svg: str
    width: float
    height: float
    matrix_size: int
    is_url: bool = False
    clickable: bool = False
    click_url: str | None = None
    status_message: str | None = None
    caption_html: str = ""


class ShareResponse(BaseModel):
    share_url: str
    is_url: bool
    whatsapp_url: str | None = None
    warning: str | None = None


class LogoResponse(BaseModel):
    data_url: str
    media_type: str
    size_bytes: int
