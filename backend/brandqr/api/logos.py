"""POST /api/logos — turn an uploaded logo file into an embeddable data URL."""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, UploadFile

from brandqr.config import settings
from brandqr.errors import ConfigurationError
from brandqr.models.render_config import logo_data_url
from brandqr.models.responses import LogoResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Pillow cannot identify SVG, so trust the declared type for it.
_DECLARED_TYPES = frozenset({"image/svg+xml"})


@router.post("/logos", response_model=LogoResponse)
async def upload_logo(file: UploadFile = File(...)) -> LogoResponse:
    data = await file.read(settings.max_logo_bytes + 1)
    if len(data) > settings.max_logo_bytes:
        raise ConfigurationError(f"Logo image exceeds {settings.max_logo_bytes} bytes")

    declared = (file.content_type or "").split(";", 1)[0].strip().lower()
    data_url = logo_data_url(data, declared if declared in _DECLARED_TYPES else None)
    media_type = data_url[len("data:"):].split(";", 1)[0]
    logger.debug("Accepted logo %s (%s, %d bytes)", file.filename, media_type, len(data))

    return LogoResponse(data_url=data_url, media_type=media_type, size_bytes=len(data))
