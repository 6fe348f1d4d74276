"""POST /api/classify — URL detection for arbitrary text."""

from __future__ import annotations

from fastapi import APIRouter

from brandqr.engine.url_classifier import is_url, normalize_url
from brandqr.models.requests import ClassifyRequest
from brandqr.models.responses import ClassifyResponse

router = APIRouter()


@router.post("/classify", response_model=ClassifyResponse)
async def classify(req: ClassifyRequest) -> ClassifyResponse:
    return ClassifyResponse(is_url=is_url(req.text), normalized_url=normalize_url(req.text))
