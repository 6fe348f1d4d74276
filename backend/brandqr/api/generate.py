"""POST /api/generate — encode, render and store the current QR code."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from brandqr.dependencies import get_encoder, get_store
from brandqr.engine.encoder import Encoder
from brandqr.engine.session import generate as generate_result
from brandqr.engine.share import caption_html
from brandqr.models.requests import GenerateRequest
from brandqr.models.responses import GenerateResponse
from brandqr.storage.session_store import SessionStore

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    store: SessionStore = Depends(get_store),
    encoder: Encoder = Depends(get_encoder),
) -> GenerateResponse:
    # Config errors abort here, before anything is stored.
    config = req.to_render_config()
    result = generate_result(
        req.text,
        req.error_correction,
        config,
        encoder=encoder,
        make_clickable=req.make_clickable,
    )
    session_id = store.put(result, session_id=req.session_id)

    return GenerateResponse(
        session_id=session_id,
        svg=result.image.svg,
        width=result.image.width,
        height=result.image.height,
        matrix_size=result.matrix_size,
        is_url=result.is_url,
        clickable=result.clickable,
        click_url=result.click_url,
        status_message=result.status_message,
        caption_html=caption_html(config.caption),
    )
