"""GET /api/sessions/{id}/svg|png — downloads of the current image."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from brandqr.dependencies import get_store
from brandqr.engine.filenames import export_filename
from brandqr.engine.rasterizer import export_png
from brandqr.storage.session_store import SessionStore

router = APIRouter(prefix="/sessions")


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/{session_id}/svg")
async def download_svg(session_id: str, store: SessionStore = Depends(get_store)) -> Response:
    result = store.get(session_id)
    filename = export_filename(result.caption_text, "svg")
    return Response(
        content=result.image.svg,
        media_type="image/svg+xml",
        headers=_attachment(filename),
    )


@router.get("/{session_id}/png")
async def download_png(session_id: str, store: SessionStore = Depends(get_store)) -> Response:
    result = store.get(session_id)
    raster = await export_png(result)
    filename = export_filename(result.caption_text, "png")
    return Response(
        content=raster.data,
        media_type=raster.media_type,
        headers=_attachment(filename),
    )
