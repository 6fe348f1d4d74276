"""Share page endpoints.

GET serves the standalone document; POST returns the link to it plus the
WhatsApp share link for URL content.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from brandqr.dependencies import get_share_builder, get_store
from brandqr.engine.share import ShareDocumentBuilder, share_warning, whatsapp_share_url
from brandqr.models.responses import ShareResponse
from brandqr.storage.session_store import SessionStore

router = APIRouter(prefix="/sessions")

# The page is static: inline styles and data: images only, no scripts.
SHARE_PAGE_CSP = (
    "default-src 'none'; style-src 'unsafe-inline'; img-src data:; "
    "base-uri 'none'; form-action 'none'"
)


@router.get("/{session_id}/share", response_class=HTMLResponse, name="share_page")
async def share_page(
    session_id: str,
    store: SessionStore = Depends(get_store),
    builder: ShareDocumentBuilder = Depends(get_share_builder),
) -> HTMLResponse:
    result = store.get(session_id)
    return HTMLResponse(
        content=builder.build(result),
        headers={"Content-Security-Policy": SHARE_PAGE_CSP},
    )


@router.post("/{session_id}/share", response_model=ShareResponse)
async def create_share(
    session_id: str,
    request: Request,
    store: SessionStore = Depends(get_store),
) -> ShareResponse:
    result = store.get(session_id)
    share_url = str(request.url_for("share_page", session_id=session_id))
    return ShareResponse(
        share_url=share_url,
        is_url=result.is_url,
        whatsapp_url=whatsapp_share_url(share_url) if result.is_url else None,
        warning=share_warning(result),
    )
