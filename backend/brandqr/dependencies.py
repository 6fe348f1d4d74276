"""FastAPI dependency injection."""

from __future__ import annotations

from brandqr.config import settings
from brandqr.engine.encoder import Encoder, encode_text
from brandqr.engine.share import ShareDocumentBuilder
from brandqr.storage.session_store import SessionStore, get_session_store

_share_builder: ShareDocumentBuilder | None = None


def get_store() -> SessionStore:
    return get_session_store()


def get_encoder() -> Encoder:
    return encode_text


def get_share_builder() -> ShareDocumentBuilder:
    global _share_builder
    if _share_builder is None:
        _share_builder = ShareDocumentBuilder(template_path=settings.share_template_path)
    return _share_builder
