"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from brandqr.api import classify, export, generate, health, logos, share

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(classify.router)
api_router.include_router(logos.router)
api_router.include_router(generate.router)
api_router.include_router(export.router)
api_router.include_router(share.router)
