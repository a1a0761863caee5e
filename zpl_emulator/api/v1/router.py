"""API Router aggregator for Version 1 endpoints."""

from fastapi import APIRouter

from zpl_emulator.routes import health_router, label_router

api_router = APIRouter()

api_router.include_router(health_router.router, tags=["health"])
api_router.include_router(label_router.router, prefix="/labels", tags=["labels"])
