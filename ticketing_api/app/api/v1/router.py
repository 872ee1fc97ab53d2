"""
Top-level router for version 1 of the API.

Event routes are mounted at the root of the version prefix so their
paths read ``/api/v1/create-event``, ``/api/v1/event/{id}`` and so on;
admin-action routes live under ``/admin``.
"""

from fastapi import APIRouter

from .endpoints import admin, events

router = APIRouter()

router.include_router(events.router, tags=["events"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
