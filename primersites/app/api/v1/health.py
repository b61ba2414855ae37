# File: primersites/app/api/v1/health.py
# Version: v0.2.0
"""
Healthcheck router: liveness plus the service identity and the Tm methods
this build can serve.
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from primersites.app.core.binding.thermodynamics import TM_METHODS
from primersites.app.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "tmMethods": sorted(TM_METHODS) + ["none"],
    }
