"""Endpoints de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_kontent_settings, get_recombee_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="kontent-recombee-sync",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: pronto quando Kontent.ai e Recombee estão configurados."""
    kontent_errors = get_kontent_settings().validate()
    recombee_errors = get_recombee_settings().validate()
    ready = not kontent_errors and not recombee_errors

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "kontent": {"status": "ok" if not kontent_errors else "failed", "errors": kontent_errors},
            "recombee": {"status": "ok" if not recombee_errors else "failed", "errors": recombee_errors},
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
