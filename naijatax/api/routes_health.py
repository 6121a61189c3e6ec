from __future__ import annotations

import time

from fastapi import APIRouter, Request

from naijatax.core.exceptions import TaxBandConfigurationError
from naijatax.services.tax_engine import PIT_BANDS, validate_bands

router = APIRouter(tags=["health"])


def _check_bands() -> bool:
    try:
        validate_bands(PIT_BANDS)
    except TaxBandConfigurationError:
        return False
    return True


def _check_session(request: Request) -> bool:
    return getattr(request.app.state, "session_store", None) is not None


@router.get("/live")
async def live() -> dict[str, str]:
    """Kubernetes-style liveness endpoint (no dependencies)."""
    return {"status": "alive"}


@router.get("/ready")
async def ready(request: Request) -> dict[str, object]:
    """Readiness probe: band schedule loads and the session store exists."""
    start = time.time()
    bands_ok = _check_bands()
    session_ok = _check_session(request)
    duration_ms = int((time.time() - start) * 1000)
    return {
        "status": "ok" if bands_ok and session_ok else "degraded",
        "checks": {"tax_bands": bands_ok, "session_store": session_ok},
        "duration_ms": duration_ms,
    }
