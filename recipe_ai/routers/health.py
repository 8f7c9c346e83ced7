# recipe_ai/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from recipe_ai.services.health import readiness, version_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok", **version_payload()}


@router.get("/health/ready")
async def ready(request: Request, response: Response):
    state = request.app.state
    overall, checks = await readiness(
        store=state.store,
        gemini=state.gemini,
        webhook=getattr(state.generator, "webhook_client", None),
        identity=state.identity,
    )

    if overall == "fail":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {"status": overall, "checks": checks, **version_payload()}


@router.get("/version")
def version():
    return version_payload()
