# recipe_ai/services/health.py
from __future__ import annotations

import time
from typing import Any, Dict, Optional, Tuple

from recipe_ai.core import config
from recipe_ai.services.recipes_repo import RecipeStore


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check(status: str, latency_ms: Optional[int] = None, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status}
    if latency_ms is not None:
        out["latency_ms"] = latency_ms
    if error:
        out["error"] = error
    return out


def check_db(store: RecipeStore) -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        store.ping()
        return _check("ok", _ms_since(start))
    except Exception as e:
        return _check("fail", _ms_since(start), str(e))


async def check_gemini(client: Any) -> Dict[str, Any]:
    if client is None or not client.configured:
        return _check("degraded", error="not configured")

    start = time.perf_counter()
    try:
        await client.ping()
        return _check("ok", _ms_since(start))
    except Exception as e:
        return _check("degraded", _ms_since(start), str(e))


def check_configured(client: Any) -> Dict[str, Any]:
    # Webhook and identity endpoints have no side-effect-free probe.
    if client is not None and getattr(client, "configured", True):
        return _check("ok")
    return _check("degraded", error="not configured")


async def readiness(
    *,
    store: RecipeStore,
    gemini: Any = None,
    webhook: Any = None,
    identity: Any = None,
) -> Tuple[str, Dict[str, Dict[str, Any]]]:
    """
    The store is required. Generation needs at least one of webhook/Gemini,
    so losing both is a failure while losing one only degrades.
    """
    checks = {
        "db": check_db(store),
        "gemini": await check_gemini(gemini),
        "webhook": check_configured(webhook),
        "identity": check_configured(identity),
    }

    if checks["db"]["status"] != "ok":
        return "fail", checks
    if checks["gemini"]["status"] != "ok" and checks["webhook"]["status"] != "ok":
        return "fail", checks
    if any(c["status"] != "ok" for c in checks.values()):
        return "degraded", checks
    return "ok", checks


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
