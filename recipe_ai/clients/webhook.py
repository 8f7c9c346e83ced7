# recipe_ai/clients/webhook.py
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


def unwrap_text(body: Any) -> str:
    """
    Workflow runners answer in a few shapes: {"text": ...}, {"output": ...},
    a one-element list of those, or a bare string.
    """
    if isinstance(body, list):
        body = body[0] if body else None
    if isinstance(body, str):
        return body
    if isinstance(body, dict):
        for key in ("text", "output", "recipe"):
            value = body.get(key)
            if isinstance(value, str):
                return value
    return ""


class WorkflowWebhookClient:
    def __init__(self, url: str, timeout_s: float = 60, headers: Optional[Dict[str, str]] = None):
        self.url = url
        self.timeout_s = timeout_s
        self.headers = headers or {}

    @property
    def configured(self) -> bool:
        return bool(self.url)

    async def trigger(self, payload: Dict[str, Any]) -> str:
        async with httpx.AsyncClient(timeout=self.timeout_s, follow_redirects=True) as client:
            r = await client.post(self.url, json=payload, headers=self.headers)
            r.raise_for_status()

        try:
            body: Any = r.json()
        except ValueError:
            body = r.text
        return unwrap_text(body)
