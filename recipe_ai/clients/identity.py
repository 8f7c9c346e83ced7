# recipe_ai/clients/identity.py
from __future__ import annotations

import logging
from typing import Optional

import httpx

from recipe_ai.models.identity import Identity

log = logging.getLogger("recipe_ai.identity")


class IdentityClient:
    """Resolves a bearer token to a user through the auth provider's REST API."""

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        timeout_s: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.timeout_s = timeout_s
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    async def get_user(self, token: str) -> Optional[Identity]:
        if not token or not self.base_url:
            return None
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                r = await client.get(
                    f"{self.base_url}/auth/v1/user",
                    headers={"Authorization": f"Bearer {token}", "apikey": self.anon_key},
                )
        except httpx.HTTPError as e:
            log.warning("identity lookup failed", extra={"error": str(e)})
            return None

        if r.status_code != 200:
            return None

        try:
            data = r.json()
        except ValueError:
            log.warning("identity lookup returned non-JSON body")
            return None
        if not isinstance(data, dict) or not data.get("id"):
            return None
        return Identity(**data)
