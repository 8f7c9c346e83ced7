# recipe_ai/clients/gemini.py
from __future__ import annotations

from typing import Any, Dict

import httpx

from recipe_ai.core import config


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        model: str = "gemini-2.0-flash",
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(
        self,
        prompt: str,
        temperature: float = config.GEMINI_TEMPERATURE,
        max_output_tokens: int = config.GEMINI_MAX_OUTPUT_TOKENS,
        timeout_s: int = 120,
    ) -> str:
        payload: Dict[str, Any] = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
            },
        }

        async with httpx.AsyncClient(timeout=timeout_s) as client:
            r = await client.post(
                f"{self.base_url}/models/{self.model}:generateContent",
                params={"key": self.api_key},
                json=payload,
            )
            data = r.json()
            if r.status_code >= 400:
                message = (data.get("error") or {}).get("message") or "Unknown error"
                raise httpx.HTTPStatusError(
                    f"Gemini API error: {message}", request=r.request, response=r
                )

        # Gemini returns: {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}
        candidates = data.get("candidates") or [{}]
        parts = (candidates[0].get("content") or {}).get("parts") or [{}]
        return parts[0].get("text") or ""

    async def ping(self, timeout_s: float = 2.0) -> None:
        async with httpx.AsyncClient(timeout=timeout_s) as client:
            r = await client.get(f"{self.base_url}/models/{self.model}", params={"key": self.api_key})
            r.raise_for_status()
