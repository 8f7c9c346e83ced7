# recipe_ai/core/deps.py
from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request

from recipe_ai.clients.identity import IdentityClient
from recipe_ai.models.identity import Identity
from recipe_ai.services.recipe_generator import RecipeGenerator
from recipe_ai.services.recipes_repo import RecipeStore


def get_store(request: Request) -> RecipeStore:
    return request.app.state.store


def get_generator(request: Request) -> RecipeGenerator:
    return request.app.state.generator


def get_identity_client(request: Request) -> IdentityClient:
    return request.app.state.identity


def bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization") or ""
    if not header.startswith("Bearer "):
        return None
    return header[len("Bearer "):].strip() or None


async def get_optional_user(
    request: Request,
    identity: IdentityClient = Depends(get_identity_client),
) -> Optional[Identity]:
    token = bearer_token(request)
    if not token:
        return None
    return await identity.get_user(token)


async def get_current_user(user: Optional[Identity] = Depends(get_optional_user)) -> Identity:
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
