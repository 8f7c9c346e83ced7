# recipe_ai/routers/auth.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from recipe_ai.core.deps import get_optional_user
from recipe_ai.models.identity import AuthStatusResponse, Identity

router = APIRouter(tags=["auth"])


@router.get("/auth", response_model=AuthStatusResponse)
async def auth_status(user: Optional[Identity] = Depends(get_optional_user)) -> AuthStatusResponse:
    return AuthStatusResponse(authenticated=user is not None, user=user)
