from __future__ import annotations

from typing import Optional
from pydantic import BaseModel


class Identity(BaseModel):
    id: str
    email: Optional[str] = None
    created_at: Optional[str] = None


class AuthStatusResponse(BaseModel):
    authenticated: bool
    user: Optional[Identity] = None
