"""FastAPI dependencies: the collaborator container and the acting user."""

from __future__ import annotations

from fastapi import Header, HTTPException, Request

from storefront.domain.model.value_objects import Actor
from storefront.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def current_actor(
    x_user_id: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
) -> Actor:
    """Identity resolved by the upstream authentication middleware."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Authentication required")
    return Actor(id=x_user_id.strip(), name=x_user_name)
