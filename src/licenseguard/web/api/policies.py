"""REST API for the active policy."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["policies"])


@router.get("/policy")
async def get_policy(request: Request):
    return request.app.state.policy.to_dict()
