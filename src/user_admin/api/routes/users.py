"""User management endpoints (admin panel)."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Path

from user_admin.api.controllers.users import UserAdminController
from user_admin.api.deps import get_user_controller
from user_admin.api.schemas.users import MAX_ID

router = APIRouter(tags=["users"])


@router.post("/users", status_code=201)
async def create_user(
    body: Any = Body(default=None),
    controller: UserAdminController = Depends(get_user_controller),
):
    return await controller.create(body)


@router.post("/users/batch-delete")
async def delete_users(
    body: Any = Body(default=None),
    controller: UserAdminController = Depends(get_user_controller),
):
    return await controller.delete_many(body)


@router.put("/users/{user_id}")
async def update_user(
    user_id: int = Path(ge=1, le=MAX_ID),
    body: Any = Body(default=None),
    controller: UserAdminController = Depends(get_user_controller),
):
    return await controller.update(user_id, body)


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: int = Path(ge=1, le=MAX_ID),
    controller: UserAdminController = Depends(get_user_controller),
):
    return await controller.delete_one(user_id)
