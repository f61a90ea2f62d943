"""FastAPI dependencies wiring handlers to their collaborators."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_admin.api.controllers.users import UserAdminController
from user_admin.db import get_session
from user_admin.services.user import UserService


async def get_user_service(
    session: AsyncSession = Depends(get_session),
) -> UserService:
    return UserService(session)


async def get_user_controller(
    user_service: UserService = Depends(get_user_service),
) -> UserAdminController:
    return UserAdminController(user_service)
