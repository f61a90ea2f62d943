"""Admin handlers for creating, updating and deleting users."""

from typing import Any

from fastapi.responses import JSONResponse

from user_admin.api import responses
from user_admin.errors import ApplicationError
from user_admin.services.user import UserCreateAttributes, UserService
from user_admin.validation import (
    validate_user_creation_input,
    validate_user_update_input,
    validate_users_delete_input,
)


USER_CREATION_ATTRIBUTES = {"firstname", "lastname", "email", "roles"}


class UserAdminController:
    def __init__(self, user_service: UserService):
        self.user_service = user_service

    async def create(self, body: Any) -> JSONResponse:
        if isinstance(body, dict):
            email = body.get("email") or ""
            body = {**body, "email": email.lower() if isinstance(email, str) else email}

        data = validate_user_creation_input(body)
        attributes = UserCreateAttributes(
            **data.model_dump(include=USER_CREATION_ATTRIBUTES)
        )

        if await self.user_service.exists(email=attributes.email):
            raise ApplicationError("Email already taken")

        if data.use_sso_registration:
            attributes.registration_token = None
            attributes.is_active = True

        created_user = await self.user_service.create(attributes)
        user_info = self.user_service.sanitize_user(created_user)

        # sanitize_user strips the token; the caller needs it once to finish registration
        user_info["registrationToken"] = created_user.registration_token

        return responses.created({"data": user_info})

    async def update(self, user_id: int, body: Any) -> JSONResponse:
        data = validate_user_update_input(body)

        if "email" in data.model_fields_set:
            email_taken = await self.user_service.exists(email=data.email, exclude_id=user_id)
            if email_taken:
                raise ApplicationError("A user with this email address already exists")

        updated_user = await self.user_service.update_by_id(user_id, data)
        if updated_user is None:
            return responses.not_found("User does not exist")

        await self.user_service.should_update_ee_disabled_users_list(user_id, data)

        return responses.ok({"data": self.user_service.sanitize_user(updated_user)})

    async def delete_one(self, user_id: int) -> JSONResponse:
        deleted_user = await self.user_service.delete_by_id(user_id)
        if deleted_user is None:
            return responses.not_found("User not found")

        await self.user_service.should_remove_from_ee_disabled_users_list(user_id)

        return responses.deleted({"data": self.user_service.sanitize_user(deleted_user)})

    async def delete_many(self, body: Any) -> JSONResponse:
        """Delete several users at once."""
        data = validate_users_delete_input(body)

        users = await self.user_service.delete_by_ids(data.ids)

        await self.user_service.should_remove_from_ee_disabled_users_list(data.ids)

        return responses.deleted({
            "data": [self.user_service.sanitize_user(u) for u in users],
        })
