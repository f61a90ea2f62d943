"""Persistence and side effects for admin users."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from user_admin.api.schemas.users import UserResponse, UserUpdateInput
from user_admin.audit import log_audit
from user_admin.auth import generate_registration_token, hash_password
from user_admin.config import get_settings
from user_admin.errors import ApplicationError
from user_admin.models import DisabledUser, Role, RoleCode, User

logger = logging.getLogger(__name__)

LAST_SUPER_ADMIN_MESSAGE = "You must have at least one user with super admin role."


@dataclass
class UserCreateAttributes:
    """Attributes accepted when creating a user."""

    email: str
    firstname: str
    lastname: str | None = None
    roles: list[int] = field(default_factory=list)
    is_active: bool = False
    registration_token: str | None = field(default_factory=generate_registration_token)


class UserService:
    def __init__(self, session: AsyncSession, *, ee_enabled: bool | None = None):
        self.session = session
        if ee_enabled is None:
            ee_enabled = get_settings().ee_enabled
        self.ee_enabled = ee_enabled

    async def exists(self, *, email: str, exclude_id: int | None = None) -> bool:
        """Whether a user other than ``exclude_id`` already uses ``email`` (case-insensitive)."""
        stmt = select(User.id).where(func.lower(User.email) == email.lower())
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def create(self, attributes: UserCreateAttributes) -> User:
        user = User(
            email=attributes.email,
            firstname=attributes.firstname,
            lastname=attributes.lastname,
            is_active=attributes.is_active,
            registration_token=attributes.registration_token,
            roles=await self._resolve_roles(attributes.roles),
        )
        self.session.add(user)
        await self._flush_unique_email()
        await self.session.refresh(user)
        await log_audit(
            self.session, action="create_user",
            target_type="user", target_ids=[user.id],
        )
        logger.info("Created admin user %s (id=%s)", user.email, user.id)
        return user

    async def update_by_id(self, user_id: int, attributes: UserUpdateInput) -> User | None:
        user = await self._get(user_id)
        if user is None:
            return None

        changes = attributes.changes()

        if "roles" in changes:
            roles = await self._resolve_roles(changes.pop("roles"))
            removes_super_admin = user.is_super_admin and not any(
                r.code == RoleCode.super_admin.value for r in roles
            )
            if removes_super_admin:
                await self._ensure_other_super_admin(exclude_ids=[user.id])
            user.roles = roles

        if changes.get("is_active") is False and user.is_super_admin:
            await self._ensure_other_super_admin(exclude_ids=[user.id])

        if "password" in changes:
            user.password_hash = hash_password(changes.pop("password"))

        for name, value in changes.items():
            setattr(user, name, value)

        await self._flush_unique_email()
        await self.session.refresh(user)
        await log_audit(
            self.session, action="update_user",
            target_type="user", target_ids=[user.id],
            detail={"fields": sorted(attributes.model_fields_set)},
        )
        return user

    async def delete_by_id(self, user_id: int) -> User | None:
        user = await self._get(user_id)
        if user is None:
            return None

        if user.is_super_admin:
            await self._ensure_other_super_admin(exclude_ids=[user.id])

        await self.session.delete(user)
        await self.session.flush()
        await log_audit(
            self.session, action="delete_user",
            target_type="user", target_ids=[user_id],
        )
        logger.info("Deleted admin user %s (id=%s)", user.email, user_id)
        return user

    async def delete_by_ids(self, ids: Iterable[int]) -> list[User]:
        """Delete every existing user in ``ids``. Unknown ids are ignored."""
        ids = list(ids)
        result = await self.session.execute(
            select(User).where(User.id.in_(ids)).order_by(User.id)
        )
        users = list(result.scalars().all())

        if any(u.is_super_admin for u in users):
            await self._ensure_other_super_admin(exclude_ids=[u.id for u in users])

        for user in users:
            await self.session.delete(user)
        await self.session.flush()

        deleted_ids = [u.id for u in users]
        await log_audit(
            self.session, action="delete_users",
            target_type="user", target_ids=deleted_ids,
        )
        logger.info("Deleted %d admin users: %s", len(users), deleted_ids)
        return users

    def sanitize_user(self, user: User) -> dict[str, Any]:
        """Public representation of ``user``: no password hash or tokens."""
        return UserResponse.model_validate(user).model_dump(mode="json", by_alias=True)

    async def get_disabled_user_ids(self) -> list[int]:
        result = await self.session.execute(
            select(DisabledUser.user_id).order_by(DisabledUser.user_id)
        )
        return list(result.scalars().all())

    async def should_update_ee_disabled_users_list(
        self, user_id: int, attributes: UserUpdateInput,
    ) -> None:
        """Drop ``user_id`` from the disabled list when the update reactivates it."""
        if not self.ee_enabled:
            return
        if attributes.is_active is not True:
            return
        if user_id not in await self.get_disabled_user_ids():
            return
        await self._remove_disabled([user_id])

    async def should_remove_from_ee_disabled_users_list(
        self, ids: int | Iterable[int],
    ) -> None:
        if not self.ee_enabled:
            return
        ids_to_check = {ids} if isinstance(ids, int) else set(ids)
        listed = await self.get_disabled_user_ids()
        if not listed:
            return
        to_remove = [i for i in listed if i in ids_to_check]
        if to_remove:
            await self._remove_disabled(to_remove)

    async def _remove_disabled(self, ids: list[int]) -> None:
        await self.session.execute(
            delete(DisabledUser).where(DisabledUser.user_id.in_(ids))
        )
        await self.session.flush()
        logger.info("Removed users %s from the EE disabled users list", ids)

    async def _get(self, user_id: int) -> User | None:
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def _resolve_roles(self, role_ids: Iterable[int]) -> list[Role]:
        role_ids = set(role_ids)
        if not role_ids:
            return []
        result = await self.session.execute(
            select(Role).where(Role.id.in_(role_ids)).order_by(Role.id)
        )
        roles = list(result.scalars().all())
        if len(roles) != len(role_ids):
            raise ApplicationError(
                "Some roles do not exist",
                details={"missing": sorted(role_ids - {r.id for r in roles})},
            )
        return roles

    async def _ensure_other_super_admin(self, *, exclude_ids: list[int]) -> None:
        """Raise unless an active super admin outside ``exclude_ids`` remains."""
        count = await self.session.scalar(
            select(func.count(func.distinct(User.id)))
            .select_from(User)
            .join(User.roles)
            .where(
                Role.code == RoleCode.super_admin.value,
                User.is_active.is_(True),
                User.id.not_in(exclude_ids),
            )
        )
        if not count:
            raise ApplicationError(LAST_SUPER_ADMIN_MESSAGE)

    async def _flush_unique_email(self) -> None:
        # the unique constraint on email backs up the exists() check
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ApplicationError("A user with this email address already exists") from exc
