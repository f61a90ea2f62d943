"""Seed default roles and the initial super admin on first startup."""

import asyncio
import logging

from sqlalchemy import select

from user_admin.auth import hash_password
from user_admin.config import get_settings
from user_admin.db import async_session_factory
from user_admin.models import Role, RoleCode, User

logger = logging.getLogger(__name__)

DEFAULT_ROLES = [
    (RoleCode.super_admin, "Super Admin", "Super Admins can access and manage all features and settings."),
    (RoleCode.editor, "Editor", "Editors can manage and publish contents including those of other users."),
    (RoleCode.author, "Author", "Authors can manage the content they have created."),
]


async def seed_roles(session) -> dict[str, Role]:
    """Create any missing default role. Returns roles keyed by code."""
    result = await session.execute(select(Role))
    roles = {r.code: r for r in result.scalars().all()}

    for code, name, description in DEFAULT_ROLES:
        if code.value in roles:
            continue
        role = Role(code=code.value, name=name, description=description)
        session.add(role)
        roles[code.value] = role
        logger.info("Created role: %s", code.value)

    await session.flush()
    return roles


async def seed_admin_user() -> None:
    """Create the default roles and the initial super admin if none exists."""
    settings = get_settings()
    email = settings.admin_email.lower()

    async with async_session_factory() as session:
        roles = await seed_roles(session)

        result = await session.execute(select(User).where(User.email == email))
        existing = result.scalar_one_or_none()

        if existing is not None:
            await session.commit()
            logger.info("Admin user already exists: %s", email)
            return

        admin = User(
            email=email,
            firstname=settings.admin_firstname,
            password_hash=hash_password(settings.admin_password),
            is_active=True,
            roles=[roles[RoleCode.super_admin.value]],
        )
        session.add(admin)
        await session.commit()
        logger.info("Created initial super admin: %s", email)


def main():
    """CLI entry point for seeding."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed_admin_user())
