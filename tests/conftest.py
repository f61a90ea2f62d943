"""
Shared fixtures for the admin user tests.

Handlers are exercised against a UserService whose persistence methods are
replaced with AsyncMocks, so no database is required. Sanitization stays real.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from user_admin.api.app import create_app
from user_admin.api.controllers.users import UserAdminController
from user_admin.api.deps import get_user_service
from user_admin.models import Role, RoleCode, User
from user_admin.services.user import UserCreateAttributes, UserService

# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def make_role(
    role_id: int = 1,
    code: RoleCode = RoleCode.editor,
    name: str | None = None,
) -> Role:
    return Role(
        id=role_id,
        code=code.value,
        name=name or code.name.replace("_", " ").title(),
        description=None,
    )


def make_user(
    user_id: int = 1,
    email: str = "jane@example.com",
    roles: list[Role] | None = None,
    **overrides,
) -> User:
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    fields = {
        "firstname": "Jane",
        "lastname": "Doe",
        "username": None,
        "password_hash": "$2b$12$notarealhashnotarealhashnotarealhashnotarealhash",
        "reset_password_token": None,
        "registration_token": None,
        "is_active": True,
        "blocked": False,
        "prefered_language": None,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return User(
        id=user_id,
        email=email,
        roles=roles if roles is not None else [make_role()],
        **fields,
    )


# ---------------------------------------------------------------------------
# Service / controller fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def user_service() -> UserService:
    """UserService with persistence stubbed out.

    ``create`` echoes the attributes back as a User with id 42, the way the
    real service returns the freshly inserted row.
    """
    service = UserService(AsyncMock(), ee_enabled=True)

    async def _create(attributes: UserCreateAttributes) -> User:
        return make_user(
            user_id=42,
            email=attributes.email,
            firstname=attributes.firstname,
            lastname=attributes.lastname,
            roles=[make_role(role_id=r) for r in attributes.roles],
            is_active=attributes.is_active,
            registration_token=attributes.registration_token,
            password_hash=None,
        )

    service.exists = AsyncMock(return_value=False)
    service.create = AsyncMock(side_effect=_create)
    service.update_by_id = AsyncMock(return_value=None)
    service.delete_by_id = AsyncMock(return_value=None)
    service.delete_by_ids = AsyncMock(return_value=[])
    service.should_update_ee_disabled_users_list = AsyncMock(return_value=None)
    service.should_remove_from_ee_disabled_users_list = AsyncMock(return_value=None)
    return service


@pytest.fixture
def controller(user_service: UserService) -> UserAdminController:
    return UserAdminController(user_service)


@pytest_asyncio.fixture
async def client(user_service: UserService) -> AsyncClient:
    """Async HTTP client with the stubbed UserService injected."""
    application = create_app()
    application.dependency_overrides[get_user_service] = lambda: user_service
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
