"""SQLAlchemy ORM models - import all models here for Alembic discovery."""

from user_admin.models.base import Base
from user_admin.models.enums import RoleCode
from user_admin.models.role import Role, users_roles
from user_admin.models.user import User
from user_admin.models.disabled_user import DisabledUser
from user_admin.models.audit_log import AuditLog

__all__ = [
    "Base",
    "RoleCode",
    "Role",
    "users_roles",
    "User",
    "DisabledUser",
    "AuditLog",
]
