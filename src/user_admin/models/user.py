from typing import Optional

from sqlalchemy import Boolean, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from user_admin.models.base import Base, int_pk, created_at, updated_at
from user_admin.models.enums import RoleCode
from user_admin.models.role import Role, users_roles


class User(Base):
    __tablename__ = "admin_users"

    id: Mapped[int_pk]
    firstname: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    lastname: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    username: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password_hash: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    reset_password_token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    registration_token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false"),
    )
    blocked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false"),
    )
    prefered_language: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[created_at]
    updated_at: Mapped[updated_at]

    roles: Mapped[list[Role]] = relationship(
        secondary=users_roles, lazy="selectin", order_by=Role.id,
    )

    @property
    def is_super_admin(self) -> bool:
        return any(r.code == RoleCode.super_admin.value for r in self.roles)
