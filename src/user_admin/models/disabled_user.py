from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from user_admin.models.base import Base, created_at


class DisabledUser(Base):
    """Users deactivated because the licensed seat count was exceeded."""

    __tablename__ = "admin_ee_disabled_users"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("admin_users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[created_at]
