from typing import Any, Optional

from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from user_admin.models.base import Base, int_pk, created_at

_json = JSON().with_variant(JSONB, "postgresql")


class AuditLog(Base):
    __tablename__ = "admin_audit_log"

    id: Mapped[int_pk]
    action: Mapped[str] = mapped_column(Text, nullable=False)
    target_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    target_ids: Mapped[list[int]] = mapped_column(_json, nullable=False, default=list)
    detail: Mapped[dict[str, Any]] = mapped_column(_json, nullable=False, default=dict)
    created_at: Mapped[created_at]
