"""Audit log helper."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from user_admin.models.audit_log import AuditLog


async def log_audit(
    session: AsyncSession,
    *,
    action: str,
    target_type: str | None = None,
    target_ids: list[int] | None = None,
    detail: dict[str, Any] | None = None,
) -> None:
    entry = AuditLog(
        action=action,
        target_type=target_type,
        target_ids=list(target_ids or []),
        detail=detail or {},
    )
    session.add(entry)
