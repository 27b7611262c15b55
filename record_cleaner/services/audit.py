from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from record_cleaner.models.core import DeletionAuditRecord


def list_deletion_audits(db: Session, *, limit: int = 50) -> list[DeletionAuditRecord]:
    stmt = (
        select(DeletionAuditRecord)
        .order_by(DeletionAuditRecord.deleted_at.desc(), DeletionAuditRecord.id.desc())
        .limit(limit)
    )
    return list(db.scalars(stmt))


def last_deletion_at(db: Session) -> datetime | None:
    return db.scalar(select(func.max(DeletionAuditRecord.deleted_at)))
