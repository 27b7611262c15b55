from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from record_cleaner.database import get_db
from record_cleaner.schemas import DeletionAuditEntry, DeletionAuditResponse
from record_cleaner.services.audit import list_deletion_audits

router = APIRouter(prefix="/api/v1/audit", tags=["audit"])


@router.get("/deletions", response_model=DeletionAuditResponse)
def fetch_deletions(limit: int = Query(default=50, ge=1, le=500), db: Session = Depends(get_db)) -> DeletionAuditResponse:
    entries = [DeletionAuditEntry.model_validate(row) for row in list_deletion_audits(db, limit=limit)]
    return DeletionAuditResponse(count=len(entries), entries=entries)
