from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from record_cleaner.config import Settings, get_settings
from record_cleaner.database import get_db
from record_cleaner.schemas import CleanupRunResponse
from record_cleaner.services.errors import RecordServiceError
from record_cleaner.services.utils import now_utc
from record_cleaner.services.workflows.cleanup import cleanup_unused_records

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


@router.post("/cleanup", response_model=CleanupRunResponse)
def run_cleanup(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CleanupRunResponse:
    correlation_id = f"api-cleanup-{now_utc().isoformat()}"
    try:
        deleted = cleanup_unused_records(db, actor=settings.operator_id, correlation_id=correlation_id)
    except RecordServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return CleanupRunResponse(status="completed", deleted_count=deleted, correlation_id=correlation_id)
