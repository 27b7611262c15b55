from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from record_cleaner.constants import UNUSED_RECORDS_QUERY
from record_cleaner.database import get_db
from record_cleaner.schemas import HealthDetailsResponse, HealthResponse
from record_cleaner.services.audit import last_deletion_at
from record_cleaner.services.query import run_query

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(UTC))


@router.get("/health/details", response_model=HealthDetailsResponse)
def health_details(db: Session = Depends(get_db)) -> HealthDetailsResponse:
    db.execute(select(1))
    pending = len(run_query(db, UNUSED_RECORDS_QUERY).as_mapped_results())
    return HealthDetailsResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        database_ok=True,
        pending_candidates=pending,
        last_deletion_at=last_deletion_at(db),
    )
