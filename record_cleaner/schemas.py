from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class CleanupRunResponse(BaseModel):
    status: Literal["completed"]
    deleted_count: int
    correlation_id: str


class DeletionAuditEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    custrecord_deleted_record_id: str
    custrecord_deleted_record_name: str
    deleted_by: str | None = None
    correlation_id: str | None = None
    deleted_at: datetime


class DeletionAuditResponse(BaseModel):
    count: int
    entries: list[DeletionAuditEntry]


class HealthResponse(BaseModel):
    status: Literal["ok"]
    timestamp: datetime


class HealthDetailsResponse(BaseModel):
    status: Literal["ok"]
    timestamp: datetime
    database_ok: bool
    pending_candidates: int
    last_deletion_at: datetime | None = None
