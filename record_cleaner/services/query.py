from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from record_cleaner.services.errors import QueryError


@dataclass
class QueryResult:
    rows: list[dict[str, Any]] = field(default_factory=list)

    def as_mapped_results(self) -> list[dict[str, Any]]:
        return [dict(row) for row in self.rows]


def run_query(db: Session, sql: str, params: dict[str, Any] | None = None) -> QueryResult:
    """Run a read-only SQL statement and materialize its rows as column-keyed dicts."""
    try:
        rows = db.execute(text(sql), params or {}).mappings().all()
    except SQLAlchemyError as exc:
        db.rollback()
        raise QueryError(str(exc)) from exc
    return QueryResult(rows=[dict(row) for row in rows])
