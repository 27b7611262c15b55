from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from sqlalchemy import text

from record_cleaner.api.routes import audit, health, jobs
from record_cleaner.config import get_settings
from record_cleaner.database import SessionLocal, engine
from record_cleaner.models.base import Base
from record_cleaner.services.script_log import configure_logging


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        db.execute(text("SELECT 1"))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Unused Record Cleaner",
        version="0.1.0",
        description="Deletes unreferenced custom records and keeps a deletion audit trail.",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(jobs.router)
    app.include_router(audit.router)

    @app.get("/meta")
    def meta() -> dict:
        settings = get_settings()
        return {
            "service": "unused-record-cleaner",
            "version": "0.1.0",
            "operator_id": settings.operator_id,
            "translation_locale": settings.translation_locale,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


app = create_app()
