import logging
import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_record_cleaner.db")
os.environ.setdefault("OPERATOR_ID", "test-operator")
os.environ.setdefault("TRANSLATION_LOCALE", "en_US")

from record_cleaner.config import get_settings  # noqa: E402
from record_cleaner.database import SessionLocal, engine  # noqa: E402
from record_cleaner.main import create_app  # noqa: E402
from record_cleaner.models.base import Base  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    get_settings.cache_clear()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def capture_audit_logs(caplog):
    caplog.set_level(logging.INFO)
    yield caplog


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    with SessionLocal() as db:
        yield db
        db.rollback()
