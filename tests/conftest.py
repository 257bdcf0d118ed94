# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from task_api.database import build_engine, create_tables, get_db
from task_api.handlers import create_task
from task_api.main import app
from task_api.models import Task
from task_api.schemas import CreateTaskInput


@pytest.fixture()
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session(engine) -> Session:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine) -> TestClient:
    """
    TestClient whose requests get sessions on the test engine.

    Not used as a context manager, so the startup hook (logging setup and
    table creation on the configured DATABASE_URL) does not run.
    """

    def override_get_db():
        with Session(engine) as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_task(session: Session) -> Callable[..., Task]:
    def _make(**overrides: Any) -> Task:
        data = {
            "title": "Original Task",
            "description": "Original description",
            "due_date": datetime(2024, 12, 31),
            "priority": "medium",
        }
        data.update(overrides)
        return create_task(session, CreateTaskInput(**data))

    return _make
