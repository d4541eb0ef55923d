import os

# Use memory database for tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("ORM", "peewee")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app
from infrastructure.sqlalchemy.repository.task_repository import (
    SqlAlchemyTaskRepository,
)
from infrastructure.sqlalchemy.session.db import build_engine


@pytest.fixture
def repository():
    """Repositorio SQLAlchemy sobre una BDD en memoria nueva por test."""
    engine = build_engine("sqlite:///:memory:")
    repo = SqlAlchemyTaskRepository(
        session_factory=sessionmaker(bind=engine, expire_on_commit=False)
    )
    yield repo
    engine.dispose()


@pytest.fixture
def client(repository):
    app.dependency_overrides[task_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
