import pytest

from infrastructure.container import get_task_repository
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.sqlalchemy.repository.task_repository import SqlAlchemyTaskRepository


def test_peewee_por_defecto(monkeypatch):
    monkeypatch.delenv("ORM", raising=False)
    assert isinstance(get_task_repository(), PeeweeTaskRepository)


def test_sqlalchemy(monkeypatch):
    monkeypatch.setenv("ORM", "SQLAlchemy")
    assert isinstance(get_task_repository(), SqlAlchemyTaskRepository)


def test_orm_desconocido(monkeypatch):
    monkeypatch.setenv("ORM", "mongo")
    with pytest.raises(ValueError, match="mongo"):
        get_task_repository()
