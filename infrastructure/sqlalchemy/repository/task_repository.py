from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from core.domain.models.task import Task, next_updated_at
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import SessionLocal, init_db
from infrastructure.timestamps import from_db, to_db


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        description=task_model.description,
        completed=task_model.completed,
        created_at=from_db(task_model.created_at),
        updated_at=from_db(task_model.updated_at),
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session_factory: Callable[[], Session] = SessionLocal) -> None:
        self._session_factory = session_factory
        session = session_factory()
        try:
            init_db(bind=session.get_bind())
        finally:
            session.close()

    def list(self) -> list[Task]:
        session = self._session_factory()
        try:
            statement = select(TaskModel).order_by(
                TaskModel.created_at.desc(), TaskModel.id.desc()
            )
            return [_to_domain(m) for m in session.scalars(statement)]
        finally:
            session.close()

    def add(self, title: str, description: str | None, created_at: datetime) -> Task:
        session = self._session_factory()
        try:
            stamp = to_db(created_at)
            task_model = TaskModel(
                title=title,
                description=description,
                completed=False,
                created_at=stamp,
                updated_at=stamp,
            )
            session.add(task_model)
            session.commit()
            session.refresh(task_model)
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = self._session_factory()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def update(
        self, task_id: int, changes: Mapping[str, Any], touched_at: datetime
    ) -> Task | None:
        session = self._session_factory()
        try:
            # FOR UPDATE bloquea la fila en Postgres; SQLite lo ignora.
            task_model = session.get(TaskModel, task_id, with_for_update=True)
            if task_model is None:
                return None

            for key, value in changes.items():
                setattr(task_model, key, value)
            task_model.updated_at = to_db(
                next_updated_at(from_db(task_model.updated_at), touched_at)
            )
            session.commit()
            session.refresh(task_model)
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, task_id: int) -> bool:
        session = self._session_factory()
        try:
            result = session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            session.commit()
            return result.rowcount > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
