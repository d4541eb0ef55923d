from collections.abc import Mapping
from datetime import datetime
from typing import Any, List

from core.domain.models.task import Task, next_updated_at
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db
from infrastructure.timestamps import from_db, to_db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        completed=model.completed,
        created_at=from_db(model.created_at),
        updated_at=from_db(model.updated_at),
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Tables are created on init; there are no migrations for this schema.
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)

    def list(self) -> List[Task]:
        query = TaskModel.select().order_by(
            TaskModel.created_at.desc(), TaskModel.id.desc()
        )
        return [_to_domain(t) for t in query]

    def add(self, title: str, description: str | None, created_at: datetime) -> Task:
        stamp = to_db(created_at)
        with db.atomic():
            model = TaskModel.create(
                title=title,
                description=description,
                completed=False,
                created_at=stamp,
                updated_at=stamp,
            )
        return _to_domain(model)

    def get(self, task_id: int) -> Task | None:
        model = TaskModel.get_or_none(TaskModel.id == task_id)
        if model is None:
            return None
        return _to_domain(model)

    def update(
        self, task_id: int, changes: Mapping[str, Any], touched_at: datetime
    ) -> Task | None:
        with db.atomic():
            current = TaskModel.get_or_none(TaskModel.id == task_id)
            if current is None:
                return None

            updated_at = next_updated_at(from_db(current.updated_at), touched_at)
            # Only the provided columns are written.
            (
                TaskModel.update(**dict(changes), updated_at=to_db(updated_at))
                .where(TaskModel.id == task_id)
                .execute()
            )
            return _to_domain(TaskModel.get_by_id(task_id))

    def delete(self, task_id: int) -> bool:
        query = TaskModel.delete().where(TaskModel.id == task_id)
        return query.execute() > 0
