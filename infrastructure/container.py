import logging
import os

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.toggle_task_completion import ToggleTaskCompletionUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

SUPPORTED_ORMS = ("peewee", "sqlalchemy")


def get_task_repository() -> TaskRepository:
    orm = os.getenv("ORM", "peewee").lower()

    if orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    if orm != "peewee":
        raise ValueError(
            f"ORM no soportado: {orm!r} (opciones: {', '.join(SUPPORTED_ORMS)})"
        )

    from infrastructure.peewee.repository.task_repository import (
        PeeweeTaskRepository,
    )

    return PeeweeTaskRepository()


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_toggle_task_completion_use_case(
    repository: TaskRepository,
) -> ToggleTaskCompletionUseCase:
    return ToggleTaskCompletionUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)
