import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.domain.errors.task_errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, utc_now
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "description", "completed"})


@dataclass(slots=True)
class UpdateTaskCommand:
    """
    Actualización parcial de una tarea.

    `changes` contiene solo los campos enviados por el cliente: un campo
    ausente no se toca, mientras que `description=None` la borra.
    """

    id: int
    changes: dict[str, Any] = field(default_factory=dict)


def validate_changes(changes: dict[str, Any]) -> None:
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise TaskValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

    if "title" in changes:
        title = changes["title"]
        if not isinstance(title, str) or not title:
            raise TaskValidationError("title must be a non-empty string")

    if "description" in changes:
        description = changes["description"]
        if description is not None and not isinstance(description, str):
            raise TaskValidationError("description must be a string or null")

    if "completed" in changes and not isinstance(changes["completed"], bool):
        raise TaskValidationError("completed must be a boolean")


class UpdateTaskUseCase:
    def __init__(
        self,
        repository: TaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, cmd: UpdateTaskCommand) -> Task:
        validate_changes(cmd.changes)

        # Un update sin campos sigue siendo una mutación: refresca updated_at.
        task = self._repository.update(cmd.id, cmd.changes, self._clock())
        if task is None:
            logger.warning(f"Update sobre tarea inexistente {cmd.id}")
            raise TaskNotFoundError(cmd.id)

        logger.info(f"Tarea {task.id} actualizada: {sorted(cmd.changes)}")
        return task
