import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from core.domain.errors.task_errors import TaskValidationError
from core.domain.models.task import Task, utc_now
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str
    description: str | None = None


class CreateTaskUseCase:
    def __init__(
        self,
        repository: TaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, cmd: CreateTaskCommand) -> Task:
        if not isinstance(cmd.title, str) or not cmd.title:
            raise TaskValidationError("title must be a non-empty string")

        task = self._repository.add(
            title=cmd.title,
            description=cmd.description,
            created_at=self._clock(),
        )
        logger.info(f"Tarea {task.id} creada")
        return task
