import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from core.domain.errors.task_errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, utc_now
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ToggleTaskCompletionCommand:
    id: int
    completed: bool


class ToggleTaskCompletionUseCase:
    """
    Fija `completed` al valor recibido.

    No invierte el estado actual: el cliente envía el estado destino, así
    que repetir la llamada es idempotente (salvo por `updated_at`).
    """

    def __init__(
        self,
        repository: TaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, cmd: ToggleTaskCompletionCommand) -> Task:
        if not isinstance(cmd.completed, bool):
            raise TaskValidationError("completed must be a boolean")

        task = self._repository.update(
            cmd.id, {"completed": cmd.completed}, self._clock()
        )
        if task is None:
            logger.warning(f"Toggle sobre tarea inexistente {cmd.id}")
            raise TaskNotFoundError(cmd.id)

        logger.info(f"Tarea {task.id} marcada completed={task.completed}")
        return task
