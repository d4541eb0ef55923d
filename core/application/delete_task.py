import logging
from dataclasses import dataclass

from core.domain.errors.task_errors import TaskNotFoundError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: int


@dataclass(slots=True)
class DeleteTaskResult:
    success: bool = True


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> DeleteTaskResult:
        if not self._repository.delete(cmd.id):
            logger.warning(f"Delete sobre tarea inexistente {cmd.id}")
            raise TaskNotFoundError(cmd.id)

        logger.info(f"Tarea {cmd.id} eliminada")
        return DeleteTaskResult(success=True)
