from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def list(self) -> list[Task]:
        """Todas las tareas, las creadas más recientemente primero."""
        raise NotImplementedError

    @abstractmethod
    def add(
        self, title: str, description: str | None, created_at: datetime
    ) -> Task:
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def update(
        self, task_id: int, changes: Mapping[str, Any], touched_at: datetime
    ) -> Task | None:
        """
        Aplica `changes` y refresca `updated_at` en una sola transacción.

        Solo se escriben las columnas presentes en `changes`. Retorna None
        si la tarea no existe.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        raise NotImplementedError
