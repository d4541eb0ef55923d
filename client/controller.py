import logging
from typing import Any

from client.api import TaskApiClient
from client.state import (
    Action,
    TaskCreated,
    TaskDeleted,
    TaskListState,
    TasksLoaded,
    TaskUpdated,
    reduce,
)
from core.domain.models.task import Task

logger = logging.getLogger(__name__)


class TaskListController:
    """
    Une el cliente HTTP con el estado local.

    El estado solo cambia con respuestas exitosas del servidor. Los fallos
    se registran y se propagan; el estado queda intacto.
    """

    def __init__(self, api: TaskApiClient, state: TaskListState | None = None) -> None:
        self._api = api
        self._state = state if state is not None else TaskListState()

    @property
    def state(self) -> TaskListState:
        return self._state

    def dispatch(self, action: Action) -> TaskListState:
        self._state = reduce(self._state, action)
        return self._state

    def load(self) -> TaskListState:
        try:
            tasks = self._api.list_tasks()
        except Exception:
            logger.exception("Failed to load tasks")
            raise
        return self.dispatch(TasksLoaded(tuple(tasks)))

    def create(self, title: str, description: str | None = None) -> Task:
        try:
            task = self._api.create_task(title, description)
        except Exception:
            logger.exception("Failed to create task")
            raise
        self.dispatch(TaskCreated(task))
        return task

    def update(self, task_id: int, **changes: Any) -> Task:
        try:
            task = self._api.update_task(task_id, **changes)
        except Exception:
            logger.exception(f"Failed to update task {task_id}")
            raise
        self.dispatch(TaskUpdated(task))
        return task

    def set_completed(self, task_id: int, completed: bool) -> Task:
        try:
            task = self._api.toggle_task_completion(task_id, completed)
        except Exception:
            logger.exception(f"Failed to toggle task completion {task_id}")
            raise
        self.dispatch(TaskUpdated(task))
        return task

    def delete(self, task_id: int) -> None:
        try:
            self._api.delete_task(task_id)
        except Exception:
            logger.exception(f"Failed to delete task {task_id}")
            raise
        self.dispatch(TaskDeleted(task_id))
