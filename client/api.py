"""
Cliente HTTP de los procedimientos remotos de tareas.

Cada método corresponde a un procedimiento del servidor (listTasks,
createTask, updateTask, toggleTaskCompletion, deleteTask) y devuelve
entidades de dominio.
"""

import os
from typing import Any

import httpx
from dotenv import load_dotenv

from backend_fastapi.api.schemas import TaskOut
from core.domain.errors.task_errors import TaskNotFoundError
from core.domain.models.task import Task

DEFAULT_API_URL = "http://127.0.0.1:8000"
TASK_NOT_FOUND_PREFIX = "Task with id"


def _to_task(data: dict[str, Any]) -> Task:
    return Task(**TaskOut.model_validate(data).model_dump())


def _is_task_not_found(response: httpx.Response) -> bool:
    # Un 404 de ruta o de proxy no es una tarea inexistente
    try:
        body = response.json()
    except ValueError:
        return False
    detail = body.get("detail") if isinstance(body, dict) else None
    return isinstance(detail, str) and detail.startswith(TASK_NOT_FOUND_PREFIX)


class TaskApiClient:
    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @classmethod
    def from_env(cls, timeout: float = 10.0) -> "TaskApiClient":
        load_dotenv()
        base_url = os.getenv("TASKS_API_URL", DEFAULT_API_URL)
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(
        self, method: str, url: str, task_id: int | None = None, **kwargs: Any
    ) -> Any:
        response = self._http.request(method, url, **kwargs)
        if (
            response.status_code == 404
            and task_id is not None
            and _is_task_not_found(response)
        ):
            raise TaskNotFoundError(task_id)
        response.raise_for_status()
        return response.json()

    def list_tasks(self) -> list[Task]:
        return [_to_task(item) for item in self._send("GET", "/tasks")]

    def create_task(self, title: str, description: str | None = None) -> Task:
        payload = {"title": title, "description": description}
        return _to_task(self._send("POST", "/tasks", json=payload))

    def update_task(self, task_id: int, **changes: Any) -> Task:
        """
        Envía solo los campos recibidos como keyword.

        `update_task(1, description=None)` borra la descripción;
        `update_task(1)` solo refresca `updated_at`.
        """
        data = self._send("PATCH", f"/tasks/{task_id}", task_id=task_id, json=changes)
        return _to_task(data)

    def toggle_task_completion(self, task_id: int, completed: bool) -> Task:
        data = self._send(
            "PUT",
            f"/tasks/{task_id}/completion",
            task_id=task_id,
            json={"completed": completed},
        )
        return _to_task(data)

    def delete_task(self, task_id: int) -> bool:
        data = self._send("DELETE", f"/tasks/{task_id}", task_id=task_id)
        return bool(data["success"])
