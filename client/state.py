"""
Estado local de la lista de tareas del cliente.

Contenedor inmutable indexado por id; cada respuesta del servidor se
aplica con `reduce(state, action)` y produce un estado nuevo.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from core.domain.models.task import Task


@dataclass(frozen=True, slots=True)
class TasksLoaded:
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class TaskCreated:
    task: Task


@dataclass(frozen=True, slots=True)
class TaskUpdated:
    task: Task


@dataclass(frozen=True, slots=True)
class TaskDeleted:
    task_id: int


Action = TasksLoaded | TaskCreated | TaskUpdated | TaskDeleted


def _freeze(tasks: Mapping[int, Task]) -> Mapping[int, Task]:
    return MappingProxyType(dict(tasks))


@dataclass(frozen=True, slots=True)
class TaskListState:
    tasks: Mapping[int, Task] = field(default_factory=lambda: _freeze({}))

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskListState":
        return cls(tasks=_freeze({task.id: task for task in tasks}))

    def get(self, task_id: int) -> Task | None:
        return self.tasks.get(task_id)

    def ordered(self) -> list[Task]:
        """Tareas en el mismo orden que las lista el servidor."""
        return sorted(
            self.tasks.values(), key=lambda t: (t.created_at, t.id), reverse=True
        )

    def completed(self) -> list[Task]:
        return [task for task in self.ordered() if task.completed]

    def pending(self) -> list[Task]:
        return [task for task in self.ordered() if not task.completed]

    @property
    def completed_count(self) -> int:
        return sum(1 for task in self.tasks.values() if task.completed)

    @property
    def pending_count(self) -> int:
        return len(self.tasks) - self.completed_count

    def __len__(self) -> int:
        return len(self.tasks)


def reduce(state: TaskListState, action: Action) -> TaskListState:
    if isinstance(action, TasksLoaded):
        return TaskListState.from_tasks(action.tasks)

    if isinstance(action, TaskCreated):
        return TaskListState(tasks=_freeze({**state.tasks, action.task.id: action.task}))

    if isinstance(action, TaskUpdated):
        # Solo se reemplazan tareas conocidas
        if action.task.id not in state.tasks:
            return state
        return TaskListState(tasks=_freeze({**state.tasks, action.task.id: action.task}))

    if isinstance(action, TaskDeleted):
        if action.task_id not in state.tasks:
            return state
        tasks = dict(state.tasks)
        del tasks[action.task_id]
        return TaskListState(tasks=_freeze(tasks))

    raise TypeError(f"Acción desconocida: {action!r}")
