from datetime import datetime, timedelta, timezone

import pytest

from client.state import (
    TaskCreated,
    TaskDeleted,
    TaskListState,
    TasksLoaded,
    TaskUpdated,
    reduce,
)
from core.domain.models.task import Task

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_task(task_id: int, *, completed: bool = False, minutes: int = 0) -> Task:
    stamp = T0 + timedelta(minutes=minutes)
    return Task(
        id=task_id,
        title=f"Tarea {task_id}",
        created_at=stamp,
        updated_at=stamp,
        completed=completed,
    )


@pytest.fixture
def loaded_state():
    tasks = (make_task(1), make_task(2, completed=True, minutes=1), make_task(3, minutes=2))
    return reduce(TaskListState(), TasksLoaded(tasks))


def test_estado_inicial_vacio():
    state = TaskListState()
    assert len(state) == 0
    assert state.ordered() == []


def test_tasks_loaded_reemplaza_el_estado(loaded_state):
    state = reduce(loaded_state, TasksLoaded((make_task(9),)))
    assert [t.id for t in state.ordered()] == [9]


def test_ordered_mas_recientes_primero(loaded_state):
    assert [t.id for t in loaded_state.ordered()] == [3, 2, 1]


def test_task_created_se_agrega(loaded_state):
    state = reduce(loaded_state, TaskCreated(make_task(4, minutes=3)))

    assert [t.id for t in state.ordered()] == [4, 3, 2, 1]
    assert len(loaded_state) == 3  # el estado anterior no cambia


def test_task_updated_reemplaza_por_id(loaded_state):
    updated = make_task(1, completed=True)

    state = reduce(loaded_state, TaskUpdated(updated))

    assert state.get(1) is updated
    assert state.completed_count == 2
    assert state.pending_count == 1


def test_task_updated_desconocida_se_ignora(loaded_state):
    assert reduce(loaded_state, TaskUpdated(make_task(77))) is loaded_state


def test_task_deleted(loaded_state):
    state = reduce(loaded_state, TaskDeleted(2))

    assert state.get(2) is None
    assert [t.id for t in state.ordered()] == [3, 1]
    assert reduce(state, TaskDeleted(2)) is state


def test_vistas_completadas_y_pendientes(loaded_state):
    assert [t.id for t in loaded_state.completed()] == [2]
    assert [t.id for t in loaded_state.pending()] == [3, 1]


def test_el_mapa_es_de_solo_lectura(loaded_state):
    with pytest.raises(TypeError):
        loaded_state.tasks[5] = make_task(5)


def test_accion_desconocida():
    with pytest.raises(TypeError):
        reduce(TaskListState(), object())
