from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    list_tasks_use_case,
    toggle_task_completion_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    DeleteTaskOut,
    TaskCompletionIn,
    TaskCreateIn,
    TaskOut,
    TaskUpdateIn,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.toggle_task_completion import (
    ToggleTaskCompletionCommand,
    ToggleTaskCompletionUseCase,
)
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors.task_errors import TaskNotFoundError, TaskValidationError

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={404: {"description": "Task not found"}},
)


def _not_found(e: TaskNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _invalid(e: TaskValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


@router.get(
    "",
    response_model=list[TaskOut],
    operation_id="listTasks",
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskOut]:
    """
    Obtiene todas las tareas, las creadas más recientemente primero.
    """
    return [TaskOut.model_validate(task) for task in use_case.execute()]


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    operation_id="createTask",
    summary="Crear una nueva tarea",
)
def create_task(
    payload: TaskCreateIn,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskOut:
    """
    Crea una nueva tarea sin completar.

    - **title**: Título de la tarea (no vacío).
    - **description**: Descripción opcional de la tarea.
    """
    try:
        task = use_case.execute(
            CreateTaskCommand(title=payload.title, description=payload.description)
        )
    except TaskValidationError as e:
        raise _invalid(e)
    return TaskOut.model_validate(task)


@router.patch(
    "/{task_id}",
    response_model=TaskOut,
    operation_id="updateTask",
    summary="Editar una tarea existente",
)
def update_task(
    payload: TaskUpdateIn,
    task_id: int,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskOut:
    """
    Modifica solo los campos enviados.

    - **title**: Nuevo título.
    - **description**: Nueva descripción; `null` la borra.
    - **completed**: Nuevo estado de completado.
    """
    cmd = UpdateTaskCommand(id=task_id, changes=payload.model_dump(exclude_unset=True))
    try:
        task = use_case.execute(cmd)
    except TaskNotFoundError as e:
        raise _not_found(e)
    except TaskValidationError as e:
        raise _invalid(e)
    return TaskOut.model_validate(task)


@router.put(
    "/{task_id}/completion",
    response_model=TaskOut,
    operation_id="toggleTaskCompletion",
    summary="Marcar una tarea como completada o pendiente",
)
def toggle_task_completion(
    payload: TaskCompletionIn,
    task_id: int,
    use_case: ToggleTaskCompletionUseCase = Depends(toggle_task_completion_use_case),
) -> TaskOut:
    """
    Fija `completed` al valor enviado (no invierte el estado actual).
    """
    try:
        task = use_case.execute(
            ToggleTaskCompletionCommand(id=task_id, completed=payload.completed)
        )
    except TaskNotFoundError as e:
        raise _not_found(e)
    return TaskOut.model_validate(task)


@router.delete(
    "/{task_id}",
    response_model=DeleteTaskOut,
    operation_id="deleteTask",
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> DeleteTaskOut:
    """
    Elimina una tarea del sistema.

    - **task_id**: id de la tarea a eliminar.
    """
    try:
        result = use_case.execute(DeleteTaskCommand(id=task_id))
    except TaskNotFoundError as e:
        raise _not_found(e)
    return DeleteTaskOut.model_validate(result)
