class TaskError(Exception):
    """Error base del dominio de tareas."""


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found")


class TaskValidationError(TaskError, ValueError):
    pass
