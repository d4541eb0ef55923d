from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TaskCreateIn(BaseModel):
    title: str = Field(..., min_length=1, description="Título de la tarea")
    description: str | None = Field(default=None, description="Descripción opcional")


class TaskUpdateIn(BaseModel):
    """
    Actualización parcial.

    Los campos no enviados quedan fuera de `model_dump(exclude_unset=True)`,
    lo que permite distinguir "no enviado" de `"description": null`.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    completed: bool | None = None


class TaskCompletionIn(BaseModel):
    completed: bool


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    completed: bool
    created_at: datetime
    updated_at: datetime


class DeleteTaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    success: bool = True
