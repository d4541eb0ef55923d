from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

# Resolución de las columnas de fecha en la BDD
TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_updated_at(previous: datetime, now: datetime) -> datetime:
    """
    Calcula el nuevo `updated_at` de una tarea modificada.

    Garantiza que el valor sea estrictamente mayor que el anterior aunque
    el reloj no haya avanzado entre dos mutaciones.
    """
    minimum = previous + TIMESTAMP_RESOLUTION
    return now if now >= minimum else minimum


@dataclass(slots=True)
class Task:
    id: int
    title: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    completed: bool = False
