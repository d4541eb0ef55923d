"""
Conversión de fechas entre el dominio y las BDD relacionales.

El dominio trabaja con datetimes UTC con zona horaria; SQLite (y las
columnas DATETIME sin zona) guardan datetimes naive, que se interpretan
siempre como UTC.
"""

from datetime import datetime, timezone


def to_db(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_db(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
