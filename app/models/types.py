from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from app.utils.dates import to_utc


class UTCDateTime(TypeDecorator):
    """DateTime que siempre guarda y devuelve UTC tz-aware.

    SQLite no conserva la zona horaria: se guarda la hora UTC y al leer se
    vuelve a marcar como UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        return to_utc(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return to_utc(value)
