"""Custom column types."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, TypeDecorator


def as_utc(value: datetime | None) -> datetime | None:
    """Aware UTC copy of `value`; naive values are taken to be UTC already."""
    if value is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime stored as UTC.

    PostgreSQL keeps the offset natively; SQLite drops it and hands back naive
    values. Both are normalised here so loaded values are always aware UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        value = as_utc(value)
        if value is None:
            return value
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        return as_utc(value)


def utcnow() -> datetime:
    return datetime.now(UTC)
