"""Convert SQLAlchemy model instances into raw records."""

from __future__ import annotations

from typing import Any, Iterable

from sqlalchemy.inspection import inspect
from sqlalchemy.orm.attributes import NO_VALUE


def to_record(instance: Any) -> dict[str, Any]:
    """Return a mapping of the loaded columns and relationships of ``instance``.

    Nothing is loaded from the database: attributes that are expired,
    deferred or not yet loaded are left out. Relationships pointing back
    to an instance already being converted are left out as well, so
    ``back_populates`` pairs do not recurse forever.
    """
    return _to_record(instance, ())


def to_records(instances: Iterable[Any]) -> list[dict[str, Any]]:
    """Convert a collection of model instances."""
    return [to_record(instance) for instance in instances]


def _to_record(instance: Any, path: tuple[int, ...]) -> dict[str, Any]:
    state = inspect(instance)
    mapper = state.mapper
    path = path + (id(instance),)
    record: dict[str, Any] = {}

    for column in mapper.column_attrs:
        value = state.attrs[column.key].loaded_value
        if value is NO_VALUE:
            continue
        record[column.key] = value

    for relationship in mapper.relationships:
        value = state.attrs[relationship.key].loaded_value
        if value is NO_VALUE:
            continue
        if relationship.uselist:
            record[relationship.key] = [
                _to_record(item, path) for item in value if id(item) not in path
            ]
        elif value is None:
            record[relationship.key] = None
        elif id(value) not in path:
            record[relationship.key] = _to_record(value, path)
    return record
