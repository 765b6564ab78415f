"""Identity resolution for resource objects."""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from .errors import MissingIdentity


class ResourceIdentifier(NamedTuple):
    """The ``(type, id)`` pair naming a resource within a document."""

    type: str
    id: str

    def as_linkage(self) -> dict[str, str]:
        """Return the JSON:API resource identifier object."""
        return {"type": self.type, "id": self.id}


def resolve_identity(record: Any, id_field: str, type_name: str) -> ResourceIdentifier:
    """Return the identity of ``record`` read from its ``id_field``."""
    if not isinstance(record, Mapping):
        raise MissingIdentity(type_name, id_field)
    value = record.get(id_field)
    if value is None:
        raise MissingIdentity(type_name, id_field)
    return ResourceIdentifier(type=type_name, id=str(value))
