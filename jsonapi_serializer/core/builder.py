"""Recursive construction of JSON:API resource objects."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_serializer.schemas.options import ReferenceRelationship, ResourceConfig

from .attributes import project_attributes
from .errors import InvalidConfiguration
from .identity import resolve_identity
from .registry import IncludedRegistry


class ResourceBuilder:
    """Build resource objects and collect their related records.

    One builder serves one document: every reference relationship found
    while walking the records is registered into ``registry``.
    """

    def __init__(self, registry: IncludedRegistry | None = None) -> None:
        self.registry = registry if registry is not None else IncludedRegistry()

    def build(self, record: Any, config: ResourceConfig) -> dict[str, Any]:
        """Return the resource object for ``record``.

        Reference relationships are built recursively and registered; the
        returned resource itself is not.
        """
        identity = resolve_identity(record, config.id_field, config.type_name)
        relationships: dict[str, Any] = {}
        # Fields with a sub-configuration never reach attributes when empty.
        excluded = set(config.reference_fields)
        for field_name in config.attributes:
            relationship = config.relationships.get(field_name)
            if relationship is None:
                continue
            value = record.get(field_name)
            if value is None:
                excluded.add(field_name)
                continue
            if not isinstance(relationship, ReferenceRelationship):
                continue
            relationships[field_name] = {"data": self.link(value, relationship)}

        resource: dict[str, Any] = {
            "type": identity.type,
            "id": identity.id,
            "attributes": project_attributes(
                record, config.attributes, excluded
            ),
        }
        if relationships:
            resource["relationships"] = relationships
        return resource

    def link(
        self, value: Any, relationship: ReferenceRelationship
    ) -> dict[str, str] | list[dict[str, str]] | None:
        """Register the records held by a relationship field and return linkage.

        Returns ``None`` when the field holds nothing, a list of identifiers
        for a to-many value, and a single identifier for a to-one value.
        """
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return [self._include(item, relationship) for item in value]
        if isinstance(value, Mapping):
            return self._include(value, relationship)
        raise InvalidConfiguration(
            f"Relationship {relationship.field_name!r} expects a mapping or a list "
            f"of mappings, got {type(value).__name__}.",
            field=relationship.field_name,
        )

    def _include(self, value: Any, relationship: ReferenceRelationship) -> dict[str, str]:
        if not isinstance(value, Mapping):
            raise InvalidConfiguration(
                f"Relationship {relationship.field_name!r} contains a "
                f"{type(value).__name__} where a mapping was expected.",
                field=relationship.field_name,
            )
        resource = self.build(value, relationship.config)
        self.registry.register(resource)
        return {"type": resource["type"], "id": resource["id"]}
