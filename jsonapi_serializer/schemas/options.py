"""Serializer options: validation and compilation into a tagged configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jsonapi_serializer.core.errors import InvalidConfiguration
from jsonapi_serializer.utils.naming import singularize

logger = logging.getLogger(__name__)


class SerializerOptions(BaseModel):
    """Raw serializer options, at the top level or for one relationship field.

    Keys that are not declared below are kept as extras; an extra whose name
    appears in ``attributes`` is the sub-configuration of that field.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    id_field: str = Field("id", alias="id")
    attributes: list[str] = Field(default_factory=list)
    ref: str | None = None
    type_name: str | None = Field(None, alias="type")
    api_endpoint: str | None = Field(None, alias="apiEndpoint")
    api_endpoint_value: str | None = Field(None, alias="apiEndpointValue")
    meta: dict[str, Any] | None = None

    def sub_options(self, field_name: str) -> Any:
        """Return the raw sub-configuration declared for ``field_name``."""
        return (self.model_extra or {}).get(field_name)

    def option_named(self, name: str) -> str | None:
        """Return the declared option spelled ``name`` if the options set it."""
        for option, info in type(self).model_fields.items():
            if name in (option, info.alias) and option in self.model_fields_set:
                return option
        return None


@dataclass(frozen=True)
class InlineRelationship:
    """A nested value kept verbatim inside ``attributes``."""

    field_name: str


@dataclass(frozen=True)
class ReferenceRelationship:
    """A nested record promoted to ``included`` and linked by identity."""

    field_name: str
    config: ResourceConfig


Relationship = Union[InlineRelationship, ReferenceRelationship]


@dataclass(frozen=True)
class ResourceConfig:
    """Compiled configuration for one resource type."""

    type_name: str
    id_field: str = "id"
    attributes: tuple[str, ...] = ()
    relationships: dict[str, Relationship] = field(default_factory=dict)

    @property
    def reference_fields(self) -> frozenset[str]:
        """Names of fields extracted as reference relationships."""
        return frozenset(
            name
            for name, relationship in self.relationships.items()
            if isinstance(relationship, ReferenceRelationship)
        )


def parse_options(options: Mapping[str, Any] | SerializerOptions | None) -> SerializerOptions:
    """Validate raw options, raising InvalidConfiguration on bad input."""
    if isinstance(options, SerializerOptions):
        return options
    if options is None:
        return SerializerOptions()
    if not isinstance(options, Mapping):
        raise InvalidConfiguration(
            f"Serializer options must be a mapping, got {type(options).__name__}."
        )
    try:
        return SerializerOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidConfiguration(f"Invalid serializer options: {exc}") from exc


def compile_options(
    options: Mapping[str, Any] | SerializerOptions | None,
    type_name: str,
    *,
    name_for_field: Callable[[str], str] = singularize,
) -> ResourceConfig:
    """Compile options for a primary resource whose type is ``type_name``.

    ``type_name`` is the primary collection name (e.g. ``"users"``); the
    resource type is derived from it with ``name_for_field`` unless the
    options set ``type``.
    """
    parsed = parse_options(options)
    config = _compile(
        parsed,
        type_name=parsed.type_name or name_for_field(type_name),
        id_field=parsed.id_field,
        name_for_field=name_for_field,
    )
    logger.debug(
        "Compiled %s options: attributes=%s references=%s",
        config.type_name,
        list(config.attributes),
        sorted(config.reference_fields),
    )
    return config


def _compile(
    options: SerializerOptions,
    *,
    type_name: str,
    id_field: str,
    name_for_field: Callable[[str], str],
) -> ResourceConfig:
    relationships: dict[str, Relationship] = {}
    for field_name in options.attributes:
        option = options.option_named(field_name)
        if option is not None:
            raise InvalidConfiguration(
                f"Field {field_name!r} clashes with the {option!r} option; "
                "it cannot be configured separately.",
                field=field_name,
            )
        raw = options.sub_options(field_name)
        if raw is None:
            continue
        if not isinstance(raw, Mapping):
            raise InvalidConfiguration(
                f"Sub-configuration for {field_name!r} must be a mapping.",
                field=field_name,
            )
        sub = parse_options(raw)
        if sub.ref is None:
            relationships[field_name] = InlineRelationship(field_name)
            continue
        relationships[field_name] = ReferenceRelationship(
            field_name,
            _compile(
                sub,
                type_name=sub.type_name or name_for_field(field_name),
                id_field=sub.ref,
                name_for_field=name_for_field,
            ),
        )
    return ResourceConfig(
        type_name=type_name,
        id_field=id_field,
        attributes=tuple(options.attributes),
        relationships=relationships,
    )
