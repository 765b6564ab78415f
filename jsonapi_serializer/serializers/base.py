"""Serializer turning raw records into JSON:API documents."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

from jsonapi_serializer.core.builder import ResourceBuilder
from jsonapi_serializer.core.document import JSONAPIDocumentBuilder
from jsonapi_serializer.core.errors import InvalidConfiguration
from jsonapi_serializer.schemas.options import (
    ResourceConfig,
    SerializerOptions,
    compile_options,
    parse_options,
)
from jsonapi_serializer.utils.links import collection_link, resource_link
from jsonapi_serializer.utils.naming import singularize

logger = logging.getLogger(__name__)


class JSONAPISerializer:
    """Serialize records (mappings) into JSON:API documents.

    Options are validated and compiled once, when the serializer is created;
    each call to :meth:`serialize` then only walks the data. Subclasses may
    declare their options on ``Meta`` instead of passing them in::

        class UserSerializer(JSONAPISerializer):
            class Meta:
                type_ = "users"
                options = {"attributes": ["firstName", "lastName"]}
    """

    class Meta:
        """Serializer metadata (collection type and options)."""

        type_: str = ""
        options: Mapping[str, Any] = MappingProxyType({})

    document_builder_class: type = JSONAPIDocumentBuilder

    def __init__(
        self,
        type_: str | None = None,
        options: Mapping[str, Any] | SerializerOptions | None = None,
        *,
        name_for_field: Callable[[str], str] = singularize,
        link_formatter: Callable[[str | None, str], str] = collection_link,
    ) -> None:
        """Validate and compile the serializer options."""
        self.type_ = type_ or self.Meta.type_
        if not self.type_:
            raise InvalidConfiguration("A primary resource type is required.")
        self.options = parse_options(self.Meta.options if options is None else options)
        self.config: ResourceConfig = compile_options(
            self.options, self.type_, name_for_field=name_for_field
        )
        self.link_formatter = link_formatter

    def serialize(self, data: Any) -> dict[str, Any]:
        """Return the JSON:API document for a record, a list of records or None."""
        builder = ResourceBuilder()
        document_builder = self.document_builder_class()
        if data is None:
            resources: Any = None
        elif isinstance(data, (list, tuple)):
            resources = [self.to_resource(record, builder) for record in data]
        else:
            resources = self.to_resource(data, builder)

        included = builder.registry.entries()
        links = self.get_links()
        meta = self.options.meta
        logger.debug(
            "Serialized %s document: %s primary, %d included",
            self.type_,
            len(resources) if isinstance(resources, list) else int(resources is not None),
            len(included),
        )
        if isinstance(resources, list):
            return document_builder.build_collection(
                resources, included=included, links=links, meta=meta
            )
        return document_builder.build_single(
            resources, included=included, links=links, meta=meta
        )

    async def serialize_async(self, data: Any) -> dict[str, Any]:
        """Coroutine wrapper around :meth:`serialize`.

        The walk runs to completion inside the coroutine; errors are raised
        to the awaiting caller.
        """
        return self.serialize(data)

    def to_resource(self, record: Any, builder: ResourceBuilder) -> dict[str, Any]:
        """Build one primary resource object."""
        resource = builder.build(record, self.config)
        if self.options.api_endpoint:
            resource["links"] = {
                "self": resource_link(self.options.api_endpoint, self.type_, resource["id"])
            }
        return resource

    def get_links(self) -> dict[str, str]:
        """Return the top-level links object."""
        if self.options.api_endpoint_value is not None:
            return {"self": self.options.api_endpoint_value}
        return {"self": self.link_formatter(self.options.api_endpoint, self.type_)}


def serialize(
    type_: str,
    data: Any,
    options: Mapping[str, Any] | SerializerOptions | None = None,
    *,
    name_for_field: Callable[[str], str] = singularize,
    link_formatter: Callable[[str | None, str], str] = collection_link,
) -> dict[str, Any]:
    """Serialize ``data`` as a JSON:API document for the ``type_`` collection."""
    serializer = JSONAPISerializer(
        type_, options, name_for_field=name_for_field, link_formatter=link_formatter
    )
    return serializer.serialize(data)
