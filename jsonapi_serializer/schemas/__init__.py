"""Pydantic schemas for serializer options and JSON:API documents."""

from .options import (
    InlineRelationship,
    ReferenceRelationship,
    ResourceConfig,
    SerializerOptions,
    compile_options,
    parse_options,
)
from .resource import (
    JSONAPIDocument,
    JSONAPIErrorDocument,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
)

__all__ = [
    "InlineRelationship",
    "JSONAPIDocument",
    "JSONAPIErrorDocument",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
    "ReferenceRelationship",
    "ResourceConfig",
    "SerializerOptions",
    "compile_options",
    "parse_options",
]
