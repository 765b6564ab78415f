"""Core JSON:API serialization engine."""

from .builder import ResourceBuilder
from .document import JSONAPIDocumentBuilder
from .errors import (
    InvalidConfiguration,
    JSONAPIErrorBuilder,
    MissingIdentity,
    SerializerError,
)
from .identity import ResourceIdentifier, resolve_identity
from .attributes import project_attributes
from .registry import IncludedRegistry

__all__ = [
    "IncludedRegistry",
    "InvalidConfiguration",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "MissingIdentity",
    "ResourceBuilder",
    "ResourceIdentifier",
    "SerializerError",
    "project_attributes",
    "resolve_identity",
]
