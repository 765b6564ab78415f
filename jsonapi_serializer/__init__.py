"""Serialize application records into JSON:API v1.1 documents."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import (
    InvalidConfiguration,
    JSONAPIErrorBuilder,
    MissingIdentity,
    SerializerError,
)
from .serializers.base import JSONAPISerializer, serialize

__all__ = [
    "InvalidConfiguration",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPISerializer",
    "MissingIdentity",
    "SerializerError",
    "serialize",
]
