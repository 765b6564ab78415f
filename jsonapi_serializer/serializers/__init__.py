"""JSON:API serializers."""

from .base import JSONAPISerializer, serialize

__all__ = ["JSONAPISerializer", "serialize"]
