"""Pure string helpers for type names and links."""

from .links import collection_link, resource_link
from .naming import singularize

__all__ = ["collection_link", "resource_link", "singularize"]
