"""Order-preserving, deduplicating store for included resources."""

from __future__ import annotations

from typing import Any, Iterator, Mapping


class IncludedRegistry:
    """Collect related resource objects keyed by ``(type, id)``.

    The first resource registered under a key is authoritative: later
    registrations of the same key are ignored without merging. Iteration
    follows first-registration order.
    """

    def __init__(self) -> None:
        self._resources: dict[tuple[str, str], dict[str, Any]] = {}

    def register(self, resource: Mapping[str, Any]) -> None:
        """Store ``resource`` unless its identity is already known."""
        key = (resource["type"], resource["id"])
        if key not in self._resources:
            self._resources[key] = dict(resource)

    def has(self, type_name: str, resource_id: str) -> bool:
        """Return True if a resource with this identity was registered."""
        return (type_name, resource_id) in self._resources

    def entries(self) -> list[dict[str, Any]]:
        """Return registered resources in first-registration order."""
        return list(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self._resources.values())
