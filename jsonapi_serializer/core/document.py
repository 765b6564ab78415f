"""JSON:API top-level document construction."""

from typing import Any, Iterable, Mapping


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from resource objects."""

    def build_single(
        self,
        resource: Mapping[str, Any] | None,
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a document whose primary data is one resource or null."""
        document: dict[str, Any] = {
            "data": None if resource is None else dict(resource)
        }
        return self._finish(document, included=included, links=links, meta=meta)

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a document whose primary data is an array of resources."""
        document: dict[str, Any] = {"data": [dict(item) for item in resources]}
        return self._finish(document, included=included, links=links, meta=meta)

    def _finish(
        self,
        document: dict[str, Any],
        *,
        included: Iterable[Mapping[str, Any]] | None,
        links: Mapping[str, Any] | None,
        meta: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        # An empty included list is dropped: the member only exists when
        # something was referenced.
        included_items = [dict(item) for item in included or ()]
        if included_items:
            document["included"] = included_items
        if links:
            document["links"] = dict(links)
        if meta:
            document["meta"] = dict(meta)
        return document
