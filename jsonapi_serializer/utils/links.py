"""Link formatting for JSON:API documents."""


def collection_link(base_url: str | None, type_name: str) -> str:
    """Return the ``self`` link of a collection endpoint."""
    if not base_url:
        return f"/{type_name}"
    base = base_url.rstrip("/")
    return f"{base}/{type_name}"


def resource_link(base_url: str, type_name: str, resource_id: str) -> str:
    """Return the ``self`` link of a single resource."""
    return f"{collection_link(base_url, type_name)}/{resource_id}"
