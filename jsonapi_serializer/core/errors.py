"""Serializer exceptions and JSON:API error object templates."""

from typing import Any


class SerializerError(ValueError):
    """Base class for errors raised while building a JSON:API document."""

    code = "serializer_error"
    title = "Serialization Error"


class MissingIdentity(SerializerError):
    """A primary resource or a referenced record has no identifier value."""

    code = "missing_identity"
    title = "Missing Resource Identity"

    def __init__(self, type_name: str, id_field: str) -> None:
        self.type_name = type_name
        self.id_field = id_field
        super().__init__(
            f"Resource of type {type_name!r} has no value for id field {id_field!r}."
        )


class InvalidConfiguration(SerializerError):
    """Options are malformed, or a relationship field holds an unusable value."""

    code = "invalid_configuration"
    title = "Invalid Serializer Configuration"

    def __init__(self, detail: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(detail)


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_from_exception(self, exc: BaseException, *, status: str = "500") -> dict[str, Any]:
        """Return a JSON:API error object describing ``exc``."""
        if isinstance(exc, SerializerError):
            meta = None
            if isinstance(exc, InvalidConfiguration) and exc.field is not None:
                meta = {"field": exc.field}
            elif isinstance(exc, MissingIdentity):
                meta = {"type": exc.type_name, "idField": exc.id_field}
            return self.error_object(
                status=status,
                code=exc.code,
                title=exc.title,
                detail=str(exc),
                meta=meta,
            )
        return self.error_object(
            status=status, title="Internal Server Error", detail=str(exc)
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}
