"""Starlette responses carrying JSON:API documents."""

from starlette.responses import JSONResponse

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(JSONResponse):
    """JSON response served with the JSON:API media type."""

    media_type = JSONAPI_MEDIA_TYPE
