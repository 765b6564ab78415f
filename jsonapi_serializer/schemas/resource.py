"""Pydantic models describing produced JSON:API v1.1 documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    model_config = ConfigDict(extra="forbid")

    type: str
    id: str


class JSONAPIRelationship(BaseModel):
    """Relationship object holding to-one or to-many linkage."""

    data: Union[JSONAPIResourceIdentifier, List[JSONAPIResourceIdentifier]]


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: str
    attributes: Dict[str, Any]
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None
    links: Optional[Dict[str, str]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    data: Union[JSONAPIResource, List[JSONAPIResource], None]
    included: Optional[List[JSONAPIResource]] = None
    links: Dict[str, str]
    meta: Optional[Dict[str, Any]] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[Dict[str, Any]]
