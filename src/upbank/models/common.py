"""
Shared JSON:API building blocks for Up API payloads.

Every resource returned by the Up API has the same envelope: a ``type``,
an ``id``, ``attributes``, ``relationships`` and ``links``. The models in
this module cover the pieces that are reused between accounts and
transactions.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Any, Dict, List, Optional


class UpModel(BaseModel):
    """Base model accepting the API's camelCase names and ignoring unknown keys"""
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore"
    )

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]):
        """Create instance from Up API response"""
        return cls.model_validate(data)

    def to_api_dict(self) -> Dict[str, Any]:
        """Dump back to the camelCase wire shape"""
        return self.model_dump(mode="json", by_alias=True)


class ResourceIdentifier(UpModel):
    """Pointer to another resource"""
    type: Annotated[str, Field(description="Resource type")]
    id: Annotated[str, Field(description="Resource ID")]


class RelatedLink(UpModel):
    related: Annotated[Optional[str], Field(description="Link to the related resource")] = None


class SelfLink(UpModel):
    self_: Annotated[Optional[str], Field(alias="self", description="Canonical link to this resource")] = None


class Relationship(UpModel):
    """To-one relationship whose data may be null"""
    data: Annotated[Optional[ResourceIdentifier], Field(description="Related resource")] = None
    links: Annotated[Optional[RelatedLink], Field(description="Relationship links")] = None


class ListRelationship(UpModel):
    """To-many relationship"""
    data: Annotated[List[ResourceIdentifier], Field(default_factory=list, description="Related resources")]
    links: Annotated[Optional[SelfLink], Field(description="Relationship links")] = None


class LinksOnlyRelationship(UpModel):
    links: Annotated[Optional[RelatedLink], Field(description="Relationship links")] = None


class PaginationLinks(UpModel):
    """Cursor links for a page of results"""
    prev: Annotated[Optional[str], Field(description="Previous page URL")] = None
    next: Annotated[Optional[str], Field(description="Next page URL")] = None


class PingMeta(UpModel):
    id: Annotated[str, Field(description="Unique request ID")]
    status_emoji: Annotated[str, Field(alias="statusEmoji", description="Cute emoji representing the response status")]


class PingResponse(UpModel):
    """Response from the util/ping endpoint"""
    meta: Annotated[PingMeta, Field(description="Ping metadata")]
