from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from helpdesk.models.entities import TicketPriority, TicketStatus

TagList = Annotated[list[str], Field(default_factory=list)]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TicketCreateRequest(BaseModel):
    title: RequiredText
    description: str = ""
    requester: RequiredText
    assigned_to: str = ""
    status: TicketStatus = "open"
    priority: TicketPriority = "medium"
    tags: TagList


class TicketUpdateRequest(BaseModel):
    """Partial update; only the fields sent by the caller are merged."""

    title: RequiredText | None = None
    description: str | None = None
    requester: RequiredText | None = None
    assigned_to: str | None = None
    status: TicketStatus | None = None
    priority: TicketPriority | None = None
    tags: list[str] | None = None
    status_comment: str | None = None


class StatusChangeRequest(BaseModel):
    status: TicketStatus
    comment: str | None = None


class TicketFilter(BaseModel):
    status: TicketStatus | None = None
    priority: TicketPriority | None = None
    tags: TagList
    date_from: datetime | None = None
    date_to: datetime | None = None
    search: str | None = None
    assigned_to: str | None = None


class TicketRead(BaseModel):
    id: str
    title: str
    description: str
    requester: str
    assigned_to: str
    status: TicketStatus
    priority: TicketPriority
    tags: list[str]
    created_at: datetime
    updated_at: datetime
    closed_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class StatusChangeRead(BaseModel):
    id: str
    ticket_id: str
    from_status: TicketStatus
    to_status: TicketStatus
    changed_by: str
    changed_at: datetime
    comment: str | None = None

    model_config = ConfigDict(from_attributes=True)


class TicketDataResponse(BaseModel):
    data: TicketRead


class TicketListMeta(BaseModel):
    total: int


class TicketListResponse(BaseModel):
    data: list[TicketRead]
    meta: TicketListMeta


class StatusChangeListResponse(BaseModel):
    data: list[StatusChangeRead]
