from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from helpdesk.api.dependencies import get_base_data_service, get_ticket_service
from helpdesk.core.errors import not_found_error
from helpdesk.models.entities import Ticket, TicketPriority, TicketStatus
from helpdesk.models.schemas.ticket import (
    StatusChangeListResponse,
    StatusChangeRead,
    StatusChangeRequest,
    TicketCreateRequest,
    TicketDataResponse,
    TicketFilter,
    TicketListMeta,
    TicketListResponse,
    TicketRead,
    TicketUpdateRequest,
)
from helpdesk.services.base_data_service import BaseDataService
from helpdesk.services.ticket_service import TicketService

router = APIRouter(prefix="/tickets")


def _to_list_response(tickets: list[Ticket]) -> TicketListResponse:
    return TicketListResponse(
        data=[TicketRead.model_validate(ticket) for ticket in tickets],
        meta=TicketListMeta(total=len(tickets)),
    )


@router.get("", response_model=TicketListResponse)
def list_tickets(
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
    status: Annotated[TicketStatus | None, Query()] = None,
    priority: Annotated[TicketPriority | None, Query()] = None,
    tags: Annotated[list[str] | None, Query()] = None,
    date_from: Annotated[datetime | None, Query()] = None,
    date_to: Annotated[datetime | None, Query()] = None,
    search: Annotated[str | None, Query()] = None,
    assigned_to: Annotated[str | None, Query()] = None,
) -> TicketListResponse:
    criteria = TicketFilter(
        status=status,
        priority=priority,
        tags=tags or [],
        date_from=date_from,
        date_to=date_to,
        search=search,
        assigned_to=assigned_to,
    )
    return _to_list_response(ticket_service.filter_tickets(criteria))


@router.post("", response_model=TicketDataResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(
    payload: TicketCreateRequest,
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
) -> TicketDataResponse:
    ticket = ticket_service.create_ticket(payload)
    return TicketDataResponse(data=TicketRead.model_validate(ticket))


@router.post("/sample-data", response_model=TicketListResponse, status_code=status.HTTP_201_CREATED)
def load_sample_tickets(
    base_data_service: Annotated[BaseDataService, Depends(get_base_data_service)],
) -> TicketListResponse:
    return _to_list_response(base_data_service.load_sample_tickets())


@router.get("/{ticket_id}", response_model=TicketDataResponse)
def get_ticket(
    ticket_id: str,
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
) -> TicketDataResponse:
    ticket = ticket_service.get_ticket(ticket_id)
    if ticket is None:
        raise not_found_error("ticket", ticket_id)
    return TicketDataResponse(data=TicketRead.model_validate(ticket))


@router.patch("/{ticket_id}", response_model=TicketDataResponse)
def update_ticket(
    ticket_id: str,
    payload: TicketUpdateRequest,
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
) -> TicketDataResponse:
    ticket = ticket_service.update_ticket(ticket_id, payload)
    if ticket is None:
        raise not_found_error("ticket", ticket_id)
    return TicketDataResponse(data=TicketRead.model_validate(ticket))


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ticket(
    ticket_id: str,
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
) -> Response:
    if not ticket_service.delete_ticket(ticket_id):
        raise not_found_error("ticket", ticket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{ticket_id}/status", response_model=TicketDataResponse)
def change_ticket_status(
    ticket_id: str,
    payload: StatusChangeRequest,
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
) -> TicketDataResponse:
    ticket = ticket_service.change_status(ticket_id, payload.status, payload.comment)
    if ticket is None:
        raise not_found_error("ticket", ticket_id)
    return TicketDataResponse(data=TicketRead.model_validate(ticket))


@router.get("/{ticket_id}/history", response_model=StatusChangeListResponse)
def get_ticket_history(
    ticket_id: str,
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
) -> StatusChangeListResponse:
    changes = ticket_service.get_history(ticket_id)
    return StatusChangeListResponse(
        data=[StatusChangeRead.model_validate(change) for change in changes]
    )
