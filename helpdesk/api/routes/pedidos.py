from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from helpdesk.api.dependencies import get_base_data_service, get_pedido_service
from helpdesk.core.errors import AppError, not_found_error
from helpdesk.models.entities import Pedido, PedidoStatus, Sector, Taller
from helpdesk.models.schemas.pedido import (
    EstadoChangeRequest,
    PedidoDataResponse,
    PedidoImportRequest,
    PedidoListResponse,
    PedidoRead,
    PedidoSearch,
    PedidoStatsResponse,
    PedidoUpdateRequest,
    PedidoWriteRequest,
)
from helpdesk.models.schemas.ticket import TicketDataResponse, TicketRead
from helpdesk.services.base_data_service import BaseDataService
from helpdesk.services.pedido_service import PedidoService

router = APIRouter(prefix="/pedidos")


def _to_list_response(pedidos: list[Pedido]) -> PedidoListResponse:
    return PedidoListResponse(data=[PedidoRead.model_validate(pedido) for pedido in pedidos])


@router.get("", response_model=PedidoListResponse)
def search_pedidos(
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
    q: Annotated[str | None, Query()] = None,
    sector: Annotated[Sector | None, Query()] = None,
    taller: Annotated[Taller | None, Query()] = None,
    estado: Annotated[PedidoStatus | None, Query()] = None,
    fecha_desde: Annotated[date | None, Query()] = None,
    fecha_hasta: Annotated[date | None, Query()] = None,
) -> PedidoListResponse:
    criteria = PedidoSearch(
        search_term=q,
        sector=sector,
        taller=taller,
        estado=estado,
        fecha_desde=fecha_desde,
        fecha_hasta=fecha_hasta,
    )
    return _to_list_response(pedido_service.search_pedidos(criteria))


@router.post("", response_model=PedidoDataResponse, status_code=status.HTTP_201_CREATED)
def create_pedido(
    payload: PedidoWriteRequest,
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoDataResponse:
    pedido = pedido_service.create_pedido(payload)
    return PedidoDataResponse(data=PedidoRead.model_validate(pedido))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_pedidos(
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> Response:
    pedido_service.clear_pedidos()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/stats", response_model=PedidoStatsResponse)
def get_pedido_stats(
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoStatsResponse:
    return PedidoStatsResponse(data=pedido_service.get_stats())


@router.get("/export")
def export_pedidos(
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> Response:
    return Response(
        content=pedido_service.export_pedidos(),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="pedidos.json"'},
    )


@router.post("/import", response_model=PedidoListResponse)
def import_pedidos(
    payload: PedidoImportRequest,
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoListResponse:
    if not pedido_service.import_pedidos(payload.content):
        raise AppError(
            status_code=status.HTTP_400_BAD_REQUEST,
            code="INVALID_IMPORT_PAYLOAD",
            message="Import content must be a JSON array of pedidos.",
        )
    return _to_list_response(pedido_service.list_pedidos())


@router.post("/restore", response_model=PedidoListResponse)
def restore_sample_pedidos(
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoListResponse:
    pedido_service.restore_sample_data()
    return _to_list_response(pedido_service.list_pedidos())


@router.get("/{pedido_id}", response_model=PedidoDataResponse)
def get_pedido(
    pedido_id: int,
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoDataResponse:
    pedido = pedido_service.get_pedido(pedido_id)
    if pedido is None:
        raise not_found_error("pedido", pedido_id)
    return PedidoDataResponse(data=PedidoRead.model_validate(pedido))


@router.patch("/{pedido_id}", response_model=PedidoDataResponse)
def update_pedido(
    pedido_id: int,
    payload: PedidoUpdateRequest,
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoDataResponse:
    pedido = pedido_service.update_pedido(pedido_id, payload)
    if pedido is None:
        raise not_found_error("pedido", pedido_id)
    return PedidoDataResponse(data=PedidoRead.model_validate(pedido))


@router.delete("/{pedido_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pedido(
    pedido_id: int,
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> Response:
    if not pedido_service.delete_pedido(pedido_id):
        raise not_found_error("pedido", pedido_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{pedido_id}/estado", response_model=PedidoDataResponse)
def change_pedido_estado(
    pedido_id: int,
    payload: EstadoChangeRequest,
    pedido_service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoDataResponse:
    pedido = pedido_service.change_estado(pedido_id, payload.estado)
    if pedido is None:
        raise not_found_error("pedido", pedido_id)
    return PedidoDataResponse(data=PedidoRead.model_validate(pedido))


@router.post(
    "/{pedido_id}/ticket",
    response_model=TicketDataResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_ticket_from_pedido(
    pedido_id: int,
    base_data_service: Annotated[BaseDataService, Depends(get_base_data_service)],
) -> TicketDataResponse:
    ticket = base_data_service.ticket_from_pedido(pedido_id)
    if ticket is None:
        raise not_found_error("pedido", pedido_id)
    return TicketDataResponse(data=TicketRead.model_validate(ticket))
