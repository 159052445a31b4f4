"""Pydantic schema definitions."""

from helpdesk.models.schemas.base_config import BaseConfig, BaseConfigResponse, BaseConfigUpdate
from helpdesk.models.schemas.health import ConnectionTestResponse, HealthResponse, StorageHealth
from helpdesk.models.schemas.pedido import (
    EstadoChangeRequest,
    PedidoDataResponse,
    PedidoImportRequest,
    PedidoListResponse,
    PedidoRead,
    PedidoSearch,
    PedidoStats,
    PedidoStatsResponse,
    PedidoStatusCounts,
    PedidoUpdateRequest,
    PedidoWriteRequest,
)
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

__all__ = [
    "BaseConfig",
    "BaseConfigResponse",
    "BaseConfigUpdate",
    "ConnectionTestResponse",
    "EstadoChangeRequest",
    "HealthResponse",
    "PedidoDataResponse",
    "PedidoImportRequest",
    "PedidoListResponse",
    "PedidoRead",
    "PedidoSearch",
    "PedidoStats",
    "PedidoStatsResponse",
    "PedidoStatusCounts",
    "PedidoUpdateRequest",
    "PedidoWriteRequest",
    "StatusChangeListResponse",
    "StatusChangeRead",
    "StatusChangeRequest",
    "StorageHealth",
    "TicketCreateRequest",
    "TicketDataResponse",
    "TicketFilter",
    "TicketListMeta",
    "TicketListResponse",
    "TicketRead",
    "TicketUpdateRequest",
]
