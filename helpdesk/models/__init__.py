"""Domain models and API schemas."""

from helpdesk.models.entities import (
    Pedido,
    PedidoStatus,
    Sector,
    StatusChange,
    Taller,
    Ticket,
    TicketPriority,
    TicketStatus,
    TipoTarea,
)

__all__ = [
    "Pedido",
    "PedidoStatus",
    "Sector",
    "StatusChange",
    "Taller",
    "Ticket",
    "TicketPriority",
    "TicketStatus",
    "TipoTarea",
]
