from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

TicketStatus = Literal["open", "pending", "claimed", "closed"]
TicketPriority = Literal["low", "medium", "high"]

PedidoStatus = Literal["abierto", "proceso", "cerrado"]
Sector = Literal[
    "corrugadora",
    "ward_rdc",
    "ward_ffg",
    "c3000_rdc",
    "c2000",
    "cosedoras",
    "gral_planta",
    "automotores",
    "expedicion",
    "jumbo",
]
Taller = Literal["mecanico", "electrico", "herreria", "otro"]
TipoTarea = Literal["mantenimiento", "reparacion", "seguridad", "mejora", "otro"]


@dataclass(slots=True)
class Ticket:
    id: str
    title: str
    description: str
    requester: str
    assigned_to: str
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime
    updated_at: datetime
    tags: list[str] = field(default_factory=list)
    closed_at: datetime | None = None


@dataclass(slots=True)
class StatusChange:
    id: str
    ticket_id: str
    from_status: TicketStatus
    to_status: TicketStatus
    changed_by: str
    changed_at: datetime
    comment: str | None = None


@dataclass(slots=True)
class Pedido:
    """Maintenance work order of the base system."""

    id: int
    nombre: str
    legajo: str
    fecha: date
    sector: Sector
    sub_equipo: str
    taller: Taller
    tipo_tarea: TipoTarea
    parte: str
    problema: str
    estado: PedidoStatus
