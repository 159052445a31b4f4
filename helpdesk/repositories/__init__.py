"""Storage-backed repositories."""

from helpdesk.repositories.base_config_repository import BaseConfigRepository
from helpdesk.repositories.health_repository import HealthRepository
from helpdesk.repositories.pedido_repository import PedidoRepository
from helpdesk.repositories.slot_repository import SlotRepository
from helpdesk.repositories.status_change_repository import StatusChangeRepository
from helpdesk.repositories.storage import (
    FileStorage,
    InMemoryStorage,
    KeyValueStorage,
    PostgresStorage,
    build_storage,
)
from helpdesk.repositories.ticket_repository import TicketRepository

__all__ = [
    "BaseConfigRepository",
    "FileStorage",
    "HealthRepository",
    "InMemoryStorage",
    "KeyValueStorage",
    "PedidoRepository",
    "PostgresStorage",
    "SlotRepository",
    "StatusChangeRepository",
    "TicketRepository",
    "build_storage",
]
