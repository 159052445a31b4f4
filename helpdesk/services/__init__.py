"""Business services."""

from helpdesk.services.base_config_service import BaseConfigService
from helpdesk.services.base_data_service import BaseDataService
from helpdesk.services.container import ServiceContainer, build_services
from helpdesk.services.health_service import HealthService
from helpdesk.services.pedido_service import PedidoService
from helpdesk.services.ticket_service import TicketService

__all__ = [
    "BaseConfigService",
    "BaseDataService",
    "HealthService",
    "PedidoService",
    "ServiceContainer",
    "TicketService",
    "build_services",
]
