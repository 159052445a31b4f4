from fastapi import Request

from helpdesk.services.base_config_service import BaseConfigService
from helpdesk.services.base_data_service import BaseDataService
from helpdesk.services.container import ServiceContainer
from helpdesk.services.health_service import HealthService
from helpdesk.services.pedido_service import PedidoService
from helpdesk.services.ticket_service import TicketService


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_ticket_service(request: Request) -> TicketService:
    return get_services(request).ticket_service


def get_pedido_service(request: Request) -> PedidoService:
    return get_services(request).pedido_service


def get_config_service(request: Request) -> BaseConfigService:
    return get_services(request).config_service


def get_base_data_service(request: Request) -> BaseDataService:
    return get_services(request).base_data_service


def get_health_service(request: Request) -> HealthService:
    return get_services(request).health_service
