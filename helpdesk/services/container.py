from dataclasses import dataclass

from helpdesk.core.config import Settings
from helpdesk.repositories.base_config_repository import BaseConfigRepository
from helpdesk.repositories.health_repository import HealthRepository
from helpdesk.repositories.pedido_repository import PedidoRepository
from helpdesk.repositories.status_change_repository import StatusChangeRepository
from helpdesk.repositories.storage import KeyValueStorage, build_storage
from helpdesk.repositories.ticket_repository import TicketRepository
from helpdesk.services.base_config_service import BaseConfigService
from helpdesk.services.base_data_service import BaseDataService
from helpdesk.services.health_service import HealthService
from helpdesk.services.pedido_service import PedidoService
from helpdesk.services.ticket_service import TicketService


@dataclass(slots=True)
class ServiceContainer:
    storage: KeyValueStorage
    ticket_service: TicketService
    pedido_service: PedidoService
    config_service: BaseConfigService
    base_data_service: BaseDataService
    health_service: HealthService


def build_services(settings: Settings, storage: KeyValueStorage | None = None) -> ServiceContainer:
    """Construct every store once; consumers receive these instances."""
    storage = storage if storage is not None else build_storage(settings)
    health_repository = HealthRepository(storage)

    ticket_service = TicketService(
        ticket_repository=TicketRepository(storage),
        status_change_repository=StatusChangeRepository(storage),
    )
    if settings.seed_on_startup:
        ticket_service.seed_if_empty()

    pedido_service = PedidoService(pedido_repository=PedidoRepository(storage))
    config_service = BaseConfigService(repository=BaseConfigRepository(storage))

    return ServiceContainer(
        storage=storage,
        ticket_service=ticket_service,
        pedido_service=pedido_service,
        config_service=config_service,
        base_data_service=BaseDataService(
            ticket_service=ticket_service,
            pedido_service=pedido_service,
            config_service=config_service,
            health_repository=health_repository,
        ),
        health_service=HealthService(repository=health_repository, settings=settings),
    )
