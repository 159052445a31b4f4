from helpdesk.models.entities import Ticket
from helpdesk.models.schemas.ticket import TicketCreateRequest
from helpdesk.repositories.health_repository import HealthRepository
from helpdesk.services.base_config_service import BaseConfigService
from helpdesk.services.pedido_service import PedidoService
from helpdesk.services.sample_data import sample_maintenance_tickets
from helpdesk.services.ticket_service import TicketService


class BaseDataService:
    """Bridges the base system work orders into the helpdesk ticket store."""

    def __init__(
        self,
        ticket_service: TicketService,
        pedido_service: PedidoService,
        config_service: BaseConfigService,
        health_repository: HealthRepository,
    ) -> None:
        self.ticket_service = ticket_service
        self.pedido_service = pedido_service
        self.config_service = config_service
        self.health_repository = health_repository

    def load_sample_tickets(self) -> list[Ticket]:
        return [
            self.ticket_service.create_ticket(payload)
            for payload in sample_maintenance_tickets()
        ]

    def ticket_from_pedido(self, pedido_id: int) -> Ticket | None:
        pedido = self.pedido_service.get_pedido(pedido_id)
        if pedido is None:
            return None

        config = self.config_service.get_config()
        return self.ticket_service.create_ticket(
            TicketCreateRequest(
                title=f"{pedido.parte} - {pedido.sub_equipo}",
                description=pedido.problema,
                requester=pedido.nombre,
                assigned_to=config.taller_mapping.get(pedido.taller, ""),
                status="open",
                priority=config.estado_priority_mapping.get(pedido.estado, "medium"),
                tags=[pedido.sector, pedido.taller, pedido.tipo_tarea],
            )
        )

    def test_connection(self) -> tuple[bool, str]:
        health = self.health_repository.check_connection()
        if health.connected:
            return True, "Servicio de datos base funcionando correctamente"
        return False, f"Error en el servicio de datos base: {health.message}"
