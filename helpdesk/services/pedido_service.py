import json
from dataclasses import replace
from threading import RLock

from pydantic import ValidationError

from helpdesk.core.logger import logger
from helpdesk.models.entities import Pedido, PedidoStatus
from helpdesk.models.schemas.pedido import (
    PedidoSearch,
    PedidoStats,
    PedidoUpdateRequest,
    PedidoWriteRequest,
)
from helpdesk.repositories.pedido_repository import PedidoRepository
from helpdesk.services.filters import apply_filters, contains_text, matches_value, within_range
from helpdesk.services.sample_data import sample_pedidos

_STATUS_COUNTERS: dict[str, str] = {
    "abierto": "abiertos",
    "proceso": "en_proceso",
    "cerrado": "cerrados",
}


class PedidoService:
    """Work orders of the base system, mirrored to the ``base_pedidos`` slot."""

    def __init__(self, pedido_repository: PedidoRepository) -> None:
        self.pedido_repository = pedido_repository
        # Id allocation and every write happen under this lock.
        self._lock = RLock()
        if not pedido_repository.loaded:
            self.restore_sample_data()

    def list_pedidos(self) -> list[Pedido]:
        with self._lock:
            return self.pedido_repository.list()

    def get_pedido(self, pedido_id: int) -> Pedido | None:
        with self._lock:
            return self.pedido_repository.get_by_id(pedido_id)

    def create_pedido(self, payload: PedidoWriteRequest) -> Pedido:
        with self._lock:
            # Ids follow the surviving maximum, so a deleted top id is handed out again.
            pedido = Pedido(id=self.pedido_repository.max_id() + 1, **payload.model_dump())
            created = self.pedido_repository.create(pedido)
        logger.info("Created pedido %d", created.id)
        return created

    def update_pedido(self, pedido_id: int, payload: PedidoUpdateRequest) -> Pedido | None:
        changes = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }
        with self._lock:
            current = self.pedido_repository.get_by_id(pedido_id)
            if current is None:
                return None
            updated = self.pedido_repository.update(replace(current, **changes))
        logger.info("Updated pedido %d", pedido_id)
        return updated

    def delete_pedido(self, pedido_id: int) -> bool:
        with self._lock:
            deleted = self.pedido_repository.delete(pedido_id)
        if deleted:
            logger.info("Deleted pedido %d", pedido_id)
        return deleted

    def change_estado(self, pedido_id: int, estado: PedidoStatus) -> Pedido | None:
        return self.update_pedido(pedido_id, PedidoUpdateRequest(estado=estado))

    def search_pedidos(self, criteria: PedidoSearch) -> list[Pedido]:
        return apply_filters(
            self.list_pedidos(),
            [
                lambda p: contains_text(
                    criteria.search_term, p.nombre, p.legajo, p.parte, p.problema, p.sub_equipo
                ),
                lambda p: matches_value(p.sector, criteria.sector),
                lambda p: matches_value(p.taller, criteria.taller),
                lambda p: matches_value(p.estado, criteria.estado),
                lambda p: within_range(p.fecha, criteria.fecha_desde, criteria.fecha_hasta),
            ],
        )

    def get_stats(self) -> PedidoStats:
        stats = PedidoStats()
        for pedido in self.list_pedidos():
            stats.total += 1
            counter = _STATUS_COUNTERS.get(pedido.estado)
            if counter is not None:
                setattr(stats.estados, counter, getattr(stats.estados, counter) + 1)
            stats.por_sector[pedido.sector] = stats.por_sector.get(pedido.sector, 0) + 1
            stats.por_taller[pedido.taller] = stats.por_taller.get(pedido.taller, 0) + 1
        return stats

    def export_pedidos(self) -> str:
        with self._lock:
            return self.pedido_repository.export_json()

    def import_pedidos(self, content: str) -> bool:
        """Replace every work order with the JSON array in ``content``.

        Nothing is applied unless the whole payload is a readable array of work orders.
        """
        try:
            records = json.loads(content)
        except json.JSONDecodeError as exc:
            logger.warning("Rejected pedido import: %s", exc)
            return False
        if not isinstance(records, list):
            logger.warning("Rejected pedido import: top-level value is not an array")
            return False
        try:
            pedidos = self.pedido_repository.coerce(records)
        except ValidationError as exc:
            logger.warning("Rejected pedido import: %d invalid fields", exc.error_count())
            return False

        with self._lock:
            self.pedido_repository.replace_all(pedidos)
        logger.info("Imported %d pedidos", len(pedidos))
        return True

    def clear_pedidos(self) -> None:
        with self._lock:
            self.pedido_repository.replace_all([])
        logger.info("Cleared all pedidos")

    def restore_sample_data(self) -> None:
        with self._lock:
            self.pedido_repository.replace_all(sample_pedidos())
        logger.info("Restored sample pedidos")
