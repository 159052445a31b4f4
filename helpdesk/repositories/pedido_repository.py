from __future__ import annotations

from dataclasses import replace

from helpdesk.core.logger import logger
from helpdesk.models.entities import Pedido
from helpdesk.repositories.slot_repository import SlotRepository
from helpdesk.repositories.storage import KeyValueStorage

PEDIDOS_KEY = "base_pedidos"


class PedidoRepository:
    def __init__(self, storage: KeyValueStorage) -> None:
        self.slot = SlotRepository(storage, PEDIDOS_KEY, Pedido)
        loaded = self.slot.load()
        # False when the slot was empty or unreadable; the service seeds it then.
        self.loaded = loaded is not None
        self._pedidos: list[Pedido] = loaded or []
        logger.debug("Loaded %d pedidos from slot '%s'", len(self._pedidos), PEDIDOS_KEY)

    def list(self) -> list[Pedido]:
        return [replace(pedido) for pedido in self._pedidos]

    def get_by_id(self, pedido_id: int) -> Pedido | None:
        for pedido in self._pedidos:
            if pedido.id == pedido_id:
                return replace(pedido)
        return None

    def max_id(self) -> int:
        return max((pedido.id for pedido in self._pedidos), default=0)

    def create(self, pedido: Pedido) -> Pedido:
        self._pedidos.append(replace(pedido))
        self.slot.save(self._pedidos)
        return replace(pedido)

    def update(self, pedido: Pedido) -> Pedido | None:
        for index, current in enumerate(self._pedidos):
            if current.id == pedido.id:
                self._pedidos[index] = replace(pedido)
                self.slot.save(self._pedidos)
                return replace(pedido)
        return None

    def delete(self, pedido_id: int) -> bool:
        for index, pedido in enumerate(self._pedidos):
            if pedido.id == pedido_id:
                del self._pedidos[index]
                self.slot.save(self._pedidos)
                return True
        return False

    def replace_all(self, pedidos: list[Pedido]) -> None:
        self._pedidos = [replace(pedido) for pedido in pedidos]
        self.slot.save(self._pedidos)

    def export_json(self) -> str:
        return self.slot.dump(self._pedidos, indent=2)

    def coerce(self, records: list[object]) -> list[Pedido]:
        return self.slot.parse_python(records)
