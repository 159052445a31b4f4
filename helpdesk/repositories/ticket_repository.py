from __future__ import annotations

from dataclasses import replace

from helpdesk.core.logger import logger
from helpdesk.models.entities import Ticket
from helpdesk.repositories.slot_repository import SlotRepository
from helpdesk.repositories.storage import KeyValueStorage

TICKETS_KEY = "helpdesk_tickets"


def _copy_ticket(ticket: Ticket) -> Ticket:
    return replace(ticket, tags=list(ticket.tags))


class TicketRepository:
    def __init__(self, storage: KeyValueStorage) -> None:
        self.slot = SlotRepository(storage, TICKETS_KEY, Ticket)
        self._tickets: list[Ticket] = self.slot.load() or []
        logger.debug("Loaded %d tickets from slot '%s'", len(self._tickets), TICKETS_KEY)

    def list(self) -> list[Ticket]:
        return [_copy_ticket(ticket) for ticket in self._tickets]

    def count(self) -> int:
        return len(self._tickets)

    def get_by_id(self, ticket_id: str) -> Ticket | None:
        for ticket in self._tickets:
            if ticket.id == ticket_id:
                return _copy_ticket(ticket)
        return None

    def create(self, ticket: Ticket) -> Ticket:
        self._tickets.append(_copy_ticket(ticket))
        self.slot.save(self._tickets)
        return _copy_ticket(ticket)

    def create_many(self, tickets: list[Ticket]) -> None:
        self._tickets.extend(_copy_ticket(ticket) for ticket in tickets)
        self.slot.save(self._tickets)

    def update(self, ticket: Ticket) -> Ticket | None:
        for index, current in enumerate(self._tickets):
            if current.id == ticket.id:
                self._tickets[index] = _copy_ticket(ticket)
                self.slot.save(self._tickets)
                return _copy_ticket(ticket)
        return None

    def delete(self, ticket_id: str) -> bool:
        remaining = [ticket for ticket in self._tickets if ticket.id != ticket_id]
        if len(remaining) == len(self._tickets):
            return False
        self._tickets = remaining
        self.slot.save(self._tickets)
        return True
