from __future__ import annotations

from dataclasses import replace

from helpdesk.models.entities import StatusChange
from helpdesk.repositories.slot_repository import SlotRepository
from helpdesk.repositories.storage import KeyValueStorage

STATUS_CHANGES_KEY = "helpdesk_status_changes"


class StatusChangeRepository:
    """Append-only audit log of ticket status transitions."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self.slot = SlotRepository(storage, STATUS_CHANGES_KEY, StatusChange)
        self._changes: list[StatusChange] = self.slot.load() or []

    def list(self) -> list[StatusChange]:
        return [replace(change) for change in self._changes]

    def list_by_ticket(self, ticket_id: str) -> list[StatusChange]:
        return [replace(change) for change in self._changes if change.ticket_id == ticket_id]

    def add(self, change: StatusChange) -> StatusChange:
        self._changes.append(replace(change))
        self.slot.save(self._changes)
        return replace(change)
