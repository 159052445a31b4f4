from dataclasses import replace
from datetime import UTC, datetime
from threading import RLock
from uuid import uuid4

from helpdesk.core.logger import logger
from helpdesk.models.entities import StatusChange, Ticket, TicketStatus
from helpdesk.models.schemas.ticket import TicketCreateRequest, TicketFilter, TicketUpdateRequest
from helpdesk.repositories.status_change_repository import StatusChangeRepository
from helpdesk.repositories.ticket_repository import TicketRepository
from helpdesk.services.filters import (
    apply_filters,
    as_utc,
    contains_text,
    matches_value,
    shares_any,
    within_range,
)
from helpdesk.services.sample_data import sample_tickets

SYSTEM_ACTOR = "Sistema"
USER_ACTOR = "Usuario"
CREATED_COMMENT = "Ticket creado"


def generate_id() -> str:
    return uuid4().hex


class TicketService:
    def __init__(
        self,
        ticket_repository: TicketRepository,
        status_change_repository: StatusChangeRepository,
    ) -> None:
        self.ticket_repository = ticket_repository
        self.status_change_repository = status_change_repository
        # Guards each read-merge-persist sequence.
        self._lock = RLock()

    def list_tickets(self) -> list[Ticket]:
        with self._lock:
            return self.ticket_repository.list()

    def get_ticket(self, ticket_id: str) -> Ticket | None:
        with self._lock:
            return self.ticket_repository.get_by_id(ticket_id)

    def create_ticket(self, payload: TicketCreateRequest) -> Ticket:
        now = datetime.now(UTC)
        with self._lock:
            ticket = self.ticket_repository.create(
                Ticket(
                    id=generate_id(),
                    title=payload.title,
                    description=payload.description,
                    requester=payload.requester,
                    assigned_to=payload.assigned_to,
                    status=payload.status,
                    priority=payload.priority,
                    tags=list(payload.tags),
                    created_at=now,
                    updated_at=now,
                )
            )
            # The creation entry always starts from "open", whatever the initial status.
            self._record_status_change(
                ticket.id,
                from_status="open",
                to_status=ticket.status,
                changed_by=SYSTEM_ACTOR,
                comment=CREATED_COMMENT,
            )
        logger.info("Created ticket %s with status %s", ticket.id, ticket.status)
        return ticket

    def update_ticket(self, ticket_id: str, payload: TicketUpdateRequest) -> Ticket | None:
        changes = payload.model_dump(exclude_unset=True, exclude={"status_comment"})
        changes = {field: value for field, value in changes.items() if value is not None}

        with self._lock:
            current = self.ticket_repository.get_by_id(ticket_id)
            if current is None:
                return None

            updated = replace(current, **changes, updated_at=datetime.now(UTC))
            self.ticket_repository.update(updated)

            if updated.status != current.status:
                self._record_status_change(
                    ticket_id,
                    from_status=current.status,
                    to_status=updated.status,
                    changed_by=USER_ACTOR,
                    comment=payload.status_comment,
                )
        logger.info("Updated ticket %s", ticket_id)
        return updated

    def change_status(
        self,
        ticket_id: str,
        new_status: TicketStatus,
        comment: str | None = None,
    ) -> Ticket | None:
        with self._lock:
            current = self.ticket_repository.get_by_id(ticket_id)
            if current is None:
                return None

            now = datetime.now(UTC)
            updated = replace(
                current,
                status=new_status,
                updated_at=now,
                closed_at=now if new_status == "closed" else current.closed_at,
            )
            self.ticket_repository.update(updated)
            self._record_status_change(
                ticket_id,
                from_status=current.status,
                to_status=new_status,
                changed_by=USER_ACTOR,
                comment=comment,
            )
        logger.info("Ticket %s moved from %s to %s", ticket_id, current.status, new_status)
        return updated

    def delete_ticket(self, ticket_id: str) -> bool:
        # Audit records of the ticket are kept.
        with self._lock:
            deleted = self.ticket_repository.delete(ticket_id)
        if deleted:
            logger.info("Deleted ticket %s", ticket_id)
        return deleted

    def filter_tickets(self, criteria: TicketFilter) -> list[Ticket]:
        date_from = as_utc(criteria.date_from)
        date_to = as_utc(criteria.date_to)
        return apply_filters(
            self.list_tickets(),
            [
                lambda t: matches_value(t.status, criteria.status),
                lambda t: matches_value(t.priority, criteria.priority),
                lambda t: shares_any(t.tags, criteria.tags),
                lambda t: within_range(t.created_at, date_from, date_to),
                lambda t: contains_text(
                    criteria.search, t.title, t.description, t.requester, t.assigned_to
                ),
                lambda t: matches_value(t.assigned_to, criteria.assigned_to),
            ],
        )

    def get_history(self, ticket_id: str) -> list[StatusChange]:
        with self._lock:
            changes = self.status_change_repository.list_by_ticket(ticket_id)
        # Log position breaks ties between entries recorded at the same instant.
        ordered = sorted(
            enumerate(changes),
            key=lambda entry: (entry[1].changed_at, entry[0]),
            reverse=True,
        )
        return [change for _, change in ordered]

    def seed_if_empty(self) -> bool:
        with self._lock:
            if self.ticket_repository.count() > 0:
                return False

            tickets = sample_tickets()
            self.ticket_repository.create_many(tickets)
            for ticket in tickets:
                self._record_status_change(
                    ticket.id,
                    from_status="open",
                    to_status=ticket.status,
                    changed_by=SYSTEM_ACTOR,
                    comment=CREATED_COMMENT,
                )
        logger.info("Seeded %d sample tickets", len(tickets))
        return True

    def _record_status_change(
        self,
        ticket_id: str,
        *,
        from_status: TicketStatus,
        to_status: TicketStatus,
        changed_by: str,
        comment: str | None = None,
    ) -> StatusChange:
        return self.status_change_repository.add(
            StatusChange(
                id=generate_id(),
                ticket_id=ticket_id,
                from_status=from_status,
                to_status=to_status,
                changed_by=changed_by,
                changed_at=datetime.now(UTC),
                comment=comment,
            )
        )
