from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ticket_desk.storage import KeyValueStore, StorageError

from .assignment import AssignmentStrategy, CollectionSizeRoundRobin
from .errors import TicketDecodeError, TicketNotFoundError, TicketStorageError
from .models import UNASSIGNED, Clock, MonotonicIdFactory, Ticket, utc_now
from .serialization import dumps_tickets, loads_tickets
from .state import TicketPriority, TicketStatus

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tickets_data"
DEFAULT_EMPLOYEES: tuple[str, ...] = ("Max Mustermann", "Anna Schmidt", "Tom Weber", "Lisa Fischer")


@dataclass(frozen=True, slots=True)
class SampleTicket:
    title: str
    description: str
    customer: str
    priority: TicketPriority


SAMPLE_TICKETS: tuple[SampleTicket, ...] = (
    SampleTicket("Login Problem", "Cannot login to the system", "max.mustermann@email.com", TicketPriority.HIGH),
    SampleTicket("Slow Performance", "Application runs very slow", "firma-abc@gmx.de", TicketPriority.NORMAL),
)


class TicketManager:
    """Owns the ticket collection and keeps the store in sync with it.

    Tickets are kept newest first. Every mutating operation writes the whole
    collection back to the store under a single key before returning; a failed
    write raises :class:`TicketStorageError` while the in-memory change stays
    applied.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        employees: Sequence[str] = DEFAULT_EMPLOYEES,
        storage_key: str = DEFAULT_STORAGE_KEY,
        assignment: AssignmentStrategy | None = None,
        clock: Clock = utc_now,
        id_factory: MonotonicIdFactory | None = None,
        seed_samples: bool = True,
    ) -> None:
        if not employees:
            raise ValueError("Employee roster must not be empty")
        self._store = store
        self._employees: tuple[str, ...] = tuple(employees)
        self._storage_key = storage_key
        self._assignment = assignment or CollectionSizeRoundRobin()
        self._clock = clock
        self._new_id = id_factory or MonotonicIdFactory(clock)
        self._seed_samples = seed_samples
        self._tickets: list[Ticket] = []

    @property
    def tickets(self) -> tuple[Ticket, ...]:
        return tuple(self._tickets)

    @property
    def employees(self) -> tuple[str, ...]:
        return self._employees

    @property
    def storage_key(self) -> str:
        return self._storage_key

    async def load_all(self) -> None:
        """Replace the collection with the stored one, seeding samples when the store is empty."""

        try:
            blob = await self._store.get_string(self._storage_key)
        except StorageError as exc:
            logger.exception("Failed to read tickets from key %s", self._storage_key)
            raise TicketStorageError(f"Could not load tickets: {exc}") from exc

        if blob is None:
            self._tickets = []
            if self._seed_samples:
                logger.info("No stored tickets found; seeding sample tickets")
                await self.create_sample_tickets()
            return

        try:
            tickets = loads_tickets(blob)
        except TicketDecodeError:
            logger.error("Stored tickets under key %s could not be decoded", self._storage_key)
            raise

        for ticket in tickets:
            self._new_id.observe(ticket.id)
        self._tickets = tickets
        logger.info("Loaded %d tickets", len(tickets))

    async def save_all(self) -> None:
        blob = dumps_tickets(self._tickets)
        try:
            await self._store.set_string(self._storage_key, blob)
        except StorageError as exc:
            logger.exception("Failed to save %d tickets", len(self._tickets))
            raise TicketStorageError(f"Could not save tickets: {exc}") from exc

    async def create(
        self,
        title: str,
        description: str,
        customer: str,
        priority: TicketPriority = TicketPriority.NORMAL,
    ) -> Ticket:
        ticket = self._build(title, description, customer, priority)
        self._tickets.insert(0, ticket)
        logger.debug("Created ticket %s", ticket.id)
        await self.save_all()
        return ticket

    async def create_sample_tickets(self) -> list[Ticket]:
        created: list[Ticket] = []
        for sample in SAMPLE_TICKETS:
            ticket = self._build(sample.title, sample.description, sample.customer, sample.priority)
            self._tickets.insert(0, ticket)
            created.append(ticket)
        await self.save_all()
        return created

    async def delete(self, ticket_id: str) -> int:
        """Remove the ticket with ``ticket_id``; unknown ids are ignored."""

        remaining = [ticket for ticket in self._tickets if ticket.id != ticket_id]
        removed = len(self._tickets) - len(remaining)
        self._tickets = remaining
        logger.debug("Deleted %d ticket(s) with id %s", removed, ticket_id)
        await self.save_all()
        return removed

    async def delete_all(self) -> None:
        count = len(self._tickets)
        self._tickets = []
        logger.info("Deleted all %d tickets", count)
        await self.save_all()

    def get(self, ticket_id: str) -> Ticket:
        return self._tickets[self._index_of(ticket_id)]

    def by_status(self, status: TicketStatus) -> tuple[Ticket, ...]:
        return tuple(ticket for ticket in self._tickets if ticket.status == status)

    def statistics(self) -> dict[TicketStatus, int]:
        counts = {status: 0 for status in TicketStatus}
        for ticket in self._tickets:
            counts[ticket.status] += 1
        return counts

    async def auto_assign(self, ticket_id: str) -> Ticket:
        """Assign the next roster member and move the ticket to in progress."""

        index = self._index_of(ticket_id)
        slot = self._assignment.next_index(
            collection_size=len(self._tickets),
            roster_size=len(self._employees),
        )
        now = self._clock()
        updated = self._tickets[index].assign(self._employees[slot], at=now).change_status(
            TicketStatus.IN_PROGRESS, at=now
        )
        return await self._replace(index, updated)

    async def change_status(self, ticket_id: str, new_status: TicketStatus) -> Ticket:
        index = self._index_of(ticket_id)
        return await self._replace(index, self._tickets[index].change_status(new_status, at=self._clock()))

    async def assign(self, ticket_id: str, employee: str) -> Ticket:
        index = self._index_of(ticket_id)
        return await self._replace(index, self._tickets[index].assign(employee, at=self._clock()))

    async def change_priority(self, ticket_id: str, new_priority: TicketPriority) -> Ticket:
        index = self._index_of(ticket_id)
        return await self._replace(index, self._tickets[index].change_priority(new_priority, at=self._clock()))

    def _build(self, title: str, description: str, customer: str, priority: TicketPriority) -> Ticket:
        now = self._clock()
        return Ticket(
            id=self._new_id(),
            title=title,
            description=description,
            customer=customer,
            assigned_to=UNASSIGNED,
            status=TicketStatus.OPEN,
            priority=priority,
            created_at=now,
            updated_at=now,
        )

    def _index_of(self, ticket_id: str) -> int:
        for index, ticket in enumerate(self._tickets):
            if ticket.id == ticket_id:
                return index
        raise TicketNotFoundError(f"Ticket {ticket_id} not found")

    async def _replace(self, index: int, ticket: Ticket) -> Ticket:
        self._tickets[index] = ticket
        logger.debug("Updated ticket %s", ticket.id)
        await self.save_all()
        return ticket
