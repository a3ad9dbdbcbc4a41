from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Mapping

from .state import TicketPriority, TicketStatus

UNASSIGNED = "Not Assigned"
DISPLAY_TIME_FORMAT = "%d.%m.%Y %H:%M"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MonotonicIdFactory:
    """Produce ticket ids from the millisecond clock, never repeating one.

    Two tickets created within the same millisecond get consecutive ids
    instead of colliding.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        candidate = int(self._clock().timestamp() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)

    def observe(self, ticket_id: str) -> None:
        """Make sure future ids sort after an id loaded from storage."""

        try:
            value = int(ticket_id)
        except ValueError:
            return
        self._last = max(self._last, value)


@dataclass(frozen=True, slots=True)
class Ticket:
    """Immutable snapshot of a support ticket.

    The mutators return a new snapshot; ``updated_at`` is never stamped earlier
    than ``created_at``.
    """

    id: str
    title: str
    description: str
    customer: str
    assigned_to: str
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime
    updated_at: datetime

    def change_status(self, new_status: TicketStatus, *, at: datetime | None = None) -> Ticket:
        return replace(self, status=new_status, updated_at=self._stamp(at))

    def assign(self, employee: str, *, at: datetime | None = None) -> Ticket:
        return replace(self, assigned_to=employee, updated_at=self._stamp(at))

    def change_priority(self, new_priority: TicketPriority, *, at: datetime | None = None) -> Ticket:
        return replace(self, priority=new_priority, updated_at=self._stamp(at))

    @property
    def formatted_time(self) -> str:
        """Creation time in local time as ``dd.mm.yyyy hh:mm``."""

        return self.created_at.astimezone().strftime(DISPLAY_TIME_FORMAT)

    def to_serializable(self) -> dict[str, Any]:
        from .serialization import encode_ticket

        return encode_ticket(self)

    @classmethod
    def from_serializable(cls, data: Mapping[str, Any]) -> Ticket:
        from .serialization import decode_ticket

        return decode_ticket(data)

    def _stamp(self, at: datetime | None) -> datetime:
        if at is None:
            at = utc_now()
        return max(at, self.created_at)
