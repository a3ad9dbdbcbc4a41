"""JSON encoding of tickets as stored under the collection key."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .errors import TicketDecodeError
from .models import Ticket
from .state import TicketPriority, TicketStatus


class TicketRecord(BaseModel):
    """Validated shape of one element of the stored JSON array."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    title: str
    description: str
    customer: str
    assigned_to: str = Field(..., alias="assignedTo")
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_validator("status", mode="before")
    @classmethod
    def _decode_status(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return TicketStatus.from_ordinal(value)
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def _decode_priority(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return TicketPriority.from_ordinal(value)
        return value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        # Naive timestamps were written in the device's local time.
        return value.astimezone(timezone.utc)

    def to_ticket(self) -> Ticket:
        return Ticket(
            id=self.id,
            title=self.title,
            description=self.description,
            customer=self.customer,
            assigned_to=self.assigned_to,
            status=self.status,
            priority=self.priority,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


_RECORD_LIST = TypeAdapter(list[TicketRecord])


def encode_ticket(ticket: Ticket) -> dict[str, Any]:
    return {
        "id": ticket.id,
        "title": ticket.title,
        "description": ticket.description,
        "customer": ticket.customer,
        "assignedTo": ticket.assigned_to,
        "status": ticket.status.value,
        "priority": ticket.priority.value,
        "createdAt": ticket.created_at.isoformat(),
        "updatedAt": ticket.updated_at.isoformat(),
    }


def decode_ticket(data: Mapping[str, Any]) -> Ticket:
    try:
        record = TicketRecord.model_validate(data)
    except ValidationError as exc:
        raise TicketDecodeError(f"Invalid ticket record: {exc}") from exc
    return record.to_ticket()


def dumps_tickets(tickets: Iterable[Ticket]) -> str:
    """Serialize a whole collection to the stored JSON array."""

    return json.dumps([encode_ticket(ticket) for ticket in tickets], ensure_ascii=False)


def loads_tickets(blob: str) -> list[Ticket]:
    """Decode a stored JSON array; any bad element fails the whole blob."""

    try:
        records = _RECORD_LIST.validate_json(blob)
    except ValidationError as exc:
        raise TicketDecodeError(f"Invalid ticket collection: {exc}") from exc
    return [record.to_ticket() for record in records]
