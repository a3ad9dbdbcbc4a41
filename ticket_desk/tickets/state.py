from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class DisplayInfo:
    """Presentation metadata attached to an enumeration member."""

    label: str
    color: str
    icon: str


class TicketStatus(str, Enum):
    """Supported stages of a ticket's lifecycle.

    Members are stored by their value, never by position, so the declaration
    order can change without affecting persisted data. ``_STATUS_LEGACY_ORDER``
    pins the positional encoding older stores were written with.
    """

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"

    @property
    def label(self) -> str:
        return _STATUS_DISPLAY[self].label

    @property
    def color(self) -> str:
        return _STATUS_DISPLAY[self].color

    @property
    def icon(self) -> str:
        return _STATUS_DISPLAY[self].icon

    @classmethod
    def from_ordinal(cls, ordinal: int) -> TicketStatus:
        return _from_ordinal(_STATUS_LEGACY_ORDER, ordinal, cls.__name__)


class TicketPriority(str, Enum):
    """Urgency classification of a ticket."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def label(self) -> str:
        return _PRIORITY_DISPLAY[self].label

    @property
    def color(self) -> str:
        return _PRIORITY_DISPLAY[self].color

    @property
    def icon(self) -> str:
        return _PRIORITY_DISPLAY[self].icon

    @classmethod
    def from_ordinal(cls, ordinal: int) -> TicketPriority:
        return _from_ordinal(_PRIORITY_LEGACY_ORDER, ordinal, cls.__name__)


_STATUS_DISPLAY: dict[TicketStatus, DisplayInfo] = {
    TicketStatus.OPEN: DisplayInfo("Open", "orange", "inbox"),
    TicketStatus.IN_PROGRESS: DisplayInfo("In Progress", "blue", "build"),
    TicketStatus.RESOLVED: DisplayInfo("Resolved", "green", "check_circle"),
    TicketStatus.CLOSED: DisplayInfo("Closed", "grey", "archive"),
}

_PRIORITY_DISPLAY: dict[TicketPriority, DisplayInfo] = {
    TicketPriority.LOW: DisplayInfo("Low", "green", "low_priority"),
    TicketPriority.NORMAL: DisplayInfo("Normal", "blue", "flag"),
    TicketPriority.HIGH: DisplayInfo("High", "orange", "priority_high"),
    TicketPriority.URGENT: DisplayInfo("Urgent", "red", "warning"),
}

# Positional encoding used by stores written before tags were introduced.
_STATUS_LEGACY_ORDER: tuple[TicketStatus, ...] = (
    TicketStatus.OPEN,
    TicketStatus.IN_PROGRESS,
    TicketStatus.RESOLVED,
    TicketStatus.CLOSED,
)

_PRIORITY_LEGACY_ORDER: tuple[TicketPriority, ...] = (
    TicketPriority.LOW,
    TicketPriority.NORMAL,
    TicketPriority.HIGH,
    TicketPriority.URGENT,
)


def _from_ordinal(order, ordinal: int, kind: str):
    if isinstance(ordinal, bool) or not 0 <= ordinal < len(order):
        raise ValueError(f"{kind} ordinal out of range: {ordinal!r}")
    return order[ordinal]
