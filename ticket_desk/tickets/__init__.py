"""Ticket domain models and the collection manager."""

from .assignment import AssignmentStrategy, CollectionSizeRoundRobin, CounterRoundRobin
from .errors import TicketDecodeError, TicketManagerError, TicketNotFoundError, TicketStorageError
from .manager import DEFAULT_EMPLOYEES, DEFAULT_STORAGE_KEY, SAMPLE_TICKETS, TicketManager
from .models import UNASSIGNED, MonotonicIdFactory, Ticket
from .state import TicketPriority, TicketStatus

__all__ = [
    "AssignmentStrategy",
    "CollectionSizeRoundRobin",
    "CounterRoundRobin",
    "TicketDecodeError",
    "TicketManagerError",
    "TicketNotFoundError",
    "TicketStorageError",
    "DEFAULT_EMPLOYEES",
    "DEFAULT_STORAGE_KEY",
    "SAMPLE_TICKETS",
    "TicketManager",
    "UNASSIGNED",
    "MonotonicIdFactory",
    "Ticket",
    "TicketPriority",
    "TicketStatus",
]
