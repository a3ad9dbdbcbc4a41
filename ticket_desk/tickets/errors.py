from __future__ import annotations


class TicketManagerError(RuntimeError):
    """Base error for ticket manager issues."""


class TicketNotFoundError(TicketManagerError):
    """Raised when an operation targets a non-existent ticket."""


class TicketDecodeError(TicketManagerError, ValueError):
    """Raised when stored ticket data cannot be decoded."""


class TicketStorageError(TicketManagerError):
    """Raised when the ticket collection could not be read from or written to storage."""
