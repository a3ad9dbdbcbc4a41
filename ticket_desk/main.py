from __future__ import annotations

import logging

from ticket_desk.core.config import Settings, get_settings
from ticket_desk.core.logging import configure_logging
from ticket_desk.storage import JsonFileKeyValueStore, KeyValueStore
from ticket_desk.tickets import (
    AssignmentStrategy,
    CollectionSizeRoundRobin,
    CounterRoundRobin,
    TicketManager,
)

logger = logging.getLogger(__name__)


def build_assignment_strategy(name: str) -> AssignmentStrategy:
    if name == "collection_size":
        return CollectionSizeRoundRobin()
    if name == "counter":
        return CounterRoundRobin()
    raise ValueError(f"Unknown assignment strategy: {name!r}")


async def create_ticket_manager(
    settings: Settings | None = None,
    *,
    store: KeyValueStore | None = None,
) -> TicketManager:
    """Configure logging, build a manager from settings and load the stored collection."""

    settings = settings or get_settings()
    configure_logging(settings)
    if store is None:
        store = JsonFileKeyValueStore(settings.storage_path)
        logger.info("Using ticket store at %s", settings.storage_path)

    manager = TicketManager(
        store,
        employees=settings.employees,
        storage_key=settings.storage_key,
        assignment=build_assignment_strategy(settings.assignment_strategy),
        seed_samples=settings.seed_samples,
    )
    await manager.load_all()
    return manager
