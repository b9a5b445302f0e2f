"""
This module hosts the abstract base classes for ticket and visitor storage.
They define the "contract" that all storage backends must adhere to. Any
class that implements these interfaces is assumed to provide a persistent
data store for the ticket lifecycle.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List

from park.store.records import TicketRecord, VisitorRecord


class TicketStore(ABC):
    """The abstract ticket store interface."""

    @abstractmethod
    async def create(self, ticket: TicketRecord) -> TicketRecord:
        """Adds a ticket, returning it with the id assigned by the store."""

    @abstractmethod
    async def get(self, ticket_id: int) -> Optional[TicketRecord]:
        """Gets the ticket with the given id."""

    @abstractmethod
    async def get_all(self) -> List[TicketRecord]:
        """Gets every ticket."""

    @abstractmethod
    async def get_by_date(self, visit_date: datetime) -> List[TicketRecord]:
        """Gets the tickets whose visit date is exactly the given date."""

    @abstractmethod
    async def get_by_visitor(self, visitor_id: int) -> List[TicketRecord]:
        """Gets the tickets owned by the given visitor."""

    @abstractmethod
    async def save(self, ticket: TicketRecord) -> TicketRecord:
        """Writes the fields of an existing ticket back to the store."""

    @abstractmethod
    async def delete(self, ticket: TicketRecord):
        """Removes a ticket from the store."""


class VisitorStore(ABC):
    """The abstract visitor store interface."""

    @abstractmethod
    async def get(self, visitor_id: int) -> Optional[VisitorRecord]:
        """Gets the visitor with the given id."""
