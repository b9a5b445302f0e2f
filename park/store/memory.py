"""
Provides a simple in-memory implementation of the stores,
for testing and mocking purposes.
"""
from datetime import datetime
from itertools import count
from typing import Dict, Optional, List, Iterable

import attr

from park.service.dates import as_utc
from park.store.persistent_store import TicketStore, VisitorStore
from park.store.records import TicketRecord, VisitorRecord


class MemoryTicketStore(TicketStore):
    """
    Emulates a database by doing all the operations in memory.

    Records are copied on the way in and out, so callers never
    hold a reference to the stored ticket.
    """

    def __init__(self):
        self.tickets: Dict[int, TicketRecord] = {}
        self._ids = count(1)

    async def create(self, ticket: TicketRecord) -> TicketRecord:
        stored = attr.evolve(ticket, id=next(self._ids), visit_date=as_utc(ticket.visit_date))
        self.tickets[stored.id] = stored
        return attr.evolve(stored)

    async def get(self, ticket_id: int) -> Optional[TicketRecord]:
        ticket = self.tickets.get(ticket_id)
        return attr.evolve(ticket) if ticket is not None else None

    async def get_all(self) -> List[TicketRecord]:
        return self._copies(self.tickets.values())

    async def get_by_date(self, visit_date: datetime) -> List[TicketRecord]:
        visit_date = as_utc(visit_date)
        return self._copies(t for t in self.tickets.values() if t.visit_date == visit_date)

    async def get_by_visitor(self, visitor_id: int) -> List[TicketRecord]:
        return self._copies(t for t in self.tickets.values() if t.visitor_id == visitor_id)

    async def save(self, ticket: TicketRecord) -> TicketRecord:
        if ticket.id not in self.tickets:
            raise KeyError(f"Ticket {ticket.id} is not in the store.")
        self.tickets[ticket.id] = attr.evolve(ticket, visit_date=as_utc(ticket.visit_date))
        return attr.evolve(self.tickets[ticket.id])

    async def delete(self, ticket: TicketRecord):
        self.tickets.pop(ticket.id, None)

    @staticmethod
    def _copies(tickets: Iterable[TicketRecord]) -> List[TicketRecord]:
        return [attr.evolve(ticket) for ticket in tickets]


class MemoryVisitorStore(VisitorStore):

    def __init__(self, *visitors: VisitorRecord):
        self.visitors: Dict[int, VisitorRecord] = {visitor.id: visitor for visitor in visitors}

    async def get(self, visitor_id: int) -> Optional[VisitorRecord]:
        return self.visitors.get(visitor_id)
