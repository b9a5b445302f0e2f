"""
Stores backed by the tortoise models. These require
:meth:`tortoise.Tortoise.init` to have been called.
"""
from datetime import datetime
from typing import Optional, List

from park.models import Ticket, Visitor
from park.service.dates import as_utc
from park.store.persistent_store import TicketStore, VisitorStore
from park.store.records import TicketRecord, VisitorRecord


def _to_record(ticket: Ticket) -> TicketRecord:
    return TicketRecord(
        id=ticket.id,
        visit_date=as_utc(ticket.visit_date),
        price=ticket.price,
        state=ticket.state,
        visitor_id=ticket.visitor_id,
    )


class DatabaseTicketStore(TicketStore):

    async def create(self, ticket: TicketRecord) -> TicketRecord:
        row = await Ticket.create(
            visit_date=as_utc(ticket.visit_date),
            price=ticket.price,
            state=ticket.state,
            visitor_id=ticket.visitor_id,
        )
        return _to_record(row)

    async def get(self, ticket_id: int) -> Optional[TicketRecord]:
        row = await Ticket.filter(id=ticket_id).first()
        return _to_record(row) if row is not None else None

    async def get_all(self) -> List[TicketRecord]:
        return [_to_record(row) for row in await Ticket.all().order_by("id")]

    async def get_by_date(self, visit_date: datetime) -> List[TicketRecord]:
        rows = await Ticket.filter(visit_date=as_utc(visit_date)).order_by("id")
        return [_to_record(row) for row in rows]

    async def get_by_visitor(self, visitor_id: int) -> List[TicketRecord]:
        rows = await Ticket.filter(visitor_id=visitor_id).order_by("id")
        return [_to_record(row) for row in rows]

    async def save(self, ticket: TicketRecord) -> TicketRecord:
        await Ticket.filter(id=ticket.id).update(
            visit_date=as_utc(ticket.visit_date),
            price=ticket.price,
            state=ticket.state,
            visitor_id=ticket.visitor_id,
        )
        return ticket

    async def delete(self, ticket: TicketRecord):
        await Ticket.filter(id=ticket.id).delete()


class DatabaseVisitorStore(VisitorStore):

    async def get(self, visitor_id: int) -> Optional[VisitorRecord]:
        visitor = await Visitor.filter(id=visitor_id).first()
        if visitor is None:
            return None
        return VisitorRecord(
            id=visitor.id, first_name=visitor.first_name, last_name=visitor.last_name, email=visitor.email
        )
