"""
Ticket Manager
==============

Handles the lifecycle of park tickets.

A ticket is reserved when it is booked, and is then either paid for or
cancelled. A paid ticket is consumed at the gate by the validity check,
which scans it. Scanned and cancelled tickets are final.

Tickets may be cancelled up to seven whole days after their visit date.
The count is taken from the elapsed time truncated to whole days, so a
ticket dated 7 days and 23 hours ago may still be cancelled.

Responsibilities
----------------

- book a ticket for a visitor
- pay for and cancel tickets
- check (and consume) tickets at the gate
- report on the revenue and the number of tickets for a date
"""
import asyncio
from collections import Counter
from contextlib import asynccontextmanager
from datetime import datetime, timezone, tzinfo
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from park import logger
from park.models.ticket import TicketState
from park.service.dates import elapsed_days, same_calendar_day
from park.store.persistent_store import TicketStore, VisitorStore
from park.store.records import TicketRecord

CANCELLATION_WINDOW_DAYS = 7
"""The number of whole days after the visit date that a ticket may still be cancelled."""

STATE_LABELS: Dict[str, TicketState] = {
    "Cancelled": TicketState.CANCELLED,
    "Annulé": TicketState.CANCELLED,
    "Paid": TicketState.PAID,
    "Payé": TicketState.PAID,
}
"""The labels callers use to request a state change, mapped to the state they request."""


class TicketError(Exception):
    pass


class TicketNotFoundError(TicketError):

    def __init__(self, ticket_id):
        super().__init__(f"Ticket {ticket_id} does not exist.")
        self.ticket_id = ticket_id


class TicketNotCancellableError(TicketError):
    """Raised when a ticket is past its cancellation window, or has already been used."""


class UnknownTicketStateError(TicketError):

    def __init__(self, label):
        super().__init__(f"Ticket state {label} does not exist.")
        self.label = label


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketManager:
    """
    Handles the lifecycle of the tickets in the system.

    :param ticket_store: Where the tickets are kept.
    :param visitor_store: Where the ticket owners are looked up.
    :param clock: Returns the current time.
    :param zone: The timezone the park's calendar days are counted in.
    """

    def __init__(
        self, ticket_store: TicketStore, visitor_store: VisitorStore, *,
        clock: Callable[[], datetime] = _utcnow, zone: tzinfo = timezone.utc
    ):
        self._tickets = ticket_store
        self._visitors = visitor_store
        self._clock = clock
        self._zone = zone

        self._locks: Dict[int, asyncio.Lock] = {}
        """Serializes the read-then-write state changes on each ticket."""
        self._lock_users: Counter = Counter()
        """The number of calls holding or waiting on each lock."""

    async def create(self, visit_date: datetime, price: Decimal, visitor_id: Optional[int]) -> TicketRecord:
        """
        Books a new ticket. The ticket starts out reserved.

        A visitor that does not exist leaves the ticket without an owner.
        """
        visitor = await self._visitors.get(visitor_id) if visitor_id is not None else None
        if visitor is None:
            logger.warning("Booking ticket for unknown visitor %s, the ticket will have no owner", visitor_id)

        ticket = await self._tickets.create(TicketRecord(
            visit_date=visit_date,
            price=price,
            state=TicketState.initial(),
            visitor_id=visitor.id if visitor is not None else None,
        ))
        logger.info("Booked ticket %s for %s", ticket.id, ticket.visit_date)
        return ticket

    async def get(self, ticket_id: int) -> Optional[TicketRecord]:
        return await self._tickets.get(ticket_id)

    async def delete(self, ticket: TicketRecord):
        """Removes a ticket outright, whatever its state."""
        await self._tickets.delete(ticket)
        logger.info("Deleted ticket %s", ticket.id)

    async def all(self) -> List[TicketRecord]:
        return await self._tickets.get_all()

    async def for_visitor(self, visitor_id: int) -> List[TicketRecord]:
        return await self._tickets.get_by_visitor(visitor_id)

    async def set_state(self, ticket_id: int, label: str) -> str:
        """
        Moves a ticket to the state requested by the given label.

        :param ticket_id: The ticket to update.
        :param label: One of the keys of :data:`STATE_LABELS`.
        :return: A confirmation message for the visitor.
        :raises TicketNotFoundError: If the ticket does not exist.
        :raises TicketNotCancellableError: If a cancellation is requested outside the window.
        :raises UnknownTicketStateError: If the label is not recognised.
        """
        async with self._ticket_lock(ticket_id):
            ticket = await self._require(ticket_id)
            target = STATE_LABELS.get(label)

            if target is TicketState.CANCELLED:
                return await self._cancel(ticket)
            elif target is TicketState.PAID:
                return await self._pay(ticket)
            else:
                raise UnknownTicketStateError(label)

    async def check_validity(self, ticket_id: int) -> bool:
        """
        Checks a ticket at the gate. A paid ticket for today is valid,
        and is scanned by the check so it cannot be used twice.

        :raises TicketNotFoundError: If the ticket does not exist.
        """
        async with self._ticket_lock(ticket_id):
            ticket = await self._require(ticket_id)

            is_valid = (
                ticket.state is TicketState.PAID
                and same_calendar_day(self._clock(), ticket.visit_date, self._zone)
            )

            if is_valid:
                ticket.state = TicketState.SCANNED
                await self._tickets.save(ticket)
                logger.info("Scanned ticket %s", ticket.id)

            return is_valid

    async def total_revenue(self) -> Decimal:
        """The sum of the prices of the paid tickets. Scanned tickets are not counted."""
        tickets = await self._tickets.get_all()
        return sum((t.price for t in tickets if t.state is TicketState.PAID), Decimal(0))

    async def count_on(self, visit_date: datetime) -> int:
        """Counts the tickets booked for exactly the given date."""
        return len(await self._tickets.get_by_date(visit_date))

    @asynccontextmanager
    async def _ticket_lock(self, ticket_id: int):
        """Holds the lock on a ticket. The lock is dropped once nobody holds or waits on it."""
        lock = self._locks.setdefault(ticket_id, asyncio.Lock())
        self._lock_users[ticket_id] += 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[ticket_id] -= 1
            if not self._lock_users[ticket_id]:
                del self._lock_users[ticket_id]
                del self._locks[ticket_id]

    async def _require(self, ticket_id: int) -> TicketRecord:
        ticket = await self._tickets.get(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return ticket

    async def _cancel(self, ticket: TicketRecord) -> str:
        if ticket.state is TicketState.SCANNED:
            raise TicketNotCancellableError(f"Ticket {ticket.id} has already been used.")

        if elapsed_days(ticket.visit_date, self._clock()) > CANCELLATION_WINDOW_DAYS:
            raise TicketNotCancellableError(
                f"The {CANCELLATION_WINDOW_DAYS} day window to cancel ticket {ticket.id} has passed."
            )

        ticket.state = TicketState.CANCELLED
        await self._tickets.save(ticket)
        # todo email the visitor once a mailer is configured
        logger.info("Cancelled ticket %s, refunding %s", ticket.id, ticket.price)
        return f"Ticket {ticket.id} has been cancelled, you will be refunded {ticket.price}€."

    async def _pay(self, ticket: TicketRecord) -> str:
        if not ticket.state.can_become(TicketState.PAID):
            logger.warning("Ticket %s marked as paid from state %s", ticket.id, ticket.state.value)

        ticket.state = TicketState.PAID
        await self._tickets.save(ticket)
        logger.info("Ticket %s paid", ticket.id)
        return f"Ticket {ticket.id} has been paid."
