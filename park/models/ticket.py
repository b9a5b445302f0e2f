"""
Ticket
---------------------------
"""
from enum import Enum
from typing import FrozenSet

from tortoise import Model, fields


class TicketState(str, Enum):
    """
    The lifecycle states of a ticket.

    A ticket starts out reserved, and ends either cancelled or scanned at the gate.
    """

    RESERVED = "RESERVED"
    PAID = "PAYE"
    CANCELLED = "ANNULE"
    SCANNED = "SCANNE"

    @staticmethod
    def initial() -> "TicketState":
        return TicketState.RESERVED

    def successors(self) -> FrozenSet["TicketState"]:
        """The states a ticket in this state may move to."""
        return _TRANSITIONS[self]

    def can_become(self, target: "TicketState") -> bool:
        return target in self.successors()


_TRANSITIONS = {
    TicketState.RESERVED: frozenset({TicketState.PAID, TicketState.CANCELLED}),
    TicketState.PAID: frozenset({TicketState.CANCELLED, TicketState.SCANNED}),
    TicketState.CANCELLED: frozenset(),
    TicketState.SCANNED: frozenset(),
}


class Ticket(Model):
    id = fields.IntField(pk=True)
    visitor = fields.ForeignKeyField(
        "models.Visitor", related_name="tickets", null=True, on_delete=fields.SET_NULL
    )
    visit_date = fields.DatetimeField(index=True)
    price = fields.DecimalField(max_digits=10, decimal_places=2)
    """The price of the ticket (in euros)."""

    state = fields.CharEnumField(TicketState, default=TicketState.RESERVED)
    made_at = fields.DatetimeField(auto_now_add=True)

    def __str__(self):
        return f"[{self.id}] {self.state.value} on {self.visit_date:%Y-%m-%d}"
