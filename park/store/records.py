"""
The plain records exchanged between the stores and the service layer.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

import attr

from park.models.ticket import TicketState


@attr.s(auto_attribs=True)
class TicketRecord:

    visit_date: datetime
    price: Decimal
    state: TicketState = TicketState.RESERVED
    visitor_id: Optional[int] = None
    id: Optional[int] = None


@attr.s(auto_attribs=True, frozen=True)
class VisitorRecord:

    id: int
    first_name: str
    last_name: str
    email: str
