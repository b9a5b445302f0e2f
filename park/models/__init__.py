"""
The models package contains all the database models used on the server.

.. autoclasstree:: park.models
"""

from .attraction import Attraction
from .manager import Manager
from .ticket import Ticket, TicketState
from .visitor import Visitor
