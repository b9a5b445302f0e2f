"""
Handles the persistence of tickets and visitors for the ticket lifecycle.
Currently has two implementations: in-memory and database backed.
"""

from .database import DatabaseTicketStore, DatabaseVisitorStore
from .memory import MemoryTicketStore, MemoryVisitorStore
from .persistent_store import TicketStore, VisitorStore
from .records import TicketRecord, VisitorRecord
