from .ticket_manager import (
    TicketManager, TicketError, TicketNotFoundError, TicketNotCancellableError, UnknownTicketStateError
)
