"""
Ticket Related Views
--------------------

Handles booking, paying for, cancelling, and scanning tickets,
as well as the reports managers use to keep track of sales.
"""
from http import HTTPStatus

from aiohttp import web
from marshmallow import ValidationError
from marshmallow.fields import Boolean, Decimal, Integer, DateTime, String

from park.permissions import UserIsManager, requires
from park.serializer import JSendSchema, JSendStatus, Many, expects, returns
from park.serializer.misc import TicketStateChangeSchema, TicketDateQuerySchema
from park.serializer.models import TicketSchema
from park.service.manager import TicketNotFoundError, TicketNotCancellableError, UnknownTicketStateError
from park.views.base import BaseView

TICKET_IDENTIFIER_REGEX = r"\d{1,18}"


def _missing(ticket_id):
    return "missing", {
        "status": JSendStatus.FAIL,
        "data": {"message": f"Ticket {ticket_id} does not exist."}
    }


class TicketsView(BaseView):
    """
    Gets or adds to the list of tickets.
    """
    url = "/tickets"
    name = "tickets"

    @requires(UserIsManager())
    @expects(None)
    @returns(JSendSchema.of(tickets=Many(TicketSchema())))
    async def get(self):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"tickets": await self.ticket_manager.all()}
        }

    @expects(TicketSchema(only=("visit_date", "price", "visitor_id")))
    @returns(JSendSchema.of(ticket=TicketSchema()), HTTPStatus.CREATED)
    async def post(self):
        """
        Books a ticket for the given visit date. The ticket starts out reserved,
        and must be paid for before it can be used at the gate.
        """
        ticket = await self.ticket_manager.create(**self.request["data"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"ticket": ticket}
        }


class TicketRevenueView(BaseView):
    """
    Gets the revenue from the tickets that have been paid for.
    """
    url = "/tickets/revenue"
    name = "ticket_revenue"

    @requires(UserIsManager())
    @returns(JSendSchema.of(revenue=Decimal(places=2, as_string=True)))
    async def get(self):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"revenue": await self.ticket_manager.total_revenue()}
        }


class TicketCountView(BaseView):
    """
    Counts the tickets booked for a given date.
    """
    url = "/tickets/count"
    name = "ticket_count"

    @requires(UserIsManager())
    @returns(
        invalid_query=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        counted=JSendSchema.of(date=DateTime(), count=Integer()),
    )
    async def get(self):
        """
        Counts the tickets for the instant given in the ``date`` query parameter,
        for example ``GET /tickets/count?date=2019-05-01T10:00:00+00:00``.
        """
        try:
            query = TicketDateQuerySchema().load(self.request.query)
        except ValidationError as error:
            return "invalid_query", {
                "status": JSendStatus.FAIL,
                "data": {"message": "The request did not validate properly.", "errors": error.messages}
            }

        return "counted", {
            "status": JSendStatus.SUCCESS,
            "data": {"date": query["date"], "count": await self.ticket_manager.count_on(query["date"])}
        }


class TicketView(BaseView):
    """
    Gets, updates or deletes a single ticket.
    """
    url = f"/tickets/{{id:{TICKET_IDENTIFIER_REGEX}}}"
    name = "ticket"

    @property
    def ticket_id(self) -> int:
        return int(self.request.match_info["id"])

    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        found=JSendSchema.of(ticket=TicketSchema()),
    )
    async def get(self):
        ticket = await self.ticket_manager.get(self.ticket_id)
        if ticket is None:
            return _missing(self.ticket_id)

        return "found", {
            "status": JSendStatus.SUCCESS,
            "data": {"ticket": ticket}
        }

    @expects(TicketStateChangeSchema())
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        not_cancellable=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        unknown_state=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        updated=JSendSchema.of(ticket=TicketSchema(), message=String()),
    )
    async def patch(self):
        """
        Moves the ticket to a new state. The body names the new state,
        either ``{"state": "Paid"}`` or ``{"state": "Cancelled"}``.
        """
        try:
            message = await self.ticket_manager.set_state(self.ticket_id, self.request["data"]["state"])
        except TicketNotFoundError:
            return _missing(self.ticket_id)
        except TicketNotCancellableError as error:
            return "not_cancellable", {
                "status": JSendStatus.FAIL,
                "data": {"message": str(error)}
            }
        except UnknownTicketStateError as error:
            return "unknown_state", {
                "status": JSendStatus.FAIL,
                "data": {"message": str(error), "label": error.label}
            }

        return "updated", {
            "status": JSendStatus.SUCCESS,
            "data": {"ticket": await self.ticket_manager.get(self.ticket_id), "message": message}
        }

    @requires(UserIsManager())
    @returns(missing=(JSendSchema(), HTTPStatus.NOT_FOUND))
    async def delete(self):
        ticket = await self.ticket_manager.get(self.ticket_id)
        if ticket is None:
            return _missing(self.ticket_id)

        await self.ticket_manager.delete(ticket)
        raise web.HTTPNoContent


class TicketScanView(BaseView):
    """
    Checks a ticket at the park gate.
    """
    url = f"/tickets/{{id:{TICKET_IDENTIFIER_REGEX}}}/scan"
    name = "ticket_scan"

    @requires(UserIsManager())
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        checked=JSendSchema.of(valid=Boolean()),
    )
    async def post(self):
        """
        A paid ticket for today is valid. Checking a valid ticket
        uses it up, so the same ticket won't be let in twice.
        """
        ticket_id = int(self.request.match_info["id"])
        try:
            is_valid = await self.ticket_manager.check_validity(ticket_id)
        except TicketNotFoundError:
            return _missing(ticket_id)

        return "checked", {
            "status": JSendStatus.SUCCESS,
            "data": {"valid": is_valid}
        }
