"""
Visitor Related Views
---------------------

Handles all the visitor CRUD, and lists the tickets a visitor has booked.
"""
from http import HTTPStatus

from aiohttp import web

from park.models import Visitor
from park.permissions import UserIsManager, requires
from park.serializer import JSendSchema, JSendStatus, Many, expects, returns
from park.serializer.models import VisitorSchema, TicketSchema
from park.service.access.visitors import get_visitors, get_visitor, create_visitor, delete_visitor, \
    VisitorExistsError
from park.views.base import BaseView
from park.views.decorators import match_getter

VISITOR_IDENTIFIER_REGEX = r"\d{1,18}"


class VisitorsView(BaseView):
    """
    Gets or adds to the list of visitors.
    """
    url = "/visitors"
    name = "visitors"

    @requires(UserIsManager())
    @expects(None)
    @returns(JSendSchema.of(visitors=Many(VisitorSchema())))
    async def get(self):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"visitors": await get_visitors()}
        }

    @expects(VisitorSchema(only=("first_name", "last_name", "email")))
    @returns(
        visitor_exists=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        created=(JSendSchema.of(visitor=VisitorSchema()), HTTPStatus.CREATED),
    )
    async def post(self):
        """
        Registers a visitor with the park. Each email address may only be registered once.
        """
        try:
            visitor = await create_visitor(**self.request["data"])
        except VisitorExistsError as error:
            return "visitor_exists", {
                "status": JSendStatus.FAIL,
                "data": {"message": "Could not register the visitor.", "errors": error.errors}
            }

        return "created", {
            "status": JSendStatus.SUCCESS,
            "data": {"visitor": visitor}
        }


class VisitorView(BaseView):
    """
    Gets or deletes a single visitor.
    """
    url = f"/visitors/{{id:{VISITOR_IDENTIFIER_REGEX}}}"
    name = "visitor"
    with_visitor = match_getter(get_visitor, 'visitor', visitor_id='id')

    @with_visitor
    @expects(None)
    @returns(JSendSchema.of(visitor=VisitorSchema()))
    async def get(self, visitor: Visitor):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"visitor": visitor}
        }

    @with_visitor
    @requires(UserIsManager())
    async def delete(self, visitor: Visitor):
        """Removes the visitor. Their tickets are kept, but no longer have an owner."""
        await delete_visitor(visitor)
        raise web.HTTPNoContent


class VisitorTicketsView(BaseView):
    """
    Gets the tickets a visitor has booked.
    """
    url = f"/visitors/{{id:{VISITOR_IDENTIFIER_REGEX}}}/tickets"
    name = "visitor_tickets"
    with_visitor = match_getter(get_visitor, 'visitor', visitor_id='id')

    @with_visitor
    @returns(JSendSchema.of(tickets=Many(TicketSchema())))
    async def get(self, visitor: Visitor):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"tickets": await self.ticket_manager.for_visitor(visitor.id)}
        }
