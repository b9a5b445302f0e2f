"""
Attraction Related Views
------------------------

Handles all the attraction CRUD, and the opening and closing of attractions.
"""
from http import HTTPStatus

from aiohttp import web
from marshmallow import ValidationError
from marshmallow.fields import String

from park.models import Attraction
from park.permissions import UserIsManager, requires
from park.serializer import JSendSchema, JSendStatus, Many, expects, returns
from park.serializer.misc import AttractionQuerySchema
from park.serializer.models import AttractionSchema
from park.service.access.attractions import get_attractions, get_attraction, create_attraction, \
    set_attraction_open, delete_attraction
from park.views.base import BaseView
from park.views.decorators import match_getter

ATTRACTION_IDENTIFIER_REGEX = r"\d{1,18}"


class AttractionsView(BaseView):
    """
    Gets or adds to the list of attractions.
    """
    url = "/attractions"
    name = "attractions"

    @returns(
        invalid_query=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        attractions=JSendSchema.of(attractions=Many(AttractionSchema())),
    )
    async def get(self):
        """
        Lists the attractions in the park. Pass ``?open=true`` or
        ``?open=false`` to only get the open or closed ones.
        """
        try:
            query = AttractionQuerySchema().load(self.request.query)
        except ValidationError as error:
            return "invalid_query", {
                "status": JSendStatus.FAIL,
                "data": {"message": "The request did not validate properly.", "errors": error.messages}
            }

        return "attractions", {
            "status": JSendStatus.SUCCESS,
            "data": {"attractions": await get_attractions(is_open=query.get("open"))}
        }

    @requires(UserIsManager())
    @expects(AttractionSchema(only=("name", "is_open")))
    @returns(JSendSchema.of(attraction=AttractionSchema()), HTTPStatus.CREATED)
    async def post(self):
        attraction = await create_attraction(**self.request["data"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"attraction": attraction}
        }


class AttractionView(BaseView):
    """
    Gets or deletes a single attraction.
    """
    url = f"/attractions/{{id:{ATTRACTION_IDENTIFIER_REGEX}}}"
    name = "attraction"
    with_attraction = match_getter(get_attraction, 'attraction', attraction_id='id')

    @with_attraction
    @returns(JSendSchema.of(attraction=AttractionSchema()))
    async def get(self, attraction: Attraction):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"attraction": attraction}
        }

    @with_attraction
    @requires(UserIsManager())
    async def delete(self, attraction: Attraction):
        await delete_attraction(attraction)
        raise web.HTTPNoContent


class AttractionStatusView(BaseView):
    """
    Opens or closes an attraction.
    """
    url = f"/attractions/{{id:{ATTRACTION_IDENTIFIER_REGEX}}}/{{action}}"
    name = "attraction_status"
    with_attraction = match_getter(get_attraction, 'attraction', attraction_id='id')
    actions = {"open": True, "close": False}

    @with_attraction
    @requires(UserIsManager())
    @returns(
        invalid_action=(JSendSchema(), HTTPStatus.NOT_FOUND),
        updated=JSendSchema.of(attraction=AttractionSchema(), action=String()),
    )
    async def patch(self, attraction: Attraction):
        """
        Changes whether an attraction is open, in one of two ways:

        - ``PATCH /attractions/1/open`` opens the attraction
        - ``PATCH /attractions/1/close`` closes the attraction
        """
        action = self.request.match_info["action"]
        if action not in self.actions:
            return "invalid_action", {
                "status": JSendStatus.FAIL,
                "data": {
                    "message": f"Invalid action. Pick between {', '.join(self.actions)}",
                    "action": action
                }
            }

        attraction = await set_attraction_open(attraction, self.actions[action])
        return "updated", {
            "status": JSendStatus.SUCCESS,
            "data": {"attraction": attraction, "action": action}
        }
