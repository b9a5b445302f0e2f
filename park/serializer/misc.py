"""
Misc Serializers
----------------

Schemas for the request bodies and query strings that don't map onto a model.
"""
from marshmallow import Schema, EXCLUDE
from marshmallow.fields import String, DateTime, Boolean


class TicketStateChangeSchema(Schema):
    """The label of the state the ticket should move to, for example ``Paid`` or ``Cancelled``."""
    state = String(required=True)


class TicketDateQuerySchema(Schema):
    """The query string of the ticket count route."""

    class Meta:
        unknown = EXCLUDE

    date = DateTime(required=True)


class AttractionQuerySchema(Schema):

    class Meta:
        unknown = EXCLUDE

    open = Boolean()
