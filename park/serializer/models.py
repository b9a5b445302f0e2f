"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema
from marshmallow.fields import Integer, Boolean, String, Email, DateTime, Decimal

from park.models.ticket import TicketState
from .fields import EnumField


class TicketSchema(Schema):
    """The schema corresponding to a :class:`~park.store.records.TicketRecord`."""

    id = Integer()
    visit_date = DateTime(required=True)
    price = Decimal(required=True, places=2, as_string=True)
    state = EnumField(TicketState)
    visitor_id = Integer(required=True, allow_none=True)


class VisitorSchema(Schema):
    """The schema corresponding to the :class:`~park.models.visitor.Visitor` model."""

    id = Integer()
    first_name = String(required=True)
    last_name = String(required=True)
    email = Email(required=True)


class AttractionSchema(Schema):
    id = Integer()
    name = String(required=True)
    is_open = Boolean()
