"""
JSend Schema
------------

Every response of the park API is wrapped in a `JSend`_ envelope:
``success`` with the data, ``fail`` with a message for the caller,
or ``error`` when the server got something wrong.

.. _`JSend`: https://github.com/omniti-labs/jsend
"""

from enum import Enum

from marshmallow import Schema, fields, validates_schema, ValidationError
from marshmallow.fields import Field

from .fields import EnumField


class JSendStatus(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


class JSendSchema(Schema):
    """The envelope. ``data`` is passed through as-is unless narrowed with :meth:`of`."""

    status = EnumField(JSendStatus, required=True)
    data = fields.Dict()
    message = fields.String()

    @validates_schema
    def assert_fields(self, data, **kwargs):
        """
        Success and fail need ``data``, and a fail must tell the caller what went
        wrong in ``data["message"]``. An error needs a top level ``message``.
        """
        status = data["status"]
        if status is not JSendStatus.ERROR and "data" not in data:
            raise ValidationError(f"A {status.value} response must include data.")
        if status is JSendStatus.FAIL and "message" not in data["data"]:
            raise ValidationError("A fail response must include a message for the caller.")
        if status is JSendStatus.ERROR and "message" not in data:
            raise ValidationError("An error response must include a message.")

    @staticmethod
    def of(**kwargs):
        """
        Narrows ``data`` to the given fields, so that the tickets in
        ``JSendSchema.of(ticket=TicketSchema())`` are dumped and loaded
        through the ticket schema. Schemas are nested, fields are used as given.
        """
        DataSchema = type('DataSchema', (Schema,), {
            field_name: fields.Nested(schema) if not isinstance(schema, Field) else schema
            for field_name, schema in kwargs.items()
        })

        class TypedJSendSchema(JSendSchema):
            data = fields.Nested(DataSchema)

        return TypedJSendSchema()
