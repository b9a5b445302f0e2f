"""
Visitor
---------------------------
"""
from tortoise import Model, fields


class Visitor(Model):
    """
    Represents a visitor of the park. A visitor owns their tickets.
    """

    id = fields.IntField(pk=True)
    first_name = fields.CharField(max_length=255)
    last_name = fields.CharField(max_length=255)
    email = fields.CharField(max_length=255, unique=True)

    def __str__(self):
        return f"[{self.id}] {self.first_name} {self.last_name} ({self.email})"
