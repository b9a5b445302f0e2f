"""
Manager
---------------------------
"""
from tortoise import Model, fields


class Manager(Model):
    """
    A park manager. The id doubles as the bearer token
    the manager presents to the API.
    """

    id = fields.CharField(max_length=64, pk=True)
    first_name = fields.CharField(max_length=255)
    last_name = fields.CharField(max_length=255)
    email = fields.CharField(max_length=255, unique=True)

    def __str__(self):
        return f"[{self.id}] {self.first_name} {self.last_name} ({self.email})"
