"""
Visitors
--------
"""
from typing import Optional, List

from tortoise.exceptions import IntegrityError

from park.models import Visitor


class VisitorExistsError(Exception):
    def __init__(self, errors):
        super().__init__()
        self.errors = errors


async def get_visitors() -> List[Visitor]:
    return await Visitor.all().order_by("id")


async def get_visitor(visitor_id: int) -> Optional[Visitor]:
    return await Visitor.filter(id=visitor_id).first()


async def create_visitor(first_name: str, last_name: str, email: str) -> Visitor:
    """
    Creates a new visitor.

    :raises VisitorExistsError: When a visitor with the given email already exists.
    """
    try:
        return await Visitor.create(first_name=first_name, last_name=last_name, email=email)
    except IntegrityError as error:
        if "unique" not in str(error).lower():
            raise
        raise VisitorExistsError({"email": "Visitor with that email already exists!"}) from error


async def delete_visitor(visitor: Visitor):
    await visitor.delete()
