"""
Attractions
-----------
"""
from typing import Optional, List

from park.models import Attraction


async def get_attractions(*, is_open: Optional[bool] = None) -> List[Attraction]:
    """
    Gets the attractions in the park.

    :param is_open: Only get the open (or closed) attractions.
    """
    query = Attraction.all()

    if is_open is not None:
        query = query.filter(is_open=is_open)

    return await query.order_by("id")


async def get_attraction(attraction_id: int) -> Optional[Attraction]:
    return await Attraction.filter(id=attraction_id).first()


async def create_attraction(name: str, is_open: bool = False) -> Attraction:
    return await Attraction.create(name=name, is_open=is_open)


async def set_attraction_open(attraction: Attraction, is_open: bool) -> Attraction:
    attraction.is_open = is_open
    await attraction.save()
    return attraction


async def delete_attraction(attraction: Attraction):
    await attraction.delete()
