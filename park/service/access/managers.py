from typing import Optional

from park.models import Manager


async def get_manager(manager_id: str) -> Optional[Manager]:
    return await Manager.filter(id=manager_id).first()
