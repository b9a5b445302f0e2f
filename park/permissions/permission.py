"""
Permission
----------
"""

from abc import ABC, abstractmethod

from aiohttp.web_urldispatcher import View


class RoutePermissionError(Exception):

    def __init__(self, *messages):
        super().__init__(*messages)
        self.messages = messages

    def __str__(self):
        """Prints a friendly description of the error."""
        return ", ".join(m.lower().strip(".") for m in self.messages)

    def serialize(self):
        return list(self.messages)


class Permission(ABC):
    """
    The base class for permissions.
    """

    @abstractmethod
    async def __call__(self, view: View, **kwargs) -> None:
        """
        Evaluates the permission object.

        :returns: None
        :raises RoutePermissionError: If the permission failed.
        """
