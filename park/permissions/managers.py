from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from park.permissions.permission import RoutePermissionError, Permission
from park.service.access.managers import get_manager


def bearer_token(request: Request) -> str:
    """
    Gets the token from the Authorization header of a request.

    :raises RoutePermissionError: When the header is missing or malformed.
    """
    if "Authorization" not in request.headers:
        raise RoutePermissionError("No manager token was included in the Authorization header.")

    if not request.headers["Authorization"].startswith("Bearer "):
        raise RoutePermissionError("The Authorization header must be of the format \"Bearer $TOKEN\".")

    return request.headers["Authorization"][7:]


class UserIsManager(Permission):
    """Asserts that the request was made by a park manager, and stores them on the request."""

    async def __call__(self, view: View, **kwargs):
        token = bearer_token(view.request)
        manager = await get_manager(token)

        if manager is None:
            raise RoutePermissionError("The supplied token doesn't have manager rights.")

        view.request["manager"] = manager
