"""
Base
----

Every view in the park API extends :class:`BaseView`, which knows
how to mount itself on the app and gives it the ticket manager.
"""
from aiohttp.abc import Application
from aiohttp.web import View, AbstractRoute
from aiohttp_cors import CorsConfig, CorsViewMixin

from park.service.manager import TicketManager


class BaseView(View, CorsViewMixin):
    """
    A class-based view mounted at ``base + url`` under the route ``name``.

    CORS falls back to the defaults given to :func:`aiohttp_cors.setup`.
    """

    url: str
    name: str
    route: AbstractRoute
    ticket_manager: TicketManager

    @classmethod
    def register_route(cls, app: Application, base: str):
        """Mounts the view and hands it the app's ticket manager."""
        cls.route = app.router.add_view(base + cls.url, cls, name=cls.name)
        cls.ticket_manager = app["ticket_manager"]

    @classmethod
    def enable_cors(cls, cors: CorsConfig):
        """Enables CORS on the view. The route must be registered first."""
        cors.add(cls.route, webview=True)
