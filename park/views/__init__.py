"""
.. autoclasstree:: park.views

This package contains the park API for booking tickets,
registering visitors, and running the attractions.

API Conventions
---------------

The API conforms as best as possible to the REST standard. In short, the api must:

* Be ordered in terms of resources (nouns such as ticket)
* Accept and return JSON with snake_case key naming
* Support filtering (if necessary) using the query string

API Expected Responses
----------------------

The server responds with JSend formatted JSON to all GET, POST, and PATCH requests.
DELETE requests respond with a 204 content not found.
"""

import aiohttp_cors
from aiohttp.abc import Application

from park import logger
from .attractions import AttractionsView, AttractionView, AttractionStatusView
from .tickets import TicketsView, TicketRevenueView, TicketCountView, TicketView, TicketScanView
from .visitors import VisitorsView, VisitorView, VisitorTicketsView

views = [
    AttractionsView, AttractionView, AttractionStatusView,
    TicketsView, TicketRevenueView, TicketCountView, TicketView, TicketScanView,
    VisitorsView, VisitorView, VisitorTicketsView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
        view.enable_cors(cors)
