"""
App
-----
"""
from datetime import timezone
from zoneinfo import ZoneInfo

import sentry_sdk
from aiohttp import web
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from park import logger
from park.config import api_root, database_url, park_timezone, sentry_dsn, server_mode
from park.service.manager import TicketManager
from park.signals import register_signals
from park.store import DatabaseTicketStore, DatabaseVisitorStore
from park.version import __version__, name
from park.views import register_views


def build_app(db_uri=None):
    """Sets up the app, its ticket manager and database, and registers the views."""
    app = web.Application()

    zone = ZoneInfo(park_timezone) if park_timezone else timezone.utc
    app['ticket_manager'] = TicketManager(DatabaseTicketStore(), DatabaseVisitorStore(), zone=zone)
    app['database_uri'] = db_uri if db_uri is not None else database_url

    register_signals(app)
    register_views(app, api_root)

    # set up sentry exception tracking
    if server_mode != "development" and sentry_dsn:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"{name}@{__version__}",
            integrations=[AioHttpIntegration()],
        )

    return app
