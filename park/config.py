import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise connection string for the park database."""

api_root = os.getenv("API_ROOT", "/api/v1")
"""The base url for the api."""

sentry_dsn = os.getenv("SENTRY_DSN")
"""The sentry DSN. Error tracking is disabled when unset."""

park_timezone = os.getenv("PARK_TIMEZONE")
"""The IANA timezone the park operates in. Calendar days are compared in UTC when unset."""
