"""
The entry point for the CLI tool
"""
import uvloop
from aiohttp import web

from park import logger
from park.app import build_app
from park.version import __version__, name


def run():
    """Installs uvloop and runs the app."""
    uvloop.install()
    logger.info(f'Starting {name} %s!', __version__)
    web.run_app(build_app())


if __name__ == '__main__':
    run()
