import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='park-server',
    version='1.0.0',
    license='MIT',
    description='Ticketing and attraction server for a theme park.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.9',
    install_requires=[
        'aiohttp>=3.8',
        'aiohttp-cors',
        'attrs',
        'marshmallow>=3,<4',
        'marshmallow-jsonschema',
        'sentry-sdk',
        'tortoise-orm>=0.20,<1.0',
        'uvloop',
    ],
    extras_require={
        'test': [
            'faker',
            'pytest',
            'pytest-aiohttp',
            'pytest-asyncio',
        ],
    },
    entry_points={
        'console_scripts': ['park=park.cli:run'],
    },
)
