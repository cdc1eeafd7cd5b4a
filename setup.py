import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='lockrental',
    version='1.0.0',
    license='MIT',
    description='Ends physical lock rentals: billing, secret release and lock cleanup in one transaction.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'tortoise-orm>=0.19,<1.0',
        'shapely',
    ],
    extras_require={
        'test': [
            'pytest',
            'aiohttp',
            'Faker',
            'asyncpg',
        ],
    },
)
