"""
Database
--------

Opens and closes the tortoise connections used by the service layer.
"""

from tortoise import Tortoise
from tortoise.exceptions import OperationalError

from lockrental import logger
from lockrental.config import database_url
from lockrental.version import __version__, name

MODELS = {'models': ['lockrental.models']}


async def initialize_database(db_url: str = None, *, generate_schemas=True, create_db=False):
    """Initializes and generates the schema for our database."""
    db_url = db_url if db_url is not None else database_url
    logger.info("Starting %s %s", name, __version__)
    await Tortoise.init(db_url=db_url, modules=MODELS, _create_db=create_db)

    if generate_schemas:
        try:
            await Tortoise.generate_schemas(safe=True)
        except OperationalError:
            logger.debug("Schema already exists")


async def close_database_connections():
    """Closes the open database connections."""
    await Tortoise.close_connections()
