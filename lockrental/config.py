import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the service."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise connection string for the database."""

lock_wait_timeout = float(os.getenv("LOCK_WAIT_TIMEOUT", "5"))
"""How long (in seconds) an end rental transaction may wait before giving up."""
