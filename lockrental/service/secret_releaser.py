"""
Secret Releaser
---------------

Reads the hardware credentials needed to physically open a lock.
"""
from typing import NamedTuple, Union
from uuid import UUID

from tortoise.backends.base.client import BaseDBAsyncClient

from lockrental.exceptions import LockVanishedError
from lockrental.models import Lock
from lockrental.models.util import resolve_id


class LockSecrets(NamedTuple):
    url: str
    secret: bytes
    mac: str


class SecretReleaser:

    async def release(self, lock: Union[Lock, UUID, str], *, using_db: BaseDBAsyncClient = None) -> LockSecrets:
        """
        Gets the secrets for the given lock.

        :raises LockVanishedError: When the lock no longer exists.
        """
        lock_id = resolve_id(lock)
        found = await Lock.filter(id=lock_id).using_db(using_db).first()

        if found is None:
            raise LockVanishedError(lock_id)

        return LockSecrets(found.url, bytes(found.secret), found.mac)
