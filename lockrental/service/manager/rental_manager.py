"""
Rental Manager
--------------

This module is what ends rentals in the system.

Responsibilities
================

Ending a rental is a single transaction that:

- checks the caller actually holds the lock
- bills the rental and writes it to the append-only history
- reads the hardware secrets needed to open the lock
- releases the lock, or removes it if it was retired

The order matters: the secrets are read before the lock may be removed, and
the rental is written before the lock forgets who held it. A transaction that
fails part way leaves no trace.
"""

import asyncio
from datetime import datetime
from enum import Enum
from typing import Callable, NamedTuple, Optional, Union
from uuid import UUID

from tortoise import timezone
from tortoise.transactions import in_transaction

from lockrental import logger
from lockrental.config import lock_wait_timeout
from lockrental.exceptions import LockVanishedError, TransactionConflictError
from lockrental.models import Lock, Rental
from lockrental.models.util import resolve_id
from lockrental.service.lock_status import LockStatus, LockStatusValidator, RowLockingStatusValidator
from lockrental.service.lock_transitioner import LockStateTransitioner
from lockrental.service.rental_finalizer import RentalFinalizer
from lockrental.service.secret_releaser import LockSecrets, SecretReleaser


class EndRentalOutcome(str, Enum):
    SUCCESS = "success"
    NOT_HELD = "not_held"
    """The lock does not exist, or is not rented by the caller."""
    LOCK_VANISHED = "lock_vanished"
    CONFLICT = "conflict"
    TIMED_OUT = "timed_out"

    @property
    def retryable(self) -> bool:
        return self in (EndRentalOutcome.CONFLICT, EndRentalOutcome.TIMED_OUT)


class EndRentalResult(NamedTuple):
    outcome: EndRentalOutcome
    secrets: Optional[LockSecrets] = None
    rental: Optional[Rental] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is EndRentalOutcome.SUCCESS

    @classmethod
    def failure(cls, outcome: EndRentalOutcome) -> "EndRentalResult":
        return cls(outcome)


class EndRentalOrchestrator:
    """
    Ends rentals atomically.

    The collaborators are injected so that each step may be replaced,
    for example by a validator that does not take row locks.
    """

    def __init__(self, validator: LockStatusValidator = None, finalizer: RentalFinalizer = None,
                 releaser: SecretReleaser = None, transitioner: LockStateTransitioner = None, *,
                 clock: Callable[[], datetime] = timezone.now, timeout: float = lock_wait_timeout,
                 connection_name: str = None):
        self.validator = validator if validator is not None else RowLockingStatusValidator()
        self.finalizer = finalizer if finalizer is not None else RentalFinalizer()
        self.releaser = releaser if releaser is not None else SecretReleaser()
        self.transitioner = transitioner if transitioner is not None else LockStateTransitioner()

        self.clock = clock
        self.timeout = timeout
        """How long (in seconds) to wait on the transaction before giving up."""
        self.connection_name = connection_name

    async def end_rental(self, user_id: str, lock: Union[Lock, UUID, str]) -> EndRentalResult:
        """
        Ends the user's rental of the given lock.

        :param user_id: The (already authenticated) user ending the rental.
        :param lock: The lock or its id.
        :return: The secrets and the billed rental on success, otherwise just the reason for failure.
        :raises ValueError: If the lock id is malformed.
        """
        lock_id = resolve_id(lock)

        try:
            result = await asyncio.wait_for(self._end_rental(user_id, lock_id), self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Ending rental of lock %s timed out after %ss", lock_id, self.timeout)
            return EndRentalResult.failure(EndRentalOutcome.TIMED_OUT)
        except LockVanishedError:
            logger.warning("Lock %s vanished while ending its rental", lock_id)
            return EndRentalResult.failure(EndRentalOutcome.LOCK_VANISHED)
        except TransactionConflictError:
            logger.warning("Lock %s was modified while ending its rental", lock_id)
            return EndRentalResult.failure(EndRentalOutcome.CONFLICT)

        if result.succeeded:
            logger.info("User %s ended rental %s of lock %s", user_id, result.rental.id, lock_id)
        else:
            logger.info("User %s does not hold lock %s", user_id, lock_id)

        return result

    async def _end_rental(self, user_id: str, lock_id: UUID) -> EndRentalResult:
        async with in_transaction(self.connection_name) as connection:
            status = await self.validator.get_lock_status(user_id, lock_id, using_db=connection)
            if status != LockStatus.HELD:
                return EndRentalResult.failure(EndRentalOutcome.NOT_HELD)

            now = self.clock()
            rental, snapshot = await self.finalizer.finalize(lock_id, now, using_db=connection)
            secrets = await self.releaser.release(lock_id, using_db=connection)
            await self.transitioner.transition(lock_id, holder=user_id, retired=snapshot.deleted,
                                               using_db=connection)

        return EndRentalResult(EndRentalOutcome.SUCCESS, secrets, rental)
