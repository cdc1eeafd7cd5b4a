"""
Exceptions
----------

The errors raised inside the service layer. The end rental
orchestrator converts them into a failed result for its caller.
"""


class LockVanishedError(Exception):
    """Raised when a lock row does not exist (anymore) when it is read or mutated."""

    def __init__(self, lock_id):
        super().__init__(f"Lock {lock_id} does not exist.")
        self.lock_id = lock_id


class TransactionConflictError(Exception):
    """Raised when the lock changed holder underneath a running transaction."""

    def __init__(self, lock_id):
        super().__init__(f"Lock {lock_id} was modified concurrently.")
        self.lock_id = lock_id


class RentalStateError(ValueError):
    """Raised when a lock has a holder without a start time or vice versa."""

    def __init__(self, lock_id):
        super().__init__(f"Lock {lock_id} must have both a user and a start time, or neither.")
        self.lock_id = lock_id


class ImmutableRentalError(Exception):
    """Raised when something tries to change or remove a completed rental."""

    def __init__(self, rental_id):
        super().__init__(f"Rental {rental_id} is append-only.")
        self.rental_id = rental_id
