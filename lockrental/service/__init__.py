"""
.. autoclasstree:: lockrental.service

The service layer for the system. Acts as the internal API.
Whatever books and opens locks (an app backend, a kiosk) should
use the service layer to implement its logic.

The service layer implements the use cases for the system, such
that they may be reused by any program that needs to access it.
It is designed to represent the business logic.
"""

from .lock_status import LockStatus, LockStatusValidator, RowLockingStatusValidator
from .lock_transitioner import LockStateTransitioner, LockTransition
from .manager.rental_manager import EndRentalOrchestrator, EndRentalOutcome, EndRentalResult
from .rental_finalizer import RentalFinalizer
from .secret_releaser import LockSecrets, SecretReleaser
