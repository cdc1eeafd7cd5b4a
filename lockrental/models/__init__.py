"""
The models package contains all the models used by the rental service.

.. autoclasstree:: lockrental.models
"""

from .lock import Lock
from .rental import Rental
from .station import Station
