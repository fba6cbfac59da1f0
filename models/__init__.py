"""
models/ - Domain Models
=======================
Plain dataclasses mapped 1:1 from store rows, plus search criteria.
Monetary fields are integer cents.
"""

from models.property import Property
from models.reservation import Reservation
from models.search import SearchCriteria
from models.user import User

__all__ = ["Property", "Reservation", "SearchCriteria", "User"]
