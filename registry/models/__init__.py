from .citizen import Citizen
from .user import StaffUser

__all__ = ["Citizen", "StaffUser"]
