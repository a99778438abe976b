from .user import User
from .filter import UserFilter

__all__ = ["User", "UserFilter"]
