from .base import Base
from .definitions import RoleRow, UserRow

__all__ = ["Base", "RoleRow", "UserRow"]
