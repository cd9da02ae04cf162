from .base import UserRepository
from .memory import InMemoryUserRepository
from .user import SqlAlchemyUserRepository

__all__ = ["InMemoryUserRepository", "SqlAlchemyUserRepository", "UserRepository"]
