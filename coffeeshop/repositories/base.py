"""Interface for the storage capability consumed by the UserService."""

import abc
from collections.abc import Sequence

from coffeeshop.schemas import User


class UserRepository(abc.ABC):
    """Storage operations for users.

    Lookups return None when nothing matches; absence is never an error.
    Implementations own id assignment and the order of returned lists.
    """

    @abc.abstractmethod
    def authenticate(self, email: str, password: str) -> User | None:
        """Return the user whose email and password both match exactly, if any."""

    @abc.abstractmethod
    def create(self, user: User) -> User:
        """Persist a new user and return it with its assigned id."""

    @abc.abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Retrieves a User by their primary ID."""

    @abc.abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Retrieves a User by username."""

    @abc.abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Retrieves a User by email."""

    @abc.abstractmethod
    def update(self, user: User) -> None:
        """Overwrite the stored user identified by ``user.id``.

        Raises:
            NotFoundError: If no user with that id exists.
        """

    @abc.abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove a user.

        Returns:
            bool: True if a user was removed, False if none had that id.
        """

    @abc.abstractmethod
    def get_all(self) -> Sequence[User]:
        """Return every stored user."""

    @abc.abstractmethod
    def get_by_role(self, role_id: int) -> list[User]:
        """Return the users holding the given role."""
