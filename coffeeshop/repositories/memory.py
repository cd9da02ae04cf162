"""In-memory implementation of the UserRepository interface."""

from collections.abc import Sequence
from itertools import count

from coffeeshop.exceptions import NotFoundError
from coffeeshop.repositories.base import UserRepository
from coffeeshop.schemas import User


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of the UserRepository interface.

    This implementation is intended for testing and development purposes only.
    It does not persist data. Stored users are copied on the way in and out so
    callers cannot mutate the repository's state behind its back.
    """

    def __init__(self, users: Sequence[User] = ()) -> None:
        self._users: dict[int, User] = {}  # id: user
        self._ids = count(1)
        for user in users:
            self.create(user)

    def authenticate(self, email: str, password: str) -> User | None:
        return self._find(lambda u: u.email == email and u.password == password)

    def create(self, user: User) -> User:
        user_id = next(self._ids)
        stored = user.model_copy(update={"id": user_id})
        self._users[user_id] = stored
        return stored.model_copy()

    def get_by_id(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def get_by_username(self, username: str) -> User | None:
        return self._find(lambda u: u.username == username)

    def get_by_email(self, email: str) -> User | None:
        return self._find(lambda u: u.email == email)

    def update(self, user: User) -> None:
        if user.id not in self._users:
            raise NotFoundError(user.id)
        # None fields keep their stored value, matching the SQL backend
        self._users[user.id] = self._users[user.id].model_copy(update=user.model_dump(exclude_none=True))

    def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None

    def get_all(self) -> list[User]:
        return [self._users[key].model_copy() for key in sorted(self._users)]

    def get_by_role(self, role_id: int) -> list[User]:
        return [user for user in self.get_all() if user.role_id == role_id]

    def _find(self, predicate) -> User | None:
        match = next((u for _, u in sorted(self._users.items()) if predicate(u)), None)
        return match.model_copy() if match else None
