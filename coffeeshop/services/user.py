import logging
from collections.abc import Sequence

from coffeeshop.exceptions import ConflictError, InvalidArgumentError, NotFoundError, NullArgumentError
from coffeeshop.repositories import UserRepository
from coffeeshop.schemas import User

logger = logging.getLogger(__name__)


class UserService:
    """
    Validation facade over a UserRepository.

    Holds no state of its own: every call checks its arguments, runs at most two
    uniqueness lookups, then forwards to the repository and returns its result as is.
    """

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    # --- 1. USER AUTHENTICATION ---

    def authenticate(self, email: str, password: str) -> User | None:
        """
        Returns the user matching the credentials, or None. A miss is not an error.
        """
        user = self._user_repo.authenticate(email, password)
        logger.debug("Authentication for %s %s", email, "succeeded" if user else "found no match")
        return user

    # --- 2. USER CREATION ---

    def create(self, user: User | None) -> User:
        """
        Creates a user after checking that its username and email are both free.
        Returns exactly the object produced by the repository.
        """
        if user is None:
            raise NullArgumentError("user")

        self._ensure_available(user)

        created_user = self._user_repo.create(user)
        logger.debug("Created user %s", created_user.id)
        return created_user

    # --- 3. READS ---

    def get_all(self) -> Sequence[User]:
        return self._user_repo.get_all()

    def get_by_id(self, user_id: int) -> User | None:
        return self._user_repo.get_by_id(user_id)

    def get_by_role(self, role_id: int) -> list[User]:
        """Returns the role's users in the order the repository provides."""
        if role_id < 0:
            raise InvalidArgumentError("role_id", role_id, "must not be negative")

        return self._user_repo.get_by_role(role_id)

    # --- 4. UPDATE AND DELETE ---

    def update(self, user: User | None) -> None:
        """
        Overwrites an existing user with the non-None fields of ``user``.

        The new username and email are looked up by value; a match is a conflict
        unless it is the record being updated.
        """
        if user is None:
            raise NullArgumentError("user")

        existing = self._user_repo.get_by_id(user.id)
        if existing is None:
            logger.warning("Update rejected: user %s does not exist", user.id)
            raise NotFoundError(user.id)

        self._ensure_available(user, owner_id=existing.id)

        merged = existing.model_copy(update=user.model_dump(exclude_none=True, exclude={"id"}))
        self._user_repo.update(merged)
        logger.debug("Updated user %s", merged.id)

    def delete(self, user_id: int) -> bool:
        """
        Deletes a user. The repository decides what a missing id means;
        its result is returned unchanged.
        """
        if user_id <= 0:
            raise InvalidArgumentError("user_id", user_id, "must be a positive integer")

        return self._user_repo.delete(user_id)

    # --- Helpers ---

    def _ensure_available(self, user: User, owner_id: int | None = None) -> None:
        """Raises ConflictError if the username or email belongs to a user other than owner_id."""
        if user.username is not None:
            holder = self._user_repo.get_by_username(user.username)
            if holder is not None and (owner_id is None or holder.id != owner_id):
                logger.warning("Username %s is already taken", user.username)
                raise ConflictError("username", user.username)

        if user.email is not None:
            holder = self._user_repo.get_by_email(user.email)
            if holder is not None and (owner_id is None or holder.id != owner_id):
                logger.warning("Email %s is already taken", user.email)
                raise ConflictError("email", user.email)
