from sqlalchemy import select
from sqlalchemy.orm import Session

from coffeeshop.db.utils import apply_dict_updates
from coffeeshop.exceptions import NotFoundError
from coffeeshop.models.definitions import UserRow
from coffeeshop.repositories.base import UserRepository
from coffeeshop.schemas import User


class SqlAlchemyUserRepository(UserRepository):
    """
    Manages data access for the users table.
    Relies on the caller's Session for the transaction boundary; it flushes but never commits.
    """

    def __init__(self, session: Session):
        self.session = session

    def authenticate(self, email: str, password: str) -> User | None:
        """Retrieves the User whose email and stored credential both match."""
        stmt = select(UserRow).where(UserRow.email == email, UserRow.password == password).order_by(UserRow.id)
        return self._to_user(self.session.scalars(stmt).first())

    def create(self, user: User) -> User:
        """Creates a new User record and persists it."""
        sensitive_fields = {"id", "created_at", "updated_at"}
        row = UserRow()
        apply_dict_updates(row, user.model_dump(exclude_none=True), sensitive_fields)
        self.session.add(row)
        self.session.flush()
        return self._to_user(row)

    def get_by_id(self, user_id: int) -> User | None:
        return self._to_user(self.session.get(UserRow, user_id))

    def get_by_username(self, username: str) -> User | None:
        stmt = select(UserRow).where(UserRow.username == username).order_by(UserRow.id)
        return self._to_user(self.session.scalars(stmt).first())

    def get_by_email(self, email: str) -> User | None:
        stmt = select(UserRow).where(UserRow.email == email).order_by(UserRow.id)
        return self._to_user(self.session.scalars(stmt).first())

    def update(self, user: User) -> None:
        """
        Updates user fields using the ORM tracking pattern.
        Fields left as None on the incoming user keep their stored value.
        """
        row = self.session.get(UserRow, user.id) if user.id is not None else None
        if row is None:
            raise NotFoundError(user.id)

        sensitive_fields = {"id", "created_at", "updated_at"}
        apply_dict_updates(row, user.model_dump(exclude_none=True), sensitive_fields)
        self.session.flush()

    def delete(self, user_id: int) -> bool:
        row = self.session.get(UserRow, user_id)
        if row is None:
            return False
        self.session.delete(row)
        self.session.flush()
        return True

    def get_all(self) -> list[User]:
        stmt = select(UserRow).order_by(UserRow.id)
        return [self._to_user(row) for row in self.session.scalars(stmt).all()]

    def get_by_role(self, role_id: int) -> list[User]:
        stmt = select(UserRow).where(UserRow.role_id == role_id).order_by(UserRow.id)
        return [self._to_user(row) for row in self.session.scalars(stmt).all()]

    @staticmethod
    def _to_user(row: UserRow | None) -> User | None:
        return User.model_validate(row) if row is not None else None
