"""Unit tests for UserService against an autospecced repository."""

import pytest

from coffeeshop.exceptions import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    NullArgumentError,
)
from coffeeshop.schemas import User
from coffeeshop.services import UserService

pytestmark = pytest.mark.unit


@pytest.fixture
def service(user_repo_mock) -> UserService:
    return UserService(user_repo_mock)


class TestAuthenticate:
    def test_valid_credentials_return_user(self, service, user_repo_mock):
        user = User(id=1, email="test@example.com", password="123456")
        user_repo_mock.authenticate.return_value = user

        result = service.authenticate("test@example.com", "123456")

        assert result is user
        assert result.email == "test@example.com"
        user_repo_mock.authenticate.assert_called_once_with("test@example.com", "123456")

    @pytest.mark.parametrize(
        ("email", "password"),
        [("wrong@example.com", "wrongpass"), ("", ""), ("test@example.com", "")],
    )
    def test_unknown_credentials_return_none(self, service, email, password):
        assert service.authenticate(email, password) is None


class TestCreate:
    def test_valid_user_returns_created_user(self, service, user_repo_mock):
        user_repo_mock.create.side_effect = lambda u: u
        new_user = User(username="john", email="john@example.com", password="123")

        result = service.create(new_user)

        assert result is not None
        assert result.username == "john"
        user_repo_mock.create.assert_called_once_with(new_user)

    def test_returns_exactly_what_repository_returns(self, service, user_repo_mock):
        stored = User(id=7, username="john", email="john@example.com", password="123", role_id=3)
        user_repo_mock.create.return_value = stored

        result = service.create(User(username="john", email="john@example.com", password="123", role_id=3))

        assert result is stored

    def test_existing_username_raises_conflict(self, service, user_repo_mock):
        user_repo_mock.get_by_username.return_value = User()

        with pytest.raises(ConflictError) as exc_info:
            service.create(User(username="john", email="john@example.com", password="123"))

        assert exc_info.value.field == "username"
        user_repo_mock.create.assert_not_called()

    def test_existing_email_raises_conflict(self, service, user_repo_mock):
        user_repo_mock.get_by_email.return_value = User(id=4, email="john@example.com")

        with pytest.raises(ConflictError) as exc_info:
            service.create(User(username="john", email="john@example.com", password="123"))

        assert exc_info.value.field == "email"
        user_repo_mock.create.assert_not_called()

    def test_none_user_raises_null_argument(self, service, user_repo_mock):
        with pytest.raises(NullArgumentError):
            service.create(None)

        user_repo_mock.create.assert_not_called()
        user_repo_mock.get_by_username.assert_not_called()

    def test_null_argument_is_an_invalid_argument(self):
        assert issubclass(NullArgumentError, InvalidArgumentError)
        assert issubclass(NullArgumentError, ValueError)


class TestDelete:
    def test_valid_id_returns_true(self, service, user_repo_mock):
        user_repo_mock.delete.return_value = True

        assert service.delete(1) is True
        user_repo_mock.delete.assert_called_once_with(1)

    def test_repository_false_is_returned_verbatim(self, service, user_repo_mock):
        user_repo_mock.delete.return_value = False

        assert service.delete(42) is False

    @pytest.mark.parametrize("user_id", [0, -1, -100])
    def test_non_positive_id_raises_invalid_argument(self, service, user_repo_mock, user_id):
        with pytest.raises(InvalidArgumentError):
            service.delete(user_id)

        user_repo_mock.delete.assert_not_called()


class TestReads:
    def test_get_all_returns_repository_list(self, service, user_repo_mock):
        users = [User(id=1, username="A")]
        user_repo_mock.get_all.return_value = users

        result = service.get_all()

        assert len(result) == 1
        assert result is users

    def test_get_by_id_returns_user(self, service, user_repo_mock):
        user_repo_mock.get_by_id.return_value = User(id=2)

        result = service.get_by_id(2)

        assert result is not None
        assert result.id == 2

    def test_get_by_id_does_not_validate_id(self, service, user_repo_mock):
        assert service.get_by_id(0) is None
        user_repo_mock.get_by_id.assert_called_once_with(0)

    def test_get_by_role_returns_users_in_repository_order(self, service, user_repo_mock):
        role_users = [User(id=3, username="staff"), User(id=1, username="barista")]
        user_repo_mock.get_by_role.return_value = role_users

        result = service.get_by_role(1)

        assert len(result) == 2
        assert result[0].username == "staff"
        assert [u.id for u in result] == [3, 1]
        user_repo_mock.get_by_role.assert_called_once_with(1)

    def test_get_by_role_accepts_zero(self, service, user_repo_mock):
        user_repo_mock.get_by_role.return_value = []

        assert service.get_by_role(0) == []

    def test_negative_role_raises_invalid_argument(self, service, user_repo_mock):
        with pytest.raises(InvalidArgumentError):
            service.get_by_role(-1)

        user_repo_mock.get_by_role.assert_not_called()


class TestUpdate:
    def test_valid_user_calls_repository_update(self, service, user_repo_mock):
        user_repo_mock.get_by_id.return_value = User(id=1, username="john", email="john@example.com")

        service.update(User(id=1, username="johnny", email="johnny@example.com", password="123"))

        user_repo_mock.update.assert_called_once()
        updated = user_repo_mock.update.call_args.args[0]
        assert updated.id == 1
        assert updated.username == "johnny"
        assert updated.email == "johnny@example.com"
        assert updated.password == "123"
        user_repo_mock.get_by_username.assert_called_once_with("johnny")
        user_repo_mock.get_by_email.assert_called_once_with("johnny@example.com")

    def test_unset_fields_keep_existing_values(self, service, user_repo_mock):
        user_repo_mock.get_by_id.return_value = User(
            id=1, username="john", email="john@example.com", password="old", role_id=3
        )

        service.update(User(id=1, username="johnny"))

        updated = user_repo_mock.update.call_args.args[0]
        assert updated.username == "johnny"
        assert updated.email == "john@example.com"
        assert updated.password == "old"
        assert updated.role_id == 3

    def test_none_user_raises_null_argument(self, service, user_repo_mock):
        with pytest.raises(NullArgumentError):
            service.update(None)

        user_repo_mock.get_by_id.assert_not_called()
        user_repo_mock.update.assert_not_called()

    def test_user_not_found_raises(self, service, user_repo_mock):
        with pytest.raises(NotFoundError) as exc_info:
            service.update(User(id=99, username="notfound"))

        assert exc_info.value.user_id == 99
        user_repo_mock.update.assert_not_called()

    def test_username_held_by_other_user_raises_conflict(self, service, user_repo_mock):
        user_repo_mock.get_by_id.return_value = User(id=1, username="john", email="john@example.com")
        user_repo_mock.get_by_username.return_value = User(id=2, username="johnny")

        with pytest.raises(ConflictError):
            service.update(User(id=1, username="johnny", email="john@example.com"))

        user_repo_mock.update.assert_not_called()

    def test_email_held_by_other_user_raises_conflict(self, service, user_repo_mock):
        user_repo_mock.get_by_id.return_value = User(id=1, username="john", email="john@example.com")
        user_repo_mock.get_by_email.return_value = User(id=5, email="johnny@example.com")

        with pytest.raises(ConflictError) as exc_info:
            service.update(User(id=1, username="john", email="johnny@example.com"))

        assert exc_info.value.field == "email"
        user_repo_mock.update.assert_not_called()

    def test_unchanged_username_and_email_do_not_collide_with_self(self, service, user_repo_mock):
        existing = User(id=1, username="john", email="john@example.com", role_id=3)
        user_repo_mock.get_by_id.return_value = existing
        user_repo_mock.get_by_username.return_value = existing
        user_repo_mock.get_by_email.return_value = existing

        service.update(User(id=1, username="john", email="john@example.com", role_id=2))

        updated = user_repo_mock.update.call_args.args[0]
        assert updated.role_id == 2
