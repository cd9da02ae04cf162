"""Errors raised by the UserService and its repositories."""


class UserServiceError(Exception):
    """Base class for user management errors."""


class InvalidArgumentError(UserServiceError, ValueError):
    """Raised when an argument is outside the range an operation accepts.

    Attributes:
        name (str): The name of the offending argument.
        value: The rejected value.
    """

    def __init__(self, name: str, value: object, reason: str):
        super().__init__(f"Invalid {name} {value!r}: {reason}.")
        self.name = name
        self.value = value


class NullArgumentError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, name: str):
        super().__init__(name, None, "a value is required")


class ConflictError(UserServiceError):
    """Raised when a username or email is already held by another user.

    Attributes:
        field (str): Either "username" or "email".
        value (str): The value that is already taken.
    """

    def __init__(self, field: str, value: str):
        super().__init__(f"A user with {field} '{value}' already exists.")
        self.field = field
        self.value = value


class NotFoundError(UserServiceError, LookupError):
    """Raised when an operation references a user id that does not exist.

    Attributes:
        user_id (int | None): The id that was not found.
    """

    def __init__(self, user_id: int | None):
        super().__init__(f"User with ID {user_id} not found.")
        self.user_id = user_id
