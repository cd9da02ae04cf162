"""
Pydantic schema defining the contract for user identity across the
Service Layer and every UserRepository backend.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    The core Domain Model handed to and returned by the UserService.

    Every field is optional so the same schema can carry a partial update;
    fields left as None are not applied by UserService.update.
    """

    # Configuration allows mapping from SQLAlchemy ORM objects
    model_config = {"from_attributes": True}

    id: int | None = Field(default=None, description="User ID, assigned by the persistence layer")
    username: str | None = Field(default=None, min_length=1, max_length=50, description="Unique login name")
    # Stored and compared verbatim; no normalization, so logins round-trip
    email: str | None = Field(default=None, max_length=100, description="Unique email address, used to authenticate")

    # Kept out of repr() so credentials never reach logs or tracebacks
    password: str | None = Field(default=None, repr=False, description="Opaque credential, compared by exact match")

    role_id: int | None = Field(default=None, description="ID of the role granted to the user")
