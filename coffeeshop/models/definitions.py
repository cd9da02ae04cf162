from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin

# --- ACCESS CONTROL ---


class RoleRow(Base, TimestampMixin):
    """
    The Role Definition Table (T_Role).
    Static classification of what a user may do in the shop (Admin, Manager, Staff).
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, comment="Role ID (e.g., 1-Admin, 3-Staff).")
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, comment="Role display name.")


# --- CORE IDENTITY ENTITY ---


class UserRow(Base, TimestampMixin):
    """
    The User Definition Table (T_User).

    Username and email are unique per user, but the rule is enforced by the
    UserService before every mutation; the columns are indexed, not constrained.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, comment="Unique User ID.")

    username: Mapped[str] = mapped_column(
        String(50), nullable=False, index=True, comment="User's login name, unique across users."
    )

    email: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True, comment="User's email address, used to authenticate."
    )

    password: Mapped[str] = mapped_column(
        String(128), nullable=False, comment="Opaque credential, compared by exact match."
    )

    role_id: Mapped[int] = mapped_column(
        ForeignKey(RoleRow.id), nullable=False, index=True, comment="The role granted to this user."
    )
