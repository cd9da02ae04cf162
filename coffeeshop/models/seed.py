import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .definitions import RoleRow

logger = logging.getLogger(__name__)

# --- STATIC DATA DEFINITIONS ---

# T_Role Seed Data: the access levels every shop starts with
# Structure: (id, role_name)
ROLES_SEED_DATA: list[tuple[int, str]] = [
    (1, "Admin"),
    (2, "Manager"),
    (3, "Staff"),
]

# --- SEEDING FUNCTIONS ---


def initialize_roles(session: Session) -> dict[str, RoleRow]:
    """
    Initializes the T_Role table with the default access levels.
    Uses hardcoded IDs for consistency across environments.
    """
    logger.info("Initializing T_Role classifications")
    role_map: dict[str, RoleRow] = {}

    for id_hint, name in ROLES_SEED_DATA:
        existing_role = session.get(RoleRow, id_hint)

        if existing_role:
            logger.debug("Skipped role %s, already exists", name)
            role_map[name] = existing_role
            continue

        new_role = RoleRow(id=id_hint, name=name)
        session.add(new_role)
        role_map[name] = new_role
        logger.info("Created role %d: %s", id_hint, name)

    session.commit()
    return role_map


def run_seeding(session: Session) -> bool:
    """
    The main entry point to execute all seeding functions.
    Returns False when the transaction had to be rolled back.
    """
    try:
        initialize_roles(session)
    except IntegrityError:
        session.rollback()
        logger.exception("Seeding failed due to an integrity error; transaction rolled back")
        return False

    logger.info("All core configuration data has been seeded")
    return True
