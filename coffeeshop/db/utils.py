from typing import Any


def apply_dict_updates(entity: object, update_data: dict[str, Any], excluded_attrs: set[str] | None = None) -> list[str]:
    """
    Dynamically applies key-value pairs from a dictionary to an ORM row.

    Args:
        entity: The SQLAlchemy ORM object loaded into the session.
        update_data: Dictionary of fields and values to update.
        excluded_attrs: Attribute names to explicitly ignore/skip updating.

    Returns:
        The names of the attributes whose value actually changed.
    """
    excluded_attrs = excluded_attrs if excluded_attrs else set()
    changed: list[str] = []
    for key, value in update_data.items():

        if key in excluded_attrs or not hasattr(entity, key):
            continue

        if getattr(entity, key) != value:
            setattr(entity, key, value)
            changed.append(key)

    return changed
