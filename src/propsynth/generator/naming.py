"""Generated member names derived from field names."""

from __future__ import annotations


def derive_name(field_name: str) -> str:
    """Return the property name generated for *field_name*.

    ``_isEnabled`` and ``isEnabled`` both give ``IsEnabled``. Any other shape
    (``IsEnabled``, ``__x``, ``_Name``) is returned unchanged, which the rule
    engine reports as a name collision.
    """
    if len(field_name) > 1 and field_name[0] == "_" and field_name[1].islower():
        return field_name[1].upper() + field_name[2:]
    if field_name[:1].islower():
        return field_name[0].upper() + field_name[1:]
    return field_name


def is_name_collision(field_name: str) -> bool:
    return derive_name(field_name) == field_name
