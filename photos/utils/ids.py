"""Identifier helpers shared by models and services."""

import uuid


def new_id():
    """Primary key default: time-ordered uuid7 where the runtime has it, uuid4 otherwise."""
    factory = getattr(uuid, "uuid7", None) or uuid.uuid4
    return factory()


def same_id(a, b) -> bool:
    """True when two ids name the same row, whether given as UUID objects or strings."""
    return str(a).lower() == str(b).lower()
