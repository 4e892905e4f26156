"""
Shared enum definitions for the aeronave gateway.

Plain Python enums; api/types.py wraps them with strawberry.enum where needed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Normalized failure kinds surfaced by aeronave mutations"""
    NOT_FOUND = "NOT_FOUND"
    CREATION = "CREATION"
    UPDATE = "UPDATE"
    DELETION = "DELETION"
