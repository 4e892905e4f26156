"""
Aeronave serialization helpers for Redis persistence.

Converts AeronaveDocument objects to the JSON strings stored per key.
"""

from aeronave_gateway.models import AeronaveDocument


def aeronave_to_json(document: AeronaveDocument) -> str:
    """Convert AeronaveDocument to JSON for Redis storage"""
    return document.model_dump_json()
