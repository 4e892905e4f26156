"""
Aeronave deserialization helpers.

Converts Redis JSON documents back to Aeronave objects and GraphQL input
objects to plain field dicts.
"""

import dataclasses

import strawberry

from aeronave_gateway.models import AeronaveDocument
from aeronave_gateway.api.types import Aeronave, AeronaveInput


def document_to_aeronave(aeronave_id: str, document: AeronaveDocument) -> Aeronave:
    """Attach an identifier to a validated document"""
    return Aeronave(id=strawberry.ID(aeronave_id), **document.model_dump())


def json_to_aeronave(aeronave_id: str, data: str | None) -> Aeronave | None:
    """Convert JSON from Redis storage to Aeronave object"""
    if not data:
        return None
    return document_to_aeronave(aeronave_id, AeronaveDocument.model_validate_json(data))


def aeronave_input_to_dict(aeronave_input: AeronaveInput) -> dict:
    """Collect the fields the client actually sent, explicit nulls included"""
    return {
        field.name: value
        for field in dataclasses.fields(aeronave_input)
        if (value := getattr(aeronave_input, field.name)) is not strawberry.UNSET
    }
