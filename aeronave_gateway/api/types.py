"""
GraphQL type definitions for the Aeronave API.

These @strawberry.type classes mirror AeronaveDocument in models.py.
The pydantic model enforces validation internally, these are exposed via GraphQL.
"""
from __future__ import annotations
import strawberry
from datetime import date


@strawberry.type
class Aeronave:
    """Aircraft record"""
    id: strawberry.ID
    model: str | None
    manufacturer: str | None
    registration: str | None
    capacity: int | None
    max_range_km: float | None
    first_flight: date | None


@strawberry.input
class AeronaveInput:
    """Aircraft attributes; only the fields sent by the client are applied"""
    model: str | None = strawberry.UNSET
    manufacturer: str | None = strawberry.UNSET
    registration: str | None = strawberry.UNSET
    capacity: int | None = strawberry.UNSET
    max_range_km: float | None = strawberry.UNSET
    first_flight: date | None = strawberry.UNSET
