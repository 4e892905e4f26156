"""
Declared document schema for aircraft records.

AeronaveDocument holds every attribute of an Aeronave except its identifier,
which is allocated by AeronaveStore. The field validators here are the only
constraints a stored record has to satisfy.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AeronaveDocument(BaseModel):
    """Aircraft record as persisted in the document store"""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    model: str = Field(min_length=1, max_length=100)
    manufacturer: str | None = Field(default=None, min_length=1, max_length=100)
    registration: str | None = Field(default=None, max_length=10, pattern=r"^[A-Z0-9]+(-[A-Z0-9]+)?$")
    capacity: int = Field(ge=1, le=1000)
    max_range_km: float | None = Field(default=None, gt=0)
    first_flight: date | None = None

    @field_validator("registration", mode="before")
    @classmethod
    def upper_registration(cls, value):
        # Registrations are compared case-insensitively, store them upper-cased
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("first_flight")
    @classmethod
    def first_flight_not_in_future(cls, value: date | None) -> date | None:
        if value is not None and value > date.today():
            raise ValueError("first flight cannot be in the future")
        return value
