"""
Pydantic schemas for coaster records.

Field types are strict: a JSON number is not accepted where a string
is expected and vice versa, and ``height`` must be an integer.  Keys
that are missing or ``null`` in a request body fall back to empty
values, unknown keys are ignored.  On the wire the park is called
``inPark``.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationInfo, field_validator


class CoasterBase(BaseModel):
    """Fields shared by every coaster payload."""

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr = Field("", description="Name of the ride")
    manufacturer: StrictStr = Field("", description="Company that built the ride")
    in_park: StrictStr = Field("", alias="inPark", description="Park the ride is installed in")
    height: StrictInt = Field(0, description="Height of the ride in feet")

    @field_validator("name", "manufacturer", "in_park", "height", mode="before")
    @classmethod
    def null_to_empty(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class CoasterCreate(CoasterBase):
    """Schema for creating a coaster.

    Clients may send an ``id``; it is dropped here because identifiers
    are always assigned by the server.
    """


class Coaster(CoasterBase):
    """A stored coaster record."""

    id: StrictStr
