"""Pydantic schemas for API responses - camelCase on the wire."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List


class _ApiSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PointOfInterestSchema(_ApiSchema):
    """Point of interest schema."""
    id: int
    name: str
    description: str = ""


class CitySchema(_ApiSchema):
    """City schema, including its points of interest."""
    id: int
    name: str
    description: str = ""
    number_of_points_of_interest: int
    points_of_interest: List[PointOfInterestSchema] = []


class ProblemDetailsSchema(BaseModel):
    """RFC 9457 problem details body, as returned for every error."""
    model_config = ConfigDict(extra="allow")

    type: str = "about:blank"
    title: str
    status: int
    detail: str = ""
    instance: str = ""
