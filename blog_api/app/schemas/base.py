"""Shared base model for camelCase JSON payloads."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys.

    Attributes are declared in snake_case; ``populate_by_name`` allows
    constructing instances with either spelling.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class SuccessResponse(CamelModel):
    """Acknowledgement returned by intake and delete endpoints."""

    success: bool = True
    message: str | None = None
