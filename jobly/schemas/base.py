"""
Base schemas and common response models.

JSON payloads use camelCase keys (``numEmployees``); Python code uses the
snake_case attribute names.
"""
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _numeric_to_str(value: Any) -> Any:
    # NUMERIC comes back as Decimal (PostgreSQL) or int/float (SQLite)
    if value is None or isinstance(value, str):
        return value
    return str(value)


# Equity is exposed as a decimal string, e.g. "0.05"
EquityStr = Annotated[Optional[str], BeforeValidator(_numeric_to_str)]


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RequestSchema(BaseSchema):
    """
    Base for request bodies and query filters.

    Only the camelCase keys are accepted; unknown keys, including the
    snake_case attribute names, are rejected.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=False)



class DeletedResponse(BaseSchema):
    """Confirmation returned by delete endpoints."""

    deleted: Union[int, str]


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: Union[str, list[str]]
    status: int
    details: Union[dict, list, None] = None
