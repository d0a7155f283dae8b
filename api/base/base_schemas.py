# api/base/base_schemas.py
from typing import Optional, Type, TypeVar
from pydantic import BaseModel, Field, ValidationError

from shared.errors import RequestValidationError

T = TypeVar("T", bound=BaseModel)


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-friendly error message")
    message: Optional[str] = Field(None, description="Extra detail")

    @classmethod
    def of(cls, error: str, message: Optional[str] = None) -> dict:
        return cls(error=error, message=message).model_dump(exclude_none=True)


class SuccessResponse(BaseModel):
    success: bool = True


def parse_body(schema: Type[T], data: Optional[dict], message: str) -> T:
    """
    Validate a JSON body against a request schema

    Raises:
        RequestValidationError: With the route's static message on any
            missing or malformed field
    """
    try:
        return schema.model_validate(data or {})
    except ValidationError:
        raise RequestValidationError(message)
