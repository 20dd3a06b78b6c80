"""
Validate raw payloads against a schema model and collect every violation.
"""
from typing import Any, List, Optional, Type

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError


class ValidationResult(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)
    instance: Optional[Any] = None


def format_error(error: dict) -> str:
    path = ".".join(str(part) for part in error.get("loc", ()))
    where = f"instance.{path}" if path else "instance"
    return f"{where}: {error['msg']}"


def validate(payload: Any, schema: Type[BaseModel]) -> ValidationResult:
    """
    validate({"title": 1}, JobUpdate)
    => ValidationResult(valid=False, errors=["instance.title: Input should be a valid string"])
    """
    try:
        instance = schema.model_validate(payload)
    except PydanticValidationError as exc:
        return ValidationResult(valid=False, errors=[format_error(e) for e in exc.errors()])
    return ValidationResult(valid=True, instance=instance)
