"""
Payload Validation

Runs a Pydantic schema over raw input and returns a tagged result instead of
raising, so services can decide how a failure is reported. The HTTP layer
validates request bodies with the same schemas, which keeps one rule set for
both entry points.

Usage:
======
    from exploring_india.shared.schemas.validation import validate_payload
    from exploring_india.shared.schemas.review import ReviewCreate

    result = validate_payload(ReviewCreate, {"place_id": pid, "rating": 7, "comment": "ok"})
    if not result.ok:
        raise ValidationError(result.message, details={"errors": result.errors})
    review_in = result.value
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError


SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[SchemaT]):
    """
    Outcome of validate_payload.

    Attributes:
        ok: True when the payload satisfied the schema
        value: Parsed model (only when ok)
        errors: Field errors as {"field", "message", "type"} dicts (only when not ok)
    """

    ok: bool
    value: Optional[SchemaT] = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def message(self) -> str:
        """Human-readable summary, one clause per failing field."""
        if self.ok:
            return ""
        return "; ".join(f"{error['field']}: {error['message']}" for error in self.errors)


_LOCATIONS = ("body", "query", "path", "cookie", "header")


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATIONS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts) or "body"


def format_validation_errors(raw_errors: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """
    Flatten Pydantic error dicts to {"field", "message", "type"}.

    Request locations ("body", "query", ...) are dropped from the field name.
    """
    return [
        {
            "field": _field_name(tuple(error.get("loc", ()))),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in raw_errors
    ]


def validate_payload(schema: Type[SchemaT], data: Mapping[str, Any]) -> ValidationResult[SchemaT]:
    """
    Validate `data` against `schema`.

    Args:
        schema: Pydantic model class describing the input shape
        data: Raw field values

    Returns:
        ValidationResult with either the parsed value or the field errors
    """
    try:
        return ValidationResult(ok=True, value=schema.model_validate(dict(data)))
    except PydanticValidationError as e:
        errors = format_validation_errors(e.errors(include_url=False, include_context=False))
        return ValidationResult(ok=False, errors=errors)
