"""Form Parsing — run a pydantic schema without raising.

Invariants:
    - safe_parse never raises for bad input: failures come back as field_errors
    - field_errors maps each offending field to its list of messages
    - Exactly one of data / field_errors is populated

Design Decisions:
    - Result object over exceptions: the action layer renders errors inline
      next to the already-entered values instead of unwinding the request
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_LEVEL = "_form"


@dataclass(frozen=True)
class ParseResult(Generic[ModelT]):
    data: ModelT | None = None
    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.data is not None


def safe_parse(
    schema: type[ModelT],
    values: Mapping[str, object],
    missing_messages: Mapping[str, str] | None = None,
) -> ParseResult[ModelT]:
    """Validate values against schema, collecting messages per field."""
    try:
        return ParseResult(data=schema.model_validate(dict(values)))
    except ValidationError as exc:
        return ParseResult(
            field_errors=flatten_field_errors(exc, missing_messages or {}),
        )


def flatten_field_errors(
    exc: ValidationError, missing_messages: Mapping[str, str],
) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        name = str(err["loc"][0]) if err["loc"] else FORM_LEVEL
        message = err["msg"]
        if err["type"] == "missing" and name in missing_messages:
            message = missing_messages[name]
        errors.setdefault(name, []).append(message)
    return errors
