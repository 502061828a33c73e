"""Pydantic schema for Scryfall set objects.

The schema is strict: every documented field is type-checked without
coercion and unknown top-level fields are rejected, so upstream schema drift
shows up as a validation failure instead of silently passing through.

See https://scryfall.com/docs/api/sets for the upstream field reference.
"""

import json
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Optional
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from infrastructure.operations import OperationResult

UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def _check_absolute_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL")
    return value


AbsoluteUrl = Annotated[str, AfterValidator(_check_absolute_url)]


class ScryfallSet(BaseModel):
    """A Magic: The Gathering set as returned by the Scryfall API."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    object: Literal["set"] = Field(
        ..., description='Object type identifier, always "set"'
    )
    id: str = Field(
        ..., pattern=UUID_PATTERN, description="Unique identifier for the set"
    )
    code: str = Field(
        ..., min_length=3, max_length=5, description='Set code (e.g., "tla")'
    )
    mtgo_code: Optional[str] = Field(None, description="Magic Online set code")
    arena_code: Optional[str] = Field(None, description="Arena set code")
    tcgplayer_id: Optional[int] = Field(
        None, gt=0, description="TCGPlayer marketplace identifier"
    )
    name: str = Field(..., min_length=1, description="Full name of the set")
    uri: AbsoluteUrl = Field(..., description="API endpoint for this set")
    scryfall_uri: AbsoluteUrl = Field(..., description="Web page for this set")
    search_uri: AbsoluteUrl = Field(..., description="Card search for this set")
    released_at: str = Field(
        ..., pattern=ISO_DATE_PATTERN, description="Release date (YYYY-MM-DD)"
    )
    set_type: str = Field(
        ..., min_length=1, description='Set type (e.g., "expansion", "core")'
    )
    card_count: int = Field(..., ge=0, description="Number of cards in the set")
    digital: bool = Field(..., description="Whether the set is digital-only")
    nonfoil_only: bool = Field(..., description="Whether the set is nonfoil-only")
    foil_only: bool = Field(..., description="Whether the set is foil-only")
    icon_svg_uri: AbsoluteUrl = Field(..., description="SVG icon for the set")

    @field_validator("mtgo_code", "arena_code", "tcgplayer_id", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Optional fields may be omitted but never sent as null."""
        if v is None:
            raise ValueError("may be omitted but must not be null")
        return v

    def to_cache_json(self) -> str:
        """Serialize for the object store; optional fields left unset are omitted."""
        return self.model_dump_json(indent=2, exclude_unset=True)


@dataclass(frozen=True)
class FieldIssue:
    """One failing field: dotted path, reason category, and pydantic's message."""

    path: str
    reason: str
    message: str

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.reason} ({self.message})"


@dataclass(frozen=True)
class SchemaValidationError:
    """Every field that failed validation for one payload."""

    issues: list[FieldIssue] = field(default_factory=list)

    def summary(self) -> str:
        return "; ".join(str(issue) for issue in self.issues)

    def to_dict(self) -> list[dict[str, str]]:
        return [
            {"path": i.path, "reason": i.reason, "message": i.message}
            for i in self.issues
        ]


def _reason_for(error_type: str) -> str:
    if error_type == "missing":
        return "missing"
    if error_type == "extra_forbidden":
        return "unexpected_field"
    if error_type == "string_pattern_mismatch":
        return "pattern_mismatch"
    if error_type.endswith("_type") or error_type in ("literal_error", "model_type"):
        return "wrong_type"
    return "invalid_value"


def _issues_from(exc: ValidationError) -> list[FieldIssue]:
    return [
        FieldIssue(
            path=".".join(str(part) for part in error["loc"]),
            reason=_reason_for(error["type"]),
            message=error["msg"],
        )
        for error in exc.errors()
    ]


def _invalid(error: SchemaValidationError) -> OperationResult:
    return OperationResult.permanent_error(
        f"Set payload failed validation: {error.summary()}",
        error_code="INVALID_SCHEMA",
        data=error,
    )


def validate_set(payload: Any) -> OperationResult:
    """Validate decoded JSON against the set schema.

    Args:
        payload: Decoded JSON of any shape

    Returns:
        OperationResult with a ScryfallSet on success, or PERMANENT_ERROR
        (error_code INVALID_SCHEMA) with a SchemaValidationError listing
        every failing field
    """
    try:
        record = ScryfallSet.model_validate(payload, strict=True)
    except ValidationError as e:
        return _invalid(SchemaValidationError(issues=_issues_from(e)))
    return OperationResult.success(data=record, message="set payload valid")


def validate_set_json(body: str) -> OperationResult:
    """Decode a JSON string and validate it against the set schema."""
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as e:
        return _invalid(
            SchemaValidationError(
                issues=[FieldIssue(path="", reason="invalid_json", message=str(e))]
            )
        )
    return validate_set(payload)
