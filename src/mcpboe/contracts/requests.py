"""
Request DTOs for MCPBoe operations.

Each model validates itself on construction, so an instance that exists has
already passed every bound and format check. Façades therefore never issue an
upstream call for invalid input.

Validation rules:
    - Free-text queries must be non-blank and within a length bound
    - Limits and counts are range-checked (1..100, 1..1000, 1..30)
    - Dates must be exactly eight digits (``YYYYMMDD``)
    - Code and search-term lists must be non-empty and contain no blank entries

parse_request() turns a plain dict (for example a decoded HTTP body) into a
DTO and converts pydantic's ValidationError into RequestValidationError with
one readable message per failed field.
"""

from typing import Any, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..apis.base import validate_date_format
from ..errors import RequestValidationError

RequestT = TypeVar("RequestT", bound="BoeRequest")


class BoeRequest(BaseModel):
    """Base class for request DTOs."""

    model_config = ConfigDict(frozen=True, extra="ignore")


def _require_text(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is required")
    return value


class SearchLegislationRequest(BoeRequest):
    query: str = Field(max_length=500)
    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)

    @field_validator("query")
    @classmethod
    def _query_required(cls, value: str) -> str:
        return _require_text(value, "Query")


class GetLawRequest(BoeRequest):
    law_id: str
    include_metadata: bool = True
    include_analysis: bool = False
    include_full_text: bool = False

    @field_validator("law_id")
    @classmethod
    def _law_id_required(cls, value: str) -> str:
        return _require_text(value, "Law ID")


class GetLawStructureRequest(BoeRequest):
    law_id: str

    @field_validator("law_id")
    @classmethod
    def _law_id_required(cls, value: str) -> str:
        return _require_text(value, "Law ID")


class _DatedSummaryRequest(BoeRequest):
    date: str
    max_items: int = Field(default=50, ge=1, le=1000)

    @field_validator("date")
    @classmethod
    def _date_format(cls, value: str) -> str:
        validate_date_format(value)
        return value


class GetBoeSummaryRequest(_DatedSummaryRequest):
    """Request for the BOE summary of one day."""


class GetBormeSummaryRequest(_DatedSummaryRequest):
    """Request for the BORME (company registry gazette) summary of one day."""


class SearchRecentBoeRequest(BoeRequest):
    days_back: int = Field(default=7, ge=1, le=30)
    search_terms: List[str] = Field(min_length=1)

    @field_validator("search_terms")
    @classmethod
    def _terms_not_blank(cls, value: List[str]) -> List[str]:
        if any(not term or not term.strip() for term in value):
            raise ValueError("All search terms must be non-empty")
        return value


class GetDepartmentsRequest(BoeRequest):
    search_term: str = ""
    limit: int = Field(default=100, ge=1, le=1000)


class GetLegalRangesRequest(BoeRequest):
    """The upstream ranges table is not dated; ``date`` is echoed back only."""

    date: str
    limit: int = Field(default=100, ge=1, le=1000)

    @field_validator("date")
    @classmethod
    def _date_format(cls, value: str) -> str:
        validate_date_format(value)
        return value


class GetCodeDescriptionRequest(BoeRequest):
    code: str

    @field_validator("code")
    @classmethod
    def _code_required(cls, value: str) -> str:
        return _require_text(value, "Code")


class GetCodeDescriptionsRequest(BoeRequest):
    codes: List[str] = Field(min_length=1)

    @field_validator("codes")
    @classmethod
    def _codes_not_blank(cls, value: List[str]) -> List[str]:
        if any(not code or not code.strip() for code in value):
            raise ValueError("All codes must be non-empty")
        return value


class SearchAuxiliaryRequest(BoeRequest):
    query: str = Field(max_length=200)

    @field_validator("query")
    @classmethod
    def _query_required(cls, value: str) -> str:
        return _require_text(value, "Query")


def format_validation_errors(error: ValidationError) -> List[str]:
    """Render pydantic errors as ``"field: message"`` strings."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "request"
        message = item["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        messages.append(f"{location}: {message}")
    return messages


def parse_request(model: Type[RequestT], data: Mapping[str, Any]) -> RequestT:
    """
    Build a request DTO from a plain mapping.

    Args:
        model: Request DTO class.
        data: Raw arguments, e.g. a decoded JSON body.

    Returns:
        A validated instance of ``model``.

    Raises:
        RequestValidationError: If the mapping is not a dict or fails validation.
    """
    if not isinstance(data, Mapping):
        raise RequestValidationError(["Invalid request body"])
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        raise RequestValidationError(format_validation_errors(e)) from e
