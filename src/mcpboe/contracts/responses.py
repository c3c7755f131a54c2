"""
Response DTOs and the uniform envelope returned to callers.

Façades return the operation-specific DTOs below; the boundary handlers wrap
them in ApiResponse. All names serialize as lower-snake-case.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..apis.models import (
    AuxiliaryRecord,
    LegislationRecord,
    StructureRecord,
    SummaryRecord,
)

DataT = TypeVar("DataT")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BoeResponse(BaseModel):
    """Base class for response DTOs."""

    model_config = ConfigDict(frozen=True)


class SearchLegislationResponse(BoeResponse):
    results: List[LegislationRecord] = Field(default_factory=list)
    # The upstream API exposes no total count; this is the page size returned
    total_results: int = 0
    query: str = ""
    execution_time_ms: float = 0.0


class GetLawResponse(BoeResponse):
    law: Optional[LegislationRecord] = None
    metadata: Optional[Dict[str, Any]] = None
    analysis: Optional[Dict[str, Any]] = None


class GetLawStructureResponse(BoeResponse):
    structure: Optional[StructureRecord] = None
    law_id: str = ""


class SummaryResponse(BoeResponse):
    summaries: List[SummaryRecord] = Field(default_factory=list)
    date: str = ""
    type: str = ""  # "BOE" or "BORME"
    total_items: int = 0


class SearchRecentBoeResponse(BoeResponse):
    results: List[SummaryRecord] = Field(default_factory=list)
    search_terms: List[str] = Field(default_factory=list)
    days_searched: int = 0
    total_matches: int = 0


class AuxiliaryDataResponse(BoeResponse):
    data: List[AuxiliaryRecord] = Field(default_factory=list)
    type: str = ""  # "departments", "legal_ranges", "search_results"
    total_items: int = 0
    search_term: str = ""


class CodeDescriptionResponse(BoeResponse):
    code: str = ""
    description: str = ""
    type: str = ""
    additional_info: Optional[Dict[str, Any]] = None


class CodeDescriptionsResponse(BoeResponse):
    descriptions: List[CodeDescriptionResponse] = Field(default_factory=list)
    total_codes: int = 0
    found_codes: int = 0


class DepartmentsResponse(BoeResponse):
    departments: List[AuxiliaryRecord] = Field(default_factory=list)
    total_count: int = 0


class LegalRangesResponse(BoeResponse):
    ranges: List[AuxiliaryRecord] = Field(default_factory=list)
    date: str = ""
    total_count: int = 0


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Uniform envelope around every handler result.

    Attributes:
        success: True when ``data`` holds the operation result.
        data: Operation result on success.
        error: Human-readable error on failure.
        timestamp: UTC time the envelope was created.

    Example:
        >>> ApiResponse.fail("Law not found: BOE-A-1").success
        False
    """

    success: bool
    data: Optional[DataT] = None
    error: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)

    @classmethod
    def ok(cls, data: DataT) -> "ApiResponse[DataT]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse[Any]":
        return cls(success=False, error=error)
