"""Request and response contracts for MCPBoe operations."""

from .requests import (
    GetBoeSummaryRequest,
    GetBormeSummaryRequest,
    GetCodeDescriptionRequest,
    GetCodeDescriptionsRequest,
    GetDepartmentsRequest,
    GetLawRequest,
    GetLawStructureRequest,
    GetLegalRangesRequest,
    SearchAuxiliaryRequest,
    SearchLegislationRequest,
    SearchRecentBoeRequest,
    parse_request,
)
from .responses import (
    ApiResponse,
    AuxiliaryDataResponse,
    CodeDescriptionResponse,
    CodeDescriptionsResponse,
    DepartmentsResponse,
    GetLawResponse,
    GetLawStructureResponse,
    LegalRangesResponse,
    SearchLegislationResponse,
    SearchRecentBoeResponse,
    SummaryResponse,
)

__all__ = [
    "ApiResponse",
    "AuxiliaryDataResponse",
    "CodeDescriptionResponse",
    "CodeDescriptionsResponse",
    "DepartmentsResponse",
    "GetBoeSummaryRequest",
    "GetBormeSummaryRequest",
    "GetCodeDescriptionRequest",
    "GetCodeDescriptionsRequest",
    "GetDepartmentsRequest",
    "GetLawRequest",
    "GetLawResponse",
    "GetLawStructureRequest",
    "GetLawStructureResponse",
    "GetLegalRangesRequest",
    "LegalRangesResponse",
    "SearchAuxiliaryRequest",
    "SearchLegislationRequest",
    "SearchLegislationResponse",
    "SearchRecentBoeRequest",
    "SearchRecentBoeResponse",
    "SummaryResponse",
    "parse_request",
]
