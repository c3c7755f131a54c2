"""
Boundary handlers for MCPBoe operations.

This module contains one async handler per operation. Each handler takes the
façade it needs and a plain dict of arguments (a decoded request body or
query string), and returns a HandlerResult: an HTTP-style status code plus the
ApiResponse envelope to serialize.

Each handler follows the pattern:
1. Parse the arguments into a request DTO (validation happens here)
2. Call the façade
3. Wrap the result, mapping failure kinds to status codes

Status Mapping:
    200: success
    400: RequestValidationError (no upstream call was made)
    404: law not found
    502: TransportError / UpstreamResponseError / other BoeError
    500: anything else
"""

from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, NamedTuple, Optional

from ..contracts.requests import (
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
from ..contracts.responses import ApiResponse
from ..errors import BoeError, RequestValidationError
from ..services import AuxiliaryService, LegislationService, SummaryService
from ..utils import AppConfig, get_logger

logger = get_logger(__name__)

ENDPOINTS = {
    "legislation": [
        "POST /legislation/search - Search legislation",
        "GET /legislation/{lawId} - Get specific law",
        "GET /legislation/{lawId}/structure - Get law structure",
    ],
    "summary": [
        "POST /summary/boe - Get BOE summary for date",
        "POST /summary/borme - Get BORME summary for date",
        "POST /summary/search - Search recent BOE publications",
    ],
    "auxiliary": [
        "GET /auxiliary/departments - Get departments list",
        "POST /auxiliary/legal-ranges - Get legal ranges",
        "POST /auxiliary/legal-ranges/table - Get legal ranges table",
        "POST /auxiliary/codes - Get code descriptions",
        "GET /auxiliary/code/{code} - Get one code description",
        "POST /auxiliary/departments/search - Search departments table",
        "POST /auxiliary/search - Search auxiliary tables",
    ],
    "system": [
        "GET /health - Health check",
        "GET /info - API information",
    ],
}


class HandlerResult(NamedTuple):
    """Status code and envelope produced by a handler."""

    status_code: int
    body: ApiResponse

    @property
    def success(self) -> bool:
        return self.body.success


async def _run(
    operation: str, call: Callable[[], Awaitable[Any]]
) -> HandlerResult:
    """Run a façade call and map its outcome onto a HandlerResult."""
    try:
        result = await call()
    except RequestValidationError as e:
        logger.info(f"Rejected {operation} request: {e.message}")
        return HandlerResult(400, ApiResponse.fail(e.message))
    except BoeError as e:
        logger.error(f"Upstream failure processing {operation} request: {e}")
        return HandlerResult(502, ApiResponse.fail("Upstream service error"))
    except Exception as e:
        logger.exception(f"Error processing {operation} request: {e}")
        return HandlerResult(500, ApiResponse.fail("Internal server error"))

    return HandlerResult(200, ApiResponse.ok(result))


async def handle_search_legislation(
    service: LegislationService, arguments: Dict[str, Any]
) -> HandlerResult:
    """
    Handle a legislation search.

    Args:
        service: Legislation façade.
        arguments: ``query`` (required), ``limit`` (1-100), ``offset`` (>= 0).

    Returns:
        HandlerResult wrapping a SearchLegislationResponse.
    """

    async def call():
        request = parse_request(SearchLegislationRequest, arguments)
        return await service.search_consolidated_legislation(request)

    return await _run("search legislation", call)


async def handle_get_law(
    service: LegislationService, arguments: Dict[str, Any]
) -> HandlerResult:
    """
    Handle retrieval of one consolidated law.

    A missing law is reported as 404 with ``"Law not found: <id>"``.
    """
    try:
        request = parse_request(GetLawRequest, arguments)
    except RequestValidationError as e:
        return HandlerResult(400, ApiResponse.fail(e.message))

    result = await _run(
        "get law", lambda: service.get_consolidated_law(request)
    )
    if result.success and result.body.data.law is None:
        return HandlerResult(404, ApiResponse.fail(f"Law not found: {request.law_id}"))
    return result


async def handle_get_law_structure(
    service: LegislationService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetLawStructureRequest, arguments)
        return await service.get_law_structure(request)

    return await _run("get law structure", call)


async def handle_get_boe_summary(
    service: SummaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetBoeSummaryRequest, arguments)
        return await service.get_boe_summary(request)

    return await _run("BOE summary", call)


async def handle_get_borme_summary(
    service: SummaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetBormeSummaryRequest, arguments)
        return await service.get_borme_summary(request)

    return await _run("BORME summary", call)


async def handle_search_recent_boe(
    service: SummaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(SearchRecentBoeRequest, arguments)
        return await service.search_recent_boe(request)

    return await _run("recent BOE search", call)


async def handle_get_departments(
    service: AuxiliaryService, arguments: Optional[Dict[str, Any]] = None
) -> HandlerResult:
    return await _run("get departments", service.get_departments)


async def handle_get_legal_ranges(
    service: AuxiliaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetLegalRangesRequest, arguments)
        return await service.get_legal_ranges(request)

    return await _run("get legal ranges", call)


async def handle_get_legal_ranges_table(
    service: AuxiliaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetLegalRangesRequest, arguments)
        return await service.get_legal_ranges_table(request)

    return await _run("legal ranges table", call)


async def handle_get_code_descriptions(
    service: AuxiliaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetCodeDescriptionsRequest, arguments)
        return await service.get_code_descriptions(request)

    return await _run("get code descriptions", call)


async def handle_get_code_description(
    service: AuxiliaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetCodeDescriptionRequest, arguments)
        return await service.get_code_description(request)

    return await _run("get code description", call)


async def handle_search_departments(
    service: AuxiliaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(GetDepartmentsRequest, arguments)
        return await service.get_departments_table(request)

    return await _run("departments table", call)


async def handle_search_auxiliary(
    service: AuxiliaryService, arguments: Dict[str, Any]
) -> HandlerResult:
    async def call():
        request = parse_request(SearchAuxiliaryRequest, arguments)
        return await service.search_auxiliary_data(request)

    return await _run("auxiliary search", call)


async def handle_health(app_config: Optional[AppConfig] = None) -> HandlerResult:
    app_config = app_config or AppConfig()
    return HandlerResult(
        200,
        ApiResponse.ok(
            {
                "status": "Healthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "version": app_config.version,
                "environment": app_config.environment,
            }
        ),
    )


async def handle_api_info(app_config: Optional[AppConfig] = None) -> HandlerResult:
    app_config = app_config or AppConfig()
    return HandlerResult(
        200,
        ApiResponse.ok(
            {
                "name": app_config.name,
                "description": "API for Spanish BOE (Boletín Oficial del Estado) operations",
                "version": app_config.version,
                "endpoints": ENDPOINTS,
            }
        ),
    )
