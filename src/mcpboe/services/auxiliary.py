"""
Auxiliary façade: departments, legal ranges and code lookups.

Multi-code lookups are issued one code at a time. A failure on one code is
logged and skipped; the response reports how many codes were requested and
how many were found, so a bad code never aborts the batch.

Every code description carries an ``additional_info`` map with a coarse
category derived from the record's type tag:

    department / departamento -> government_department
    range / rango             -> legal_range
    anything else             -> general
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from ..apis.base import UpstreamClient
from ..apis.models import AuxiliaryRecord
from ..contracts.requests import (
    GetCodeDescriptionRequest,
    GetCodeDescriptionsRequest,
    GetDepartmentsRequest,
    GetLegalRangesRequest,
    SearchAuxiliaryRequest,
)
from ..contracts.responses import (
    AuxiliaryDataResponse,
    CodeDescriptionResponse,
    CodeDescriptionsResponse,
    DepartmentsResponse,
    LegalRangesResponse,
)
from ..utils import get_logger

logger = get_logger(__name__)

ALL_DEPARTMENTS_LIMIT = 1000

CATEGORY_BY_TYPE = {
    "department": "government_department",
    "departamento": "government_department",
    "range": "legal_range",
    "rango": "legal_range",
}


def classify(record_type: str) -> str:
    """Map a free-text type tag to a coarse category."""
    return CATEGORY_BY_TYPE.get((record_type or "").strip().lower(), "general")


def extract_additional_info(record: AuxiliaryRecord) -> Dict[str, Any]:
    return {
        "code": record.code,
        "type": record.type,
        "retrieved_at": datetime.now(timezone.utc).isoformat(),
        "category": classify(record.type),
    }


class AuxiliaryService:
    """
    Stateless façade over the auxiliary table operations.

    Attributes:
        client (UpstreamClient): Shared upstream client injected at startup.
    """

    def __init__(self, client: UpstreamClient):
        self.client = client

    async def get_departments(self) -> DepartmentsResponse:
        logger.info("Getting departments list")

        departments = await self.client.get_departments_table(
            "", ALL_DEPARTMENTS_LIMIT
        )
        return DepartmentsResponse(
            departments=departments, total_count=len(departments)
        )

    async def get_legal_ranges(
        self, request: GetLegalRangesRequest
    ) -> LegalRangesResponse:
        logger.info(f"Getting legal ranges for date: {request.date}")

        # The ranges table is not dated upstream; the date is echoed back
        ranges = await self.client.get_legal_ranges_table(request.limit)
        return LegalRangesResponse(
            ranges=ranges, date=request.date, total_count=len(ranges)
        )

    async def get_code_descriptions(
        self, request: GetCodeDescriptionsRequest
    ) -> CodeDescriptionsResponse:
        """
        Look up several codes sequentially, skipping the ones that fail.

        Args:
            request: Validated list of codes.

        Returns:
            CodeDescriptionsResponse: Descriptions for the codes that were
                found, in request order, plus ``total_codes`` and
                ``found_codes``.
        """
        logger.info(f"Getting code descriptions for {len(request.codes)} codes")

        descriptions: List[CodeDescriptionResponse] = []
        for code in request.codes:
            try:
                record = await self.client.get_code_description(code)
            except Exception as e:
                logger.warning(f"Failed to get description for code {code}: {e}")
                continue

            if record is None:
                logger.info(f"Code not found: {code}")
                continue

            descriptions.append(
                CodeDescriptionResponse(
                    code=code,
                    description=record.description,
                    type=record.type,
                    additional_info=extract_additional_info(record),
                )
            )

        return CodeDescriptionsResponse(
            descriptions=descriptions,
            total_codes=len(request.codes),
            found_codes=len(descriptions),
        )

    async def get_departments_table(
        self, request: GetDepartmentsRequest
    ) -> AuxiliaryDataResponse:
        logger.info(
            f"Processing departments table request: search_term={request.search_term!r}, "
            f"limit={request.limit}"
        )

        departments = await self.client.get_departments_table(
            request.search_term, request.limit
        )
        logger.info(
            f"Found {len(departments)} departments for search term: {request.search_term!r}"
        )

        return AuxiliaryDataResponse(
            data=departments,
            type="departments",
            total_items=len(departments),
            search_term=request.search_term,
        )

    async def get_legal_ranges_table(
        self, request: GetLegalRangesRequest
    ) -> AuxiliaryDataResponse:
        logger.info(f"Processing legal ranges table request: limit={request.limit}")

        ranges = await self.client.get_legal_ranges_table(request.limit)
        logger.info(f"Found {len(ranges)} legal ranges")

        return AuxiliaryDataResponse(
            data=ranges, type="legal_ranges", total_items=len(ranges), search_term=""
        )

    async def get_code_description(
        self, request: GetCodeDescriptionRequest
    ) -> CodeDescriptionResponse:
        logger.info(f"Processing code description request: {request.code}")

        record = await self.client.get_code_description(request.code)
        if record is None:
            logger.warning(f"Code not found: {request.code}")
            return CodeDescriptionResponse(
                code=request.code, description="Code not found", type="unknown"
            )

        return CodeDescriptionResponse(
            code=request.code,
            description=record.description,
            type=record.type,
            additional_info=extract_additional_info(record),
        )

    async def search_auxiliary_data(
        self, request: SearchAuxiliaryRequest
    ) -> AuxiliaryDataResponse:
        logger.info(f"Processing auxiliary data search request: {request.query!r}")

        results = await self.client.search_auxiliary_data(request.query)
        logger.info(
            f"Found {len(results)} auxiliary data items for query: {request.query!r}"
        )

        return AuxiliaryDataResponse(
            data=results,
            type="search_results",
            total_items=len(results),
            search_term=request.query,
        )
