"""
Legislation façade: consolidated law search, retrieval and structure.

The service validates nothing itself beyond what the request DTOs already
enforce; it calls the upstream client, times the search, and derives the
optional metadata and analysis maps for a single law.

Derived Fields:
    - execution_time_ms: wall-clock time around the upstream search call
    - metadata: flattened record fields plus ``extracted_at``
    - analysis: text length, whitespace word count, structure presence and
      structure complexity (titles + chapters + articles)
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..apis.base import UpstreamClient
from ..apis.models import LegislationRecord, StructureRecord
from ..contracts.requests import (
    GetLawRequest,
    GetLawStructureRequest,
    SearchLegislationRequest,
)
from ..contracts.responses import (
    GetLawResponse,
    GetLawStructureResponse,
    SearchLegislationResponse,
)
from ..utils import get_logger

logger = get_logger(__name__)


def calculate_structure_complexity(structure: Optional[StructureRecord]) -> int:
    """Return titles + chapters + articles, or 0 for an absent structure."""
    if structure is None:
        return 0
    return structure.complexity


def extract_metadata(law: LegislationRecord) -> Dict[str, Any]:
    return {
        "id": law.id,
        "title": law.title,
        "date": law.date,
        "norm_type": law.norm_type,
        "number": law.number,
        "department": law.department,
        "range": law.range,
        "is_active": law.is_active,
        "url": law.url,
        "extracted_at": datetime.now(timezone.utc).isoformat(),
    }


def extract_analysis(law: LegislationRecord) -> Dict[str, Any]:
    text = law.text or ""
    return {
        "text_length": len(text),
        "word_count": len(text.split()),
        "has_structure": law.structure is not None,
        "structure_complexity": calculate_structure_complexity(law.structure),
        "analysis_date": datetime.now(timezone.utc).isoformat(),
    }


class LegislationService:
    """
    Stateless façade over the legislation operations of the upstream client.

    Attributes:
        client (UpstreamClient): Shared upstream client injected at startup.
    """

    def __init__(self, client: UpstreamClient):
        self.client = client

    async def search_consolidated_legislation(
        self, request: SearchLegislationRequest
    ) -> SearchLegislationResponse:
        logger.info(f"Processing legislation search request: {request.query!r}")

        start = time.perf_counter()
        results = await self.client.search_consolidated_legislation(
            request.query, request.limit, request.offset
        )
        execution_time_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"Found {len(results)} legislation results for {request.query!r} "
            f"in {execution_time_ms:.1f}ms"
        )

        return SearchLegislationResponse(
            results=results,
            total_results=len(results),
            query=request.query,
            execution_time_ms=execution_time_ms,
        )

    async def get_consolidated_law(self, request: GetLawRequest) -> GetLawResponse:
        """
        Fetch one law and derive the requested maps.

        An absent law is not an error: the response carries ``law=None`` and
        the boundary decides how to report it.
        """
        logger.info(f"Processing get law request: {request.law_id}")

        law = await self.client.get_consolidated_law(
            request.law_id,
            request.include_metadata,
            request.include_analysis,
            request.include_full_text,
        )

        if law is None:
            logger.warning(f"Law not found: {request.law_id}")
            return GetLawResponse(law=None)

        return GetLawResponse(
            law=law,
            metadata=extract_metadata(law) if request.include_metadata else None,
            analysis=extract_analysis(law) if request.include_analysis else None,
        )

    async def get_law_structure(
        self, request: GetLawStructureRequest
    ) -> GetLawStructureResponse:
        logger.info(f"Processing get law structure request: {request.law_id}")

        structure = await self.client.get_law_structure(request.law_id)
        if structure is None:
            logger.warning(f"Law structure not found: {request.law_id}")

        return GetLawStructureResponse(structure=structure, law_id=request.law_id)
