"""
Summary façade: BOE/BORME daily summaries and recent publication search.

Recent search re-filters the upstream results on the client side: an item is
kept when any search term occurs, case-insensitively, in its title, section
or issuer. The upstream term filter is not trusted to be complete. If the
filter itself fails, the unfiltered upstream list is returned.
"""

from typing import List, Sequence

from ..apis.base import UpstreamClient
from ..apis.models import SummaryRecord
from ..contracts.requests import (
    GetBoeSummaryRequest,
    GetBormeSummaryRequest,
    SearchRecentBoeRequest,
)
from ..contracts.responses import SearchRecentBoeResponse, SummaryResponse
from ..utils import get_logger

logger = get_logger(__name__)


def filter_by_search_terms(
    results: List[SummaryRecord], search_terms: Sequence[str]
) -> List[SummaryRecord]:
    """
    Keep the records whose title/section/issuer contain any of the terms.

    Args:
        results: Records in upstream order.
        search_terms: Terms matched as case-insensitive substrings.

    Returns:
        The matching records, order preserved. With no terms the input is
        returned unchanged.

    Example:
        >>> records = [SummaryRecord(titulo="Ley IA"), SummaryRecord(titulo="Otro")]
        >>> [r.title for r in filter_by_search_terms(records, ["ia"])]
        ['Ley IA']
    """
    if not search_terms:
        return results

    terms = [term.casefold() for term in search_terms]
    return [
        result
        for result in results
        if any(term in result.searchable_text.casefold() for term in terms)
    ]


class SummaryService:
    """Stateless façade over the gazette summary operations."""

    def __init__(self, client: UpstreamClient):
        self.client = client

    async def get_boe_summary(self, request: GetBoeSummaryRequest) -> SummaryResponse:
        logger.info(f"Processing BOE summary request for date: {request.date}")

        summaries = await self.client.get_boe_summary(request.date, request.max_items)
        logger.info(f"Found {len(summaries)} BOE summary items for date: {request.date}")

        return SummaryResponse(
            summaries=summaries,
            date=request.date,
            type="BOE",
            total_items=len(summaries),
        )

    async def get_borme_summary(
        self, request: GetBormeSummaryRequest
    ) -> SummaryResponse:
        logger.info(f"Processing BORME summary request for date: {request.date}")

        summaries = await self.client.get_borme_summary(
            request.date, request.max_items
        )
        logger.info(
            f"Found {len(summaries)} BORME summary items for date: {request.date}"
        )

        return SummaryResponse(
            summaries=summaries,
            date=request.date,
            type="BORME",
            total_items=len(summaries),
        )

    async def search_recent_boe(
        self, request: SearchRecentBoeRequest
    ) -> SearchRecentBoeResponse:
        terms = ", ".join(request.search_terms)
        logger.info(
            f"Processing recent BOE search: days_back={request.days_back}, terms={terms}"
        )

        results = await self.client.search_recent_boe(
            request.days_back, request.search_terms
        )

        try:
            filtered = filter_by_search_terms(results, request.search_terms)
        except Exception as e:
            logger.warning(
                f"Error filtering results by search terms, returning original results: {e}"
            )
            filtered = results

        logger.info(
            f"Found {len(filtered)} recent BOE items "
            f"(filtered from {len(results)}) for terms: {terms}"
        )

        return SearchRecentBoeResponse(
            results=filtered,
            search_terms=list(request.search_terms),
            days_searched=request.days_back,
            total_matches=len(filtered),
        )
