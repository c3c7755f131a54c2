"""
Unit tests for the summary façade and the recent-search filter.
"""

from unittest.mock import patch

import pytest

from mcpboe.apis.models import SummaryRecord
from mcpboe.contracts.requests import (
    GetBoeSummaryRequest,
    GetBormeSummaryRequest,
    SearchRecentBoeRequest,
)
from mcpboe.services.summary import SummaryService, filter_by_search_terms


@pytest.fixture
def service(mock_upstream):
    return SummaryService(mock_upstream)


@pytest.fixture
def records(sample_summary_items):
    return [SummaryRecord.model_validate(item) for item in sample_summary_items]


class TestFilterBySearchTerms:
    def test_matches_title_and_issuer_case_insensitively(self, records):
        """Test ["ia"] keeps "Ley IA" and the item issued by "Agencia IA"."""
        filtered = filter_by_search_terms(records, ["ia"])

        assert [r.id for r in filtered] == ["BOE-A-2024-801", "BOE-A-2024-803"]

    def test_keeps_only_matching_record(self):
        records = [
            SummaryRecord(title="Ley IA", section="I", issuer="MinJusticia"),
            SummaryRecord(title="Otro", section="II", issuer="MinHacienda"),
        ]

        assert filter_by_search_terms(records, ["IA"]) == [records[0]]

    def test_matches_section(self, records):
        filtered = filter_by_search_terms(records, ["III"])

        assert [r.id for r in filtered] == ["BOE-A-2024-802", "BOE-A-2024-803"]

    def test_any_term_is_enough(self, records):
        filtered = filter_by_search_terms(records, ["subvenciones", "jefatura"])

        assert [r.id for r in filtered] == ["BOE-A-2024-801", "BOE-A-2024-802"]

    def test_no_terms_returns_input(self, records):
        assert filter_by_search_terms(records, []) == records


class TestSummaryService:
    @pytest.mark.asyncio
    async def test_boe_summary(self, service, mock_upstream, records):
        mock_upstream.get_boe_summary.return_value = records

        response = await service.get_boe_summary(GetBoeSummaryRequest(date="20240115", max_items=20))

        mock_upstream.get_boe_summary.assert_awaited_once_with("20240115", 20)
        assert response.type == "BOE"
        assert response.date == "20240115"
        assert response.total_items == 3

    @pytest.mark.asyncio
    async def test_borme_summary_empty_day(self, service, mock_upstream):
        mock_upstream.get_borme_summary.return_value = []

        response = await service.get_borme_summary(GetBormeSummaryRequest(date="20240106"))

        assert response.type == "BORME"
        assert response.summaries == []
        assert response.total_items == 0

    @pytest.mark.asyncio
    async def test_recent_search_filters_upstream_results(self, service, mock_upstream, records):
        # Arrange
        mock_upstream.search_recent_boe.return_value = records
        request = SearchRecentBoeRequest(days_back=7, search_terms=["IA"])

        # Act
        response = await service.search_recent_boe(request)

        # Assert
        mock_upstream.search_recent_boe.assert_awaited_once_with(7, ["IA"])
        assert [r.title for r in response.results] == ["Ley IA", "Resolución"]
        assert response.total_matches == 2
        assert response.days_searched == 7
        assert response.search_terms == ["IA"]

    @pytest.mark.asyncio
    async def test_recent_search_falls_back_when_filter_fails(self, service, mock_upstream, records):
        mock_upstream.search_recent_boe.return_value = records

        with patch(
            "mcpboe.services.summary.filter_by_search_terms",
            side_effect=RuntimeError("boom"),
        ):
            response = await service.search_recent_boe(SearchRecentBoeRequest(search_terms=["IA"]))

        assert response.results == records
        assert response.total_matches == 3
