"""
Abstract interface for the BOE open-data API client.

This module defines the contract the orchestration façades depend on. The
concrete implementation lives in boe.py; tests and alternative transports can
provide their own subclass without touching the façades.

Key Components:
    - UpstreamClient: Abstract base class with one coroutine per upstream operation
    - validate_date_format: Shared check for the 8-digit ``YYYYMMDD`` dates the
      upstream API embeds in its paths

Return Conventions:
    - Single-entity operations return ``None`` when the upstream answers with a
      non-success status ("not found")
    - List operations return an empty list in the same situation
    - Transport failures raise mcpboe.errors.TransportError

Python Learning Notes:
    - ABC (Abstract Base Class): Forces subclasses to implement abstract methods
    - async def in an ABC: subclasses must provide coroutine implementations
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .models import (
    AuxiliaryRecord,
    LegislationRecord,
    StructureRecord,
    SummaryRecord,
)

DATE_PATTERN = re.compile(r"^[0-9]{8}$")


def validate_date_format(date_str: str) -> None:
    r"""
    Validate that a date string is exactly eight digits (``YYYYMMDD``).

    Only the shape is checked; the upstream API decides whether a well-formed
    date has a published gazette.

    Args:
        date_str (str): Date string to validate, e.g. "20240115".

    Raises:
        ValueError: If the string is not exactly eight ASCII digits.

    Examples:
        >>> validate_date_format("20240115")  # Valid, no exception
        >>> validate_date_format("2024-1-5")  # Raises ValueError
    """
    if not isinstance(date_str, str) or not DATE_PATTERN.match(date_str):
        raise ValueError(f"Date '{date_str}' must be in YYYYMMDD format")


class UpstreamClient(ABC):
    """
    Abstract base class for BOE open-data API clients.

    Subclasses must implement every coroutine below. Implementations build a
    deterministic URL from already validated inputs, send it through the
    transport policy and decode the response into record models.

    Integration Points:
        - Implemented by BoeApiClient (boe.py)
        - Consumed by LegislationService, SummaryService and AuxiliaryService
    """

    @abstractmethod
    async def search_consolidated_legislation(
        self, query: str, limit: int = 10, offset: int = 0
    ) -> List[LegislationRecord]:
        """
        Search consolidated legislation.

        Args:
            query (str): Free-text query, percent-encoded into ``q``.
            limit (int): Page size, clamped to [1, 100].
            offset (int): Number of results to skip, clamped to >= 0.

        Returns:
            List[LegislationRecord]: Results in upstream order; empty when the
                upstream answers with a non-success status.
        """

    @abstractmethod
    async def get_consolidated_law(
        self,
        law_id: str,
        include_metadata: bool = True,
        include_analysis: bool = False,
        include_full_text: bool = False,
    ) -> Optional[LegislationRecord]:
        """
        Fetch one consolidated law.

        Returns:
            Optional[LegislationRecord]: The law, or None when not found.
        """

    @abstractmethod
    async def get_law_structure(self, law_id: str) -> Optional[StructureRecord]:
        """Fetch the title/chapter/article structure of a law, or None."""

    @abstractmethod
    async def get_boe_summary(
        self, date: str, max_items: int = 50
    ) -> List[SummaryRecord]:
        """Fetch the BOE summary for a ``YYYYMMDD`` date."""

    @abstractmethod
    async def get_borme_summary(
        self, date: str, max_items: int = 50
    ) -> List[SummaryRecord]:
        """Fetch the BORME (company registry gazette) summary for a date."""

    @abstractmethod
    async def search_recent_boe(
        self, days_back: int, search_terms: Sequence[str]
    ) -> List[SummaryRecord]:
        """Fetch recent BOE items matching any of the search terms."""

    @abstractmethod
    async def get_departments_table(
        self, search_term: str = "", limit: int = 100
    ) -> List[AuxiliaryRecord]:
        """Fetch the departments table, optionally filtered."""

    @abstractmethod
    async def get_legal_ranges_table(self, limit: int = 100) -> List[AuxiliaryRecord]:
        """Fetch the legal ranges table."""

    @abstractmethod
    async def get_code_description(self, code: str) -> Optional[AuxiliaryRecord]:
        """Fetch the description of a single code, or None."""

    @abstractmethod
    async def search_auxiliary_data(self, query: str) -> List[AuxiliaryRecord]:
        """Full-text search over the auxiliary tables."""
