"""
BOE open-data API client.

This module provides the concrete UpstreamClient for the Spanish Boletín
Oficial del Estado open-data REST API (https://www.boe.es/datosabiertos/api).
It covers consolidated legislation, BOE/BORME daily summaries, recent
publication search and the auxiliary lookup tables.

Key Features:
    - One coroutine per upstream operation, one HTTP request per call
    - Deterministic URLs: free-text values percent-encoded, identifiers and
      dates embedded in the path
    - Timeout and exponential-backoff retry through RetryPolicy (transport.py)
    - Tolerant decoding of three envelope shapes selected by a dispatch table
    - Non-success statuses mapped to None / [] instead of exceptions

Envelope Shapes:
    - ``{"resultados": [...]}`` for legislation search
    - ``{"items": [...]}`` for summaries, recent search and auxiliary lists
    - a bare object for single-entity fetches (law, structure, code)

Connection Handling:
    The client wraps one httpx.AsyncClient whose pool is capped at
    ``max_concurrent_requests``. Build the client once at process start and
    pass it to every façade. Headers and timeouts are sent per request.

Example Usage:
    >>> async with BoeApiClient(BoeApiConfig()) as client:
    ...     laws = await client.search_consolidated_legislation("protección de datos")
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..errors import BoeError, UpstreamResponseError
from ..utils import BoeApiConfig, get_logger
from .base import UpstreamClient
from .models import (
    AuxiliaryRecord,
    BoeRecord,
    LegislationRecord,
    StructureRecord,
    SummaryRecord,
)
from .transport import RetryPolicy

MAX_SEARCH_LIMIT = 100
MAX_TABLE_LIMIT = 1000


@dataclass(frozen=True)
class EnvelopeSpec:
    """
    How to decode the upstream body of one operation.

    Attributes:
        key: Name of the wrapper key holding a list of records, or None when
            the body is a single bare record.
        model: Record model used for each element (or for the bare body).
    """

    key: Optional[str]
    model: Type[BoeRecord]

    @property
    def is_list(self) -> bool:
        return self.key is not None


ENVELOPES: Dict[str, EnvelopeSpec] = {
    "search_consolidated_legislation": EnvelopeSpec("resultados", LegislationRecord),
    "get_consolidated_law": EnvelopeSpec(None, LegislationRecord),
    "get_law_structure": EnvelopeSpec(None, StructureRecord),
    "get_boe_summary": EnvelopeSpec("items", SummaryRecord),
    "get_borme_summary": EnvelopeSpec("items", SummaryRecord),
    "search_recent_boe": EnvelopeSpec("items", SummaryRecord),
    "get_departments_table": EnvelopeSpec("items", AuxiliaryRecord),
    "get_legal_ranges_table": EnvelopeSpec("items", AuxiliaryRecord),
    "get_code_description": EnvelopeSpec(None, AuxiliaryRecord),
    "search_auxiliary_data": EnvelopeSpec("items", AuxiliaryRecord),
}


def decode_envelope(
    operation: str, payload: Any
) -> Union[BoeRecord, List[BoeRecord]]:
    """
    Decode an upstream JSON body according to the operation's envelope.

    A missing (or null) wrapper key decodes to an empty list. Wrapper keys are
    matched case-insensitively, like record fields.

    Args:
        operation: Key into ENVELOPES.
        payload: Parsed JSON body.

    Returns:
        A single record for bare envelopes, otherwise a list of records.

    Raises:
        KeyError: If the operation has no registered envelope.
        UpstreamResponseError: If the body does not have the expected shape.
    """
    spec = ENVELOPES[operation]

    if not isinstance(payload, dict):
        raise UpstreamResponseError(
            operation,
            f"Expected a JSON object for {operation}, got {type(payload).__name__}",
        )

    try:
        if not spec.is_list:
            return spec.model.model_validate(payload)

        items = next(
            (value for key, value in payload.items() if str(key).lower() == spec.key),
            None,
        )
        if items is None:
            return []
        if not isinstance(items, list):
            raise UpstreamResponseError(
                operation, f"Expected '{spec.key}' to be a list for {operation}"
            )
        return [spec.model.model_validate(item) for item in items]
    except ValidationError as e:
        raise UpstreamResponseError(
            operation, f"Could not decode {operation} response: {e.error_count()} error(s)"
        ) from e


def encode_query_value(value: Any) -> str:
    """Percent-encode a query value, reserving every delimiter."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def _clamp(value: int, low: int, high: Optional[int] = None) -> int:
    value = max(low, value)
    return min(value, high) if high is not None else value


class BoeApiClient(UpstreamClient):
    """
    Async client for the BOE open-data REST API.

    Each public coroutine issues exactly one logical request (possibly retried
    by the transport policy) and returns record models.

    Attributes:
        config (BoeApiConfig): Client configuration.
        base_url (str): Root URL, without trailing slash.
        policy (RetryPolicy): Timeout and retry policy applied to every call.
        headers (Dict[str, str]): Headers sent with every request.
        http_client (httpx.AsyncClient): Shared pooled client.

    Thread Safety:
        Safe to share between concurrent tasks of one event loop; the only
        shared state is the httpx connection pool.
    """

    def __init__(
        self,
        config: Optional[BoeApiConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        policy: Optional[RetryPolicy] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration; read from the environment when None.
            http_client: Pre-built httpx.AsyncClient to use. When None, one is
                created with a pool capped at ``config.max_concurrent_requests``
                and closed by aclose().
            policy: Retry policy; derived from ``config`` when None.
        """
        self.config = config or BoeApiConfig()
        self.base_url = self.config.base_url
        self.policy = policy or RetryPolicy.from_config(self.config)
        self.headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        self.logger = get_logger(__name__)

        self._owns_http_client = http_client is None
        if http_client is None:
            limit = self.config.max_concurrent_requests
            http_client = httpx.AsyncClient(
                limits=httpx.Limits(
                    max_connections=limit, max_keepalive_connections=limit
                ),
                follow_redirects=True,
            )
        self.http_client = http_client

    async def __aenter__(self) -> "BoeApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    def _build_url(
        self, path: str, query: Optional[Sequence[Tuple[str, str]]] = None
    ) -> str:
        """
        Join the base URL, a path and already-encoded query pairs.

        Args:
            path: Path starting with "/"; dynamic segments must be encoded.
            query: (name, encoded value) pairs in the order they should appear.
        """
        url = f"{self.base_url}{path}"
        if query:
            url += "?" + "&".join(f"{name}={value}" for name, value in query)
        return url

    async def _get_json(self, operation: str, url: str) -> Optional[Any]:
        """
        GET a URL through the retry policy and parse the JSON body.

        Returns:
            The parsed body, or None when the upstream status is non-success.

        Raises:
            TransportError: Propagated from the retry policy.
            UpstreamResponseError: If a success body is not valid JSON.
        """
        if self.config.enable_logging:
            self.logger.info(f"BOE API request [{operation}]: GET {url}")

        try:
            response = await self.policy.send(
                self.http_client, "GET", url, headers=self.headers
            )
        except BoeError as e:
            self.logger.error(f"Error calling BOE API for {operation}: {e}")
            raise

        if not response.is_success:
            self.logger.warning(
                f"BOE API returned {response.status_code} for {operation}: {url}"
            )
            return None

        try:
            return response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON from BOE API for {operation}: {url}")
            raise UpstreamResponseError(
                operation, f"Invalid JSON body returned for {operation}"
            ) from e

    async def _fetch_one(self, operation: str, url: str) -> Optional[BoeRecord]:
        payload = await self._get_json(operation, url)
        if payload is None:
            return None
        return decode_envelope(operation, payload)

    async def _fetch_many(self, operation: str, url: str) -> List[BoeRecord]:
        payload = await self._get_json(operation, url)
        if payload is None:
            return []
        return decode_envelope(operation, payload)

    async def search_consolidated_legislation(
        self, query: str, limit: int = 10, offset: int = 0
    ) -> List[LegislationRecord]:
        limit = _clamp(limit, 1, MAX_SEARCH_LIMIT)
        offset = _clamp(offset, 0)
        if self.config.enable_logging:
            self.logger.info(
                f"Searching consolidated legislation: {query!r}, limit={limit}, offset={offset}"
            )

        url = self._build_url(
            "/legislacion/consolidada",
            [
                ("q", encode_query_value(query)),
                ("limit", str(limit)),
                ("offset", str(offset)),
            ],
        )
        return await self._fetch_many("search_consolidated_legislation", url)

    async def get_consolidated_law(
        self,
        law_id: str,
        include_metadata: bool = True,
        include_analysis: bool = False,
        include_full_text: bool = False,
    ) -> Optional[LegislationRecord]:
        url = self._build_url(
            f"/legislacion/consolidada/{quote(law_id, safe='')}",
            [
                ("metadata", encode_query_value(include_metadata)),
                ("analysis", encode_query_value(include_analysis)),
                ("fulltext", encode_query_value(include_full_text)),
            ],
        )
        return await self._fetch_one("get_consolidated_law", url)

    async def get_law_structure(self, law_id: str) -> Optional[StructureRecord]:
        url = self._build_url(f"/legislacion/consolidada/{quote(law_id, safe='')}/estructura")
        return await self._fetch_one("get_law_structure", url)

    async def get_boe_summary(
        self, date: str, max_items: int = 50
    ) -> List[SummaryRecord]:
        url = self._build_url(
            f"/sumario/boe/{quote(date, safe='')}",
            [("limit", str(_clamp(max_items, 1, MAX_TABLE_LIMIT)))],
        )
        return await self._fetch_many("get_boe_summary", url)

    async def get_borme_summary(
        self, date: str, max_items: int = 50
    ) -> List[SummaryRecord]:
        url = self._build_url(
            f"/sumario/borme/{quote(date, safe='')}",
            [("limit", str(_clamp(max_items, 1, MAX_TABLE_LIMIT)))],
        )
        return await self._fetch_many("get_borme_summary", url)

    async def search_recent_boe(
        self, days_back: int, search_terms: Sequence[str]
    ) -> List[SummaryRecord]:
        # Terms are encoded individually so a comma inside a term survives
        terms = ",".join(encode_query_value(term) for term in search_terms)
        if self.config.enable_logging:
            self.logger.info(
                f"Searching recent BOE: days_back={days_back}, terms={', '.join(search_terms)}"
            )

        url = self._build_url(
            "/buscar/reciente", [("dias", str(days_back)), ("terminos", terms)]
        )
        return await self._fetch_many("search_recent_boe", url)

    async def get_departments_table(
        self, search_term: str = "", limit: int = 100
    ) -> List[AuxiliaryRecord]:
        url = self._build_url(
            "/tablas/departamentos",
            [
                ("q", encode_query_value(search_term)),
                ("limit", str(_clamp(limit, 1, MAX_TABLE_LIMIT))),
            ],
        )
        return await self._fetch_many("get_departments_table", url)

    async def get_legal_ranges_table(self, limit: int = 100) -> List[AuxiliaryRecord]:
        url = self._build_url(
            "/tablas/rangos", [("limit", str(_clamp(limit, 1, MAX_TABLE_LIMIT)))]
        )
        return await self._fetch_many("get_legal_ranges_table", url)

    async def get_code_description(self, code: str) -> Optional[AuxiliaryRecord]:
        url = self._build_url(f"/codigo/{quote(code, safe='')}")
        return await self._fetch_one("get_code_description", url)

    async def search_auxiliary_data(self, query: str) -> List[AuxiliaryRecord]:
        url = self._build_url("/tablas/buscar", [("q", encode_query_value(query))])
        return await self._fetch_many("search_auxiliary_data", url)
