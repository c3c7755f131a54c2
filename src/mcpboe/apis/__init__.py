"""
Upstream API client module for the BOE open-data service.

The module is layered leaf-first:
    - transport.py: RetryPolicy, the timeout + exponential-backoff wrapper
    - models.py: Frozen pydantic records decoded from upstream JSON
    - base.py: UpstreamClient, the abstract contract the façades depend on
    - boe.py: BoeApiClient, the httpx implementation of that contract

Usage Example:
    from mcpboe.apis import BoeApiClient

    async with BoeApiClient() as client:
        summary = await client.get_boe_summary("20240115")
"""

from .base import UpstreamClient, validate_date_format
from .boe import ENVELOPES, BoeApiClient, decode_envelope
from .models import (
    ArticleEntry,
    AuxiliaryRecord,
    ChapterEntry,
    LegislationRecord,
    StructureRecord,
    SummaryRecord,
    TitleEntry,
)
from .transport import RetryPolicy

__all__ = [
    "ArticleEntry",
    "AuxiliaryRecord",
    "BoeApiClient",
    "ChapterEntry",
    "ENVELOPES",
    "LegislationRecord",
    "RetryPolicy",
    "StructureRecord",
    "SummaryRecord",
    "TitleEntry",
    "UpstreamClient",
    "decode_envelope",
    "validate_date_format",
]
