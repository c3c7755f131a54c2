"""
Boundary layer for MCPBoe.

create_services() is the composition root: it builds the upstream client
once and injects it into the three façades. Handlers in handlers.py take the
façade they need explicitly.

Example:
    >>> services = create_services()
    >>> result = await handlers.handle_get_boe_summary(
    ...     services.summary, {"date": "20240115"}
    ... )
    >>> await services.aclose()
"""

from dataclasses import dataclass
from typing import Optional

from ..apis.boe import BoeApiClient
from ..services import AuxiliaryService, LegislationService, SummaryService
from ..utils import BoeApiConfig
from . import handlers
from .handlers import HandlerResult


@dataclass
class BoeServices:
    """The shared upstream client and the façades built on it."""

    client: BoeApiClient
    legislation: LegislationService
    summary: SummaryService
    auxiliary: AuxiliaryService

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "BoeServices":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def create_services(
    config: Optional[BoeApiConfig] = None,
    client: Optional[BoeApiClient] = None,
) -> BoeServices:
    """Build one upstream client and inject it into every façade."""
    client = client or BoeApiClient(config or BoeApiConfig())
    return BoeServices(
        client=client,
        legislation=LegislationService(client),
        summary=SummaryService(client),
        auxiliary=AuxiliaryService(client),
    )


__all__ = ["BoeServices", "HandlerResult", "create_services", "handlers"]
