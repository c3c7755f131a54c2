"""
Orchestration façades over the BOE upstream client.

Each façade is stateless and holds only a reference to the shared
UpstreamClient. A call is a validate -> fetch -> shape pipeline: request DTOs
arrive already validated, the upstream client is called once (or once per
code for batch lookups), and the records are shaped into response DTOs.
"""

from .auxiliary import AuxiliaryService
from .legislation import LegislationService
from .summary import SummaryService

__all__ = ["AuxiliaryService", "LegislationService", "SummaryService"]
