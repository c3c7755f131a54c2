"""
MCPBoe: Client facade for the Spanish BOE (Boletín Oficial del Estado) open-data API.

This is the main package initialization file for MCPBoe, a Python library that
translates a small set of request/response contracts into calls against the BOE
open-data REST API and returns uniform, validated records.

The MCPBoe system provides:
    - Consolidated legislation search, law retrieval and law structure
    - Daily BOE and BORME gazette summaries and recent-publication search
    - Auxiliary lookup tables (departments, legal ranges, codes)
    - Timeout and exponential-backoff retry around every upstream call
    - Tolerant deserialization of the upstream JSON envelopes

Package Structure:
    - apis/: Upstream HTTP client, transport retry policy and record models
    - contracts/: Request DTOs (validated) and response DTOs / envelope
    - services/: Legislation, summary and auxiliary façades
    - server/: Boundary handlers that map outcomes to status codes and envelopes
    - cli/: Click command-line interface over the handlers
    - utils/: Logging setup and configuration

Environment Requirements:
    - Python 3.10+
    - Optional BOE_API_* variables (see utils/config.py)

Version History:
    - 0.1.0: Initial release with legislation, summary and auxiliary operations
"""

__version__ = "0.1.0"
