"""
Test suite for the MCPBoe package.

This package contains the unit tests for MCPBoe, organized by module to
mirror the source code structure.

Test Organization:
    - test_apis/: Transport policy, record models and the BOE client
    - test_contracts/: Request validation and the response envelope
    - test_services/: Legislation, summary and auxiliary façades
    - test_server/: Boundary handlers and the composition root
    - test_utils/: Configuration and logging setup
    - test_cli/: Click commands

Python Learning Notes:
    - Tests are discovered automatically by pytest
    - Test files should start with test_ prefix
    - No test reaches the network: respx intercepts every httpx request
"""
