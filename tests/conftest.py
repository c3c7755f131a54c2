"""
Shared test fixtures and configuration for MCPBoe tests.

This module provides reusable fixtures for testing the MCPBoe client, façades
and boundary handlers. It centralizes sample upstream payloads and mock
clients so individual test modules stay focused on behavior.

Key Fixtures:
    - api_config: Client configuration pointing at a fake base URL, no backoff
    - boe_client: Real BoeApiClient to be used together with respx
    - mock_upstream: AsyncMock standing in for the upstream client
    - Sample upstream payloads (Spanish field names, as the API sends them)

Python Learning Notes:
    - conftest.py is automatically discovered by pytest
    - Fixtures defined here are available to all tests without import
    - AsyncMock(spec=...) creates awaitable mocks for every async method
"""

from typing import Any, Dict, List
from unittest.mock import AsyncMock

import pytest

from mcpboe.apis.boe import BoeApiClient
from mcpboe.server import create_services
from mcpboe.utils import BoeApiConfig

BASE_URL = "https://boe.test/datosabiertos/api"


@pytest.fixture
def api_config() -> BoeApiConfig:
    """
    Client configuration for tests.

    Retries are enabled but the backoff delay is zero so retry tests never
    sleep for real.

    Returns:
        BoeApiConfig: Configuration with a fake base URL.
    """
    return BoeApiConfig(
        base_url=BASE_URL,
        timeout_seconds=5,
        retry_count=2,
        retry_delay_ms=0,
        max_concurrent_requests=5,
        user_agent="MCPBoe-Tests/1.0",
        enable_logging=True,
    )


@pytest.fixture
def boe_client(api_config) -> BoeApiClient:
    """
    BoeApiClient wired to the test configuration.

    Use together with @respx.mock so no real request leaves the process.
    """
    return BoeApiClient(api_config)


@pytest.fixture
def mock_upstream() -> AsyncMock:
    """
    Mock upstream client.

    Every coroutine of BoeApiClient is an AsyncMock, so tests set
    ``return_value`` or ``side_effect`` per operation and then inspect
    ``await_args``.
    """
    return AsyncMock(spec=BoeApiClient)


@pytest.fixture
def services(mock_upstream):
    """Façade container built around the mock upstream client."""
    return create_services(client=mock_upstream)


@pytest.fixture
def sample_law_payload() -> Dict[str, Any]:
    """
    Sample consolidated law as returned by ``/legislacion/consolidada/{id}``.

    Returns:
        dict: Upstream JSON with Spanish field names and a small structure.
    """
    return {
        "id": "BOE-A-2018-16673",
        "titulo": "Ley Orgánica 3/2018, de Protección de Datos Personales",
        "fecha": "20181206",
        "url": "https://www.boe.es/eli/es/lo/2018/12/05/3",
        "tipo_norma": "Ley Orgánica",
        "numero": "3/2018",
        "departamento": "Jefatura del Estado",
        "rango": "Ley Orgánica",
        "vigente": True,
        "texto": "Artículo 1. Objeto de la ley.",
        "estructura": {
            "titulos": [
                {"numero": "I", "titulo": "Disposiciones generales"},
                {"numero": "II", "titulo": "Principios de protección de datos"},
            ],
            "capitulos": [{"numero": "1", "titulo": "Objeto"}],
            "articulos": [
                {"numero": "1", "titulo": "Objeto de la ley", "contenido": "..."},
                {"numero": "2", "titulo": "Ámbito de aplicación", "contenido": "..."},
                {"numero": "3", "titulo": "Datos de las personas fallecidas", "contenido": "..."},
            ],
        },
    }


@pytest.fixture
def sample_summary_items() -> List[Dict[str, Any]]:
    """Three summary entries as found under the ``items`` envelope key."""
    return [
        {
            "id": "BOE-A-2024-801",
            "titulo": "Ley IA",
            "fecha": "20240115",
            "seccion": "I",
            "emisor": "Jefatura del Estado",
        },
        {
            "id": "BOE-A-2024-802",
            "titulo": "Orden de subvenciones",
            "fecha": "20240115",
            "seccion": "III",
            "emisor": "Ministerio de Cultura",
        },
        {
            "id": "BOE-A-2024-803",
            "titulo": "Resolución",
            "fecha": "20240115",
            "seccion": "III",
            "emisor": "Agencia IA",
        },
    ]


@pytest.fixture
def sample_departments() -> List[Dict[str, Any]]:
    """Department table rows under the ``items`` envelope key."""
    return [
        {"codigo": "1820", "descripcion": "Jefatura del Estado", "tipo": "departamento"},
        {"codigo": "7723", "descripcion": "Ministerio de Hacienda", "tipo": "departamento"},
    ]
