"""
Tests for the CLI subcommands.

create_services is patched so every command runs against façades built on a
mock upstream client; the commands print the JSON envelope on stdout.

Python Learning Notes:
    - patch() replaces a name where it is looked up, here mcpboe.cli.common
    - json.loads(result.stdout) parses the envelope the command printed
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from mcpboe.apis.models import AuxiliaryRecord, LegislationRecord, SummaryRecord
from mcpboe.cli.main import main
from mcpboe.errors import TransportError
from mcpboe.server import create_services


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def run_cli(cli_runner, mock_upstream):
    """
    Invoke the CLI with the upstream client replaced by mock_upstream.

    Returns:
        Callable taking the argument list and returning the click Result.
    """

    def _run(args):
        with patch(
            "mcpboe.cli.common.create_services",
            side_effect=lambda config: create_services(config, client=mock_upstream),
        ), patch("mcpboe.cli.common.load_dotenv"):
            return cli_runner.invoke(main, args)

    return _run


class TestLegislationCommands:
    def test_search_prints_envelope(self, run_cli, mock_upstream):
        # Arrange
        mock_upstream.search_consolidated_legislation.return_value = [
            LegislationRecord(id="BOE-A-1", title="Ley de prueba")
        ]

        # Act
        result = run_cli(["search", "protección de datos", "--limit", "5"])

        # Assert
        assert result.exit_code == 0
        body = json.loads(result.stdout)
        assert body["success"] is True
        assert body["data"]["results"][0]["title"] == "Ley de prueba"
        mock_upstream.search_consolidated_legislation.assert_awaited_once_with(
            "protección de datos", 5, 0
        )

    def test_law_not_found_exits_non_zero(self, run_cli, mock_upstream):
        mock_upstream.get_consolidated_law.return_value = None

        result = run_cli(["law", "BOE-A-0000-0"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"] == "Law not found: BOE-A-0000-0"

    def test_law_flags_are_forwarded(self, run_cli, mock_upstream):
        mock_upstream.get_consolidated_law.return_value = LegislationRecord(id="BOE-A-1")

        result = run_cli(["law", "BOE-A-1", "--no-metadata", "--analysis", "--full-text"])

        assert result.exit_code == 0
        mock_upstream.get_consolidated_law.assert_awaited_once_with("BOE-A-1", False, True, True)

    def test_structure(self, run_cli, mock_upstream):
        mock_upstream.get_law_structure.return_value = None

        result = run_cli(["structure", "BOE-A-1"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["law_id"] == "BOE-A-1"


class TestSummaryCommands:
    def test_boe_summary(self, run_cli, mock_upstream):
        mock_upstream.get_boe_summary.return_value = [SummaryRecord(id="BOE-A-2024-801")]

        result = run_cli(["summary", "20240115"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["type"] == "BOE"

    def test_borme_flag(self, run_cli, mock_upstream):
        mock_upstream.get_borme_summary.return_value = []

        result = run_cli(["summary", "20240115", "--borme", "--max-items", "10"])

        assert result.exit_code == 0
        mock_upstream.get_borme_summary.assert_awaited_once_with("20240115", 10)

    def test_bad_date_exits_non_zero(self, run_cli, mock_upstream):
        result = run_cli(["summary", "2024-1-5"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"].startswith("Validation errors")
        mock_upstream.get_boe_summary.assert_not_awaited()

    def test_recent(self, run_cli, mock_upstream):
        mock_upstream.search_recent_boe.return_value = [
            SummaryRecord(id="1", title="Ley IA"),
            SummaryRecord(id="2", title="Otra"),
        ]

        result = run_cli(["recent", "IA", "--days", "3"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["total_matches"] == 1
        mock_upstream.search_recent_boe.assert_awaited_once_with(3, ["IA"])

    def test_upstream_failure_exits_non_zero(self, run_cli, mock_upstream):
        mock_upstream.get_boe_summary.side_effect = TransportError("failed", attempts=4)

        result = run_cli(["summary", "20240115"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"] == "Upstream service error"


class TestAuxiliaryCommands:
    def test_departments_without_search(self, run_cli, mock_upstream):
        mock_upstream.get_departments_table.return_value = [AuxiliaryRecord(code="1820")]

        result = run_cli(["departments"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["total_count"] == 1

    def test_departments_with_search(self, run_cli, mock_upstream):
        mock_upstream.get_departments_table.return_value = []

        result = run_cli(["departments", "--search", "Hacienda", "--limit", "10"])

        assert result.exit_code == 0
        mock_upstream.get_departments_table.assert_awaited_once_with("Hacienda", 10)

    def test_ranges(self, run_cli, mock_upstream):
        mock_upstream.get_legal_ranges_table.return_value = []

        result = run_cli(["ranges", "--date", "20240115"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["date"] == "20240115"

    def test_single_code(self, run_cli, mock_upstream):
        mock_upstream.get_code_description.return_value = AuxiliaryRecord(
            code="1820", description="Jefatura del Estado", type="departamento"
        )

        result = run_cli(["codes", "1820"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["description"] == "Jefatura del Estado"

    def test_several_codes(self, run_cli, mock_upstream):
        mock_upstream.get_code_description.side_effect = [AuxiliaryRecord(code="A"), None]

        result = run_cli(["codes", "A", "B"])

        data = json.loads(result.stdout)["data"]
        assert data["total_codes"] == 2
        assert data["found_codes"] == 1

    def test_aux_search(self, run_cli, mock_upstream):
        mock_upstream.search_auxiliary_data.return_value = []

        result = run_cli(["aux-search", "ministerio"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["search_term"] == "ministerio"
