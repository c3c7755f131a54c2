"""
Tests for the response envelope.
"""

import json

from mcpboe.apis.models import LegislationRecord
from mcpboe.contracts.responses import ApiResponse, GetLawResponse, SearchLegislationResponse


class TestApiResponse:
    def test_ok_wraps_data(self):
        response = ApiResponse.ok(SearchLegislationResponse(query="ley"))

        assert response.success is True
        assert response.error is None
        assert response.timestamp.tzinfo is not None

    def test_fail_carries_error(self):
        response = ApiResponse.fail("Law not found: BOE-A-1")

        assert response.success is False
        assert response.data is None
        assert response.error == "Law not found: BOE-A-1"

    def test_json_uses_snake_case_names(self):
        law = LegislationRecord.model_validate({"id": "BOE-A-1", "tipo_norma": "Ley"})
        body = json.loads(ApiResponse.ok(GetLawResponse(law=law)).model_dump_json())

        assert body["success"] is True
        assert body["data"]["law"]["norm_type"] == "Ley"
        assert body["data"]["metadata"] is None
