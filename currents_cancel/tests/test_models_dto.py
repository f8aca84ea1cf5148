from __future__ import annotations

from currents_cancel.base.models import (
    CancellationRequest,
    CancellationResult,
    TypedResponse,
    parse_cancellation_result,
)


def test_cancellation_request_serializes_by_alias():
    body = CancellationRequest(github_run_id="45166321", github_run_attempt="2")
    assert body.to_wire() == {"githubRunId": "45166321", "githubRunAttempt": "2"}


def test_cancellation_request_accepts_wire_names():
    body = CancellationRequest.model_validate({"githubRunId": "1", "githubRunAttempt": "1"})
    assert body.github_run_id == "1"


def test_parse_cancellation_result_coerces_numeric_attempt():
    parsed = parse_cancellation_result(
        {
            "status": "FAILED",
            "data": {
                "actor": "api",
                "canceledAt": "2026-10-18T10:00:00Z",
                "reason": "api call",
                "githubRunId": 45166321,
                "githubRunAttempt": 1,
            },
        }
    )
    assert isinstance(parsed, CancellationResult)
    assert parsed.status == "FAILED"
    assert parsed.data.github_run_id == "45166321"
    assert parsed.data.github_run_attempt == "1"


def test_parse_cancellation_result_rejects_other_shapes():
    assert parse_cancellation_result({"status": "OK", "actor": "api"}) is None
    assert parse_cancellation_result(None) is None
    assert parse_cancellation_result({"status": "MAYBE", "data": {}}) is None


def test_typed_response_defaults():
    response = TypedResponse(status_code=204)
    assert response.to_dict() == {"statusCode": 204, "headers": {}, "result": None}
