"""Unit tests for the PUT-JSON request helper and the shared client pool."""
from __future__ import annotations

import json

import httpx
import pytest

from currents_cancel.base.errors import HttpClientError
from currents_cancel.base.http import close_all_clients, get_httpx_client, request
from currents_cancel.base.models import CancellationRequest
from currents_cancel.tests.utils import (
    API_URL,
    CANCEL_PATH,
    GITHUB_RUN_ATTEMPT,
    GITHUB_RUN_ID,
    CallCounter,
    mock_client,
    reply,
)

URL = f"{API_URL}{CANCEL_PATH}"
BODY = {"githubRunId": GITHUB_RUN_ID, "githubRunAttempt": GITHUB_RUN_ATTEMPT}


def test_returns_typed_response_on_200():
    result = {
        "githubRunId": GITHUB_RUN_ID,
        "githubRunAttempt": GITHUB_RUN_ATTEMPT,
        "status": "OK",
        "actor": "api",
        "canceledAt": "Sun Oct 18 2026",
        "reason": "api call",
    }
    response = request(URL, BODY, "token", client=mock_client(reply(200, json_body=result)))
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.result == result


def test_sends_put_with_bearer_token_and_json_body():
    counter = CallCounter(reply(200, json_body={"status": "OK"}))
    body = CancellationRequest(github_run_id=GITHUB_RUN_ID, github_run_attempt=GITHUB_RUN_ATTEMPT)
    request(URL, body, "token-123", client=mock_client(counter))

    assert counter.calls == 1
    sent = counter.requests[0]
    assert sent.method == "PUT"
    assert str(sent.url) == URL
    assert sent.headers["authorization"] == "Bearer token-123"
    assert sent.headers["content-type"] == "application/json"
    assert json.loads(sent.content) == BODY


def test_non_2xx_raises_with_serialized_body():
    error = json.dumps({"error": "Invalid params"})
    with pytest.raises(HttpClientError) as ei:
        request(URL, BODY, "token", client=mock_client(reply(400, text=error)))
    assert error in str(ei.value)
    assert ei.value.status_code == 400
    assert ei.value.result == {"error": "Invalid params"}


def test_non_2xx_prefers_message_field():
    with pytest.raises(HttpClientError) as ei:
        request(URL, BODY, "token", client=mock_client(reply(401, json_body={"message": "Unauthorized"})))
    assert str(ei.value) == "Unauthorized"


def test_non_2xx_without_body_reports_status():
    with pytest.raises(HttpClientError) as ei:
        request(URL, BODY, "token", client=mock_client(reply(500)))
    assert str(ei.value) == "Failed request: (500)"


def test_404_resolves_with_null_result_even_with_body():
    response = request(URL, BODY, "token", client=mock_client(reply(404, json_body={"status": "OK"})))
    assert response.status_code == 404
    assert response.result is None


@pytest.mark.parametrize("text", ["", "not json"])
def test_empty_or_unparseable_2xx_body_is_null(text):
    response = request(URL, BODY, "token", client=mock_client(reply(200, text=text)))
    assert response.status_code == 200
    assert response.result is None


def test_transport_errors_propagate():
    def handler(req: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=req)

    with pytest.raises(httpx.ConnectError):
        request(URL, BODY, "token", client=mock_client(handler))


def test_to_dict_uses_wire_names():
    response = request(URL, BODY, "token", client=mock_client(reply(200, json_body={"status": "OK"})))
    data = response.to_dict()
    assert data["statusCode"] == 200
    assert data["result"] == {"status": "OK"}


def test_pool_same_key_returns_same_instance():
    c1 = get_httpx_client("cancel")
    c2 = get_httpx_client("cancel")
    assert c1 is c2, "Expected pooled client instances to be identical for same key"


def test_pool_different_purpose_returns_different_instances():
    c1 = get_httpx_client("cancel")
    c2 = get_httpx_client("other")
    assert c1 is not c2, "Different purposes should not share the same client instance"


def test_pool_client_has_no_timeout_by_default():
    client = get_httpx_client("cancel")
    assert client.timeout.read is None
    assert client.headers["user-agent"] == "cancel-currents-run-action"


def test_pool_client_honors_timeout_env(monkeypatch):
    monkeypatch.setenv("CURRENTS_HTTP_TIMEOUT_SECONDS", "2.5")
    client = get_httpx_client("cancel")
    assert client.timeout.read == 2.5


def test_close_all_clients_closes_pooled_clients():
    client = get_httpx_client("cancel")
    close_all_clients()
    assert client.is_closed
    assert get_httpx_client("cancel") is not client


def test_pool_client_follows_redirects():
    assert get_httpx_client("cancel").follow_redirects is True


def test_pooled_request_follows_307_and_keeps_put(monkeypatch):
    seen = []

    def handler(req: httpx.Request) -> httpx.Response:
        seen.append((req.method, req.url.path, req.headers.get("authorization"), json.loads(req.content)))
        if req.url.path == "/v1/runs/cancel-by-github-ci":
            return httpx.Response(307, headers={"Location": "http://localhost:4000/v2/runs/cancel-by-github-ci"})
        return httpx.Response(200, json={"status": "OK"})

    real_client = httpx.Client
    monkeypatch.setattr(
        httpx,
        "Client",
        lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
    )

    response = request(URL, BODY, "token")

    assert response.status_code == 200
    assert response.result == {"status": "OK"}
    assert [s[0] for s in seen] == ["PUT", "PUT"]
    assert seen[1][1] == "/v2/runs/cancel-by-github-ci"
    assert seen[1][2] == "Bearer token"
    assert seen[1][3] == BODY


def test_cross_origin_redirect_drops_authorization(monkeypatch):
    seen = []

    def handler(req: httpx.Request) -> httpx.Response:
        seen.append(req)
        if req.url.host == "localhost":
            return httpx.Response(308, headers={"Location": "https://api.currents.dev/v1/runs/cancel-by-github-ci"})
        return httpx.Response(200, json={"status": "OK"})

    real_client = httpx.Client
    monkeypatch.setattr(
        httpx,
        "Client",
        lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
    )

    response = request(URL, BODY, "token")

    assert response.result == {"status": "OK"}
    assert seen[1].method == "PUT"
    assert "authorization" not in seen[1].headers
