"""
Tests for the HTTP transport.

Feature: automerge
"""

import base64

import httpx
from hypothesis import given, settings
from hypothesis import strategies as st

from automerge.exceptions import ClientError, ServerError, TransportError
from automerge.retry import RetryConfig
from automerge.transport import HTTPTransport, basic_auth_header, classify_status

URL = "https://api.github.com/repos/octo/repo/pulls/7"


def make_transport(
    handler, max_attempts: int = 3, sleeps: list[float] | None = None
) -> HTTPTransport:
    recorded = sleeps if sleeps is not None else []
    return HTTPTransport(
        username="bot",
        token="s3cret-token",
        retry_config=RetryConfig(max_attempts=max_attempts, initial_delay=1.0),
        http_transport=httpx.MockTransport(handler),
        sleep=recorded.append,
    )


@given(status_code=st.integers(min_value=100, max_value=399))
@settings(max_examples=50)
def test_property_success_statuses_unclassified(status_code: int) -> None:
    """Statuses below 400 carry no error."""
    assert classify_status(status_code) is None


@given(status_code=st.integers(min_value=400, max_value=499))
@settings(max_examples=50)
def test_property_client_errors_stop(status_code: int) -> None:
    """4xx statuses are classified stop."""
    classified = classify_status(status_code)

    assert classified is not None
    assert classified.stop
    assert isinstance(classified.cause, ClientError)
    assert classified.cause.status_code == status_code


@given(status_code=st.integers(min_value=500, max_value=599))
@settings(max_examples=50)
def test_property_server_errors_retryable(status_code: int) -> None:
    """5xx statuses are retryable."""
    classified = classify_status(status_code)

    assert classified is not None
    assert not classified.stop
    assert isinstance(classified.cause, ServerError)


def test_basic_auth_header() -> None:
    header = basic_auth_header("bot", "tok")

    assert header == "Basic " + base64.b64encode(b"bot:tok").decode()


def test_request_carries_auth_and_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"merged": True})

    with make_transport(handler) as transport:
        response = transport.call(URL + "/merge", "PUT", '{"sha": "1234"}')

    assert response.error is None
    assert response.status_code == 200
    assert b'"merged"' in response.body

    request = seen[0]
    assert request.method == "PUT"
    assert str(request.url) == URL + "/merge"
    assert request.headers["Authorization"] == basic_auth_header("bot", "s3cret-token")
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b'{"sha": "1234"}'


def test_server_error_retried_until_budget_spent() -> None:
    calls = 0
    sleeps: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(503, text="unavailable")

    with make_transport(handler, max_attempts=3, sleeps=sleeps) as transport:
        response = transport.call(URL, "GET", "")

    assert calls == 3
    assert sleeps == [1.0, 2.0]
    assert response.status_code == 503
    assert isinstance(response.error, ServerError)


def test_server_error_then_success() -> None:
    statuses = iter([500, 200])

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(next(statuses), json={"mergeable": True})

    with make_transport(handler) as transport:
        response = transport.call(URL, "GET", "")

    assert response.status_code == 200
    assert response.error is None


def test_client_error_not_retried() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(405, json={"message": "Pull Request is not mergeable"})

    with make_transport(handler) as transport:
        response = transport.call(URL + "/merge", "PUT", "{}")

    assert calls == 1
    assert response.status_code == 405
    assert isinstance(response.error, ClientError)
    assert b"not mergeable" in response.body


def test_network_error_retried_and_reported() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise httpx.ConnectError("connection refused", request=request)

    with make_transport(handler, max_attempts=2) as transport:
        response = transport.call(URL, "GET", "")

    assert calls == 2
    assert response.status_code == -1
    assert response.body == b""
    assert isinstance(response.error, TransportError)


def test_transport_is_callable_capability() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"id": 1})

    with make_transport(handler) as transport:
        response = transport(URL, "POST", '{"body": "hi"}')

    assert response.status_code == 201
    assert response.error is None
