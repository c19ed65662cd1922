from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from fbgraph import client
from fbgraph.errors import TransportError
from fbgraph.params import StrParam
from fbgraph.request import build_request


def test_send_passes_timeout_and_returns_raw_response(stub_session) -> None:
    adapter = stub_session({"id": "1"}, status_code=400)

    response = client.send(build_request("GET", "me", "T"), timeout=3)

    assert response.status_code == 400
    assert response.json() == {"id": "1"}
    assert adapter.sent[0]["timeout"] == 3


def test_send_uses_configured_timeout_by_default(stub_session) -> None:
    adapter = stub_session()

    client.send(build_request("GET", "me", "T"))

    assert adapter.sent[0]["timeout"] == 10


@pytest.mark.parametrize(
    "exc",
    [
        requests.exceptions.ConnectTimeout("timed out"),
        requests.exceptions.ReadTimeout("timed out"),
        requests.exceptions.ConnectionError("dns failure"),
        requests.exceptions.SSLError("bad certificate"),
    ],
)
def test_network_failures_become_transport_errors(stub_session, exc) -> None:
    stub_session(exc=exc)

    with pytest.raises(TransportError) as info:
        client.send(build_request("GET", "me", "T"))

    assert info.value.__cause__ is exc


def test_req_builds_and_sends(stub_session) -> None:
    adapter = stub_session()

    client.req("GET", "me/accounts", "T", ["id", "name"], StrParam("limit", "5"), timeout=4)

    sent = adapter.sent[0]
    query = parse_qs(urlsplit(sent["request"].url).query)
    assert query == {"access_token": ["T"], "fields": ["id,name"], "limit": ["5"]}
    assert sent["timeout"] == 4


def test_post_body_is_identical_when_sent_twice(stub_session) -> None:
    adapter = stub_session()
    request = build_request("POST", "me", "T", None, [StrParam("method", "GET")])

    client.send(request)
    client.send(request)

    assert adapter.sent[0]["body"] == adapter.sent[1]["body"] == b"access_token=T&method=GET"


def test_follow_requests_continuation_url_as_is(stub_session) -> None:
    adapter = stub_session({"data": []})
    next_url = "https://graph.facebook.com/v2.11/me/accounts?access_token=T&limit=25&after=QVFIUmx"

    response = client.follow(next_url, timeout=7)

    sent = adapter.sent[0]
    assert sent["request"].method == "GET"
    assert sent["request"].url == next_url
    assert sent["timeout"] == 7
    assert response.json() == {"data": []}


def test_follow_failure_is_transport_error(stub_session) -> None:
    stub_session(exc=requests.exceptions.ReadTimeout("slow"))

    with pytest.raises(TransportError):
        client.follow("https://graph.facebook.com/v2.11/me/accounts?after=x")
