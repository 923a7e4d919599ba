"""Unit tests for request construction."""

import json

import pytest
from pydantic import BaseModel

from snapchat_ads.config import ClientConfig
from snapchat_ads.exceptions import EncodingError, RequestBuildError
from snapchat_ads.utils.http import build_request, encode_body


@pytest.fixture
def config():
    return ClientConfig(host="https://adsapi.snapchat.com", version="v1")


@pytest.mark.unit
def test_get_request_url_and_headers(config):
    request = build_request(config, "GET", "ads/42")
    assert str(request.url) == "https://adsapi.snapchat.com/v1/ads/42"
    assert request.method == "GET"
    assert request.content == b""
    assert "content-type" not in request.headers
    assert request.headers["user-agent"] == "Snapchat Ads API Python SDK v1"


@pytest.mark.unit
def test_post_body_round_trips(config):
    body = {"campaigns": [{"name": "Spring", "daily_budget_micro": 5000000}]}
    request = build_request(config, "POST", "adaccounts/1/campaigns", body)
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == body


@pytest.mark.unit
@pytest.mark.parametrize("method", ["POST", "PUT"])
def test_post_put_without_body_send_empty_body(config, method):
    request = build_request(config, method, "campaigns/1")
    assert request.content == b""
    assert request.headers["content-length"] == "0"
    assert request.headers["content-type"] == "application/json"


@pytest.mark.unit
def test_delete_without_body_has_no_content_type(config):
    request = build_request(config, "delete", "ads/1")
    assert request.method == "DELETE"
    assert "content-type" not in request.headers


@pytest.mark.unit
def test_pydantic_body_is_encoded_by_alias():
    class Payload(BaseModel):
        name: str
        quartile: int = 0

    assert json.loads(encode_body(Payload(name="x"))) == {"name": "x"}


@pytest.mark.unit
def test_bearer_token_attached():
    config = ClientConfig(access_token="abc")
    request = build_request(config, "GET", "me")
    assert request.headers["authorization"] == "Bearer abc"


@pytest.mark.unit
def test_no_token_no_authorization(config):
    request = build_request(config, "GET", "me")
    assert "authorization" not in request.headers


@pytest.mark.unit
def test_custom_headers_merged_but_standard_headers_win():
    config = ClientConfig(
        access_token="abc",
        headers={
            "X-Trace": "t-1",
            "User-Agent": "custom",
            "Content-Type": "text/plain",
        },
    )
    request = build_request(config, "POST", "ads/1", {"a": 1})
    assert request.headers["x-trace"] == "t-1"
    assert request.headers["user-agent"] == "Snapchat Ads API Python SDK v1"
    assert request.headers["content-type"] == "application/json"


@pytest.mark.unit
def test_custom_version_in_url_and_user_agent():
    config = ClientConfig(host="https://example.test/", version="v2")
    request = build_request(config, "GET", "me/organizations")
    assert str(request.url) == "https://example.test/v2/me/organizations"
    assert request.headers["user-agent"].endswith("v2")


@pytest.mark.unit
def test_unserializable_body_raises_encoding_error(config):
    with pytest.raises(EncodingError) as exc_info:
        build_request(config, "POST", "ads", {"when": object()})
    assert exc_info.value.details["body_type"] == "dict"


@pytest.mark.unit
def test_nan_body_raises_encoding_error(config):
    with pytest.raises(EncodingError):
        build_request(config, "POST", "ads", {"bid": float("nan")})


@pytest.mark.unit
@pytest.mark.parametrize("method", ["PATCH", "", "HEAD"])
def test_unsupported_method(config, method):
    with pytest.raises(RequestBuildError):
        build_request(config, method, "ads/1")


@pytest.mark.unit
def test_empty_path(config):
    with pytest.raises(RequestBuildError):
        build_request(config, "GET", "")


@pytest.mark.unit
def test_relative_host_is_rejected():
    config = ClientConfig(host="adsapi.snapchat.com")
    with pytest.raises(RequestBuildError):
        build_request(config, "GET", "ads/1")


@pytest.mark.unit
def test_requests_are_independent(config):
    first = build_request(config, "POST", "ads/1", {"n": 1})
    second = build_request(config, "GET", "ads/2")
    first.headers["X-Mutated"] = "yes"
    assert "x-mutated" not in second.headers
    assert json.loads(first.content) == {"n": 1}
