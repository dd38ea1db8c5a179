import pytest
import requests

from smartnotes.core.config import Settings
from smartnotes.infrastructure.ai.hf_client import (
    ClassificationError,
    ClassificationErrorKind,
    HuggingFaceClassifier,
)


class FakeResponse:
    def __init__(self, status_code=200, json_payload=None, json_error=False, text=""):
        self.status_code = status_code
        self._json_payload = json_payload
        self._json_error = json_error
        self.text = text

    def json(self):
        if self._json_error:
            raise ValueError("bad json")
        return self._json_payload


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append((url, headers, json, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


def _classifier(session, api_key="hf_test"):
    return HuggingFaceClassifier(
        api_key=api_key,
        model_url="https://hf.example/models/cardiffnlp/tweet-topic-21-multi",
        timeout=7,
        session=session,
    )


def test_request_shape():
    session = FakeSession(FakeResponse(json_payload=[[{"label": "music", "score": 0.9}]]))
    out = _classifier(session).classify("hello")
    assert out == [{"label": "music", "score": 0.9}]
    url, headers, body, timeout = session.calls[0]
    assert url.endswith("/cardiffnlp/tweet-topic-21-multi")
    assert headers == {"Authorization": "Bearer hf_test"}
    assert body == {"inputs": "hello"}
    assert timeout == 7


def test_flat_list_passthrough():
    payload = [{"label": "music", "score": 0.9}, {"label": "sports", "score": 0.1}]
    assert _classifier(FakeSession(FakeResponse(json_payload=payload))).classify("x") == payload


def test_missing_key_is_credentials_error():
    session = FakeSession(FakeResponse(json_payload=[]))
    with pytest.raises(ClassificationError) as exc:
        _classifier(session, api_key=None).classify("x")
    assert exc.value.kind is ClassificationErrorKind.INVALID_CREDENTIALS
    assert session.calls == []


@pytest.mark.parametrize(
    "status, kind",
    [
        (401, ClassificationErrorKind.INVALID_CREDENTIALS),
        (403, ClassificationErrorKind.INVALID_CREDENTIALS),
        (503, ClassificationErrorKind.UNAVAILABLE),
        (429, ClassificationErrorKind.UNAVAILABLE),
        (400, ClassificationErrorKind.UNKNOWN),
        (500, ClassificationErrorKind.UNKNOWN),
    ],
)
def test_http_status_mapping(status, kind):
    session = FakeSession(FakeResponse(status_code=status, json_payload={"error": "nope"}))
    with pytest.raises(ClassificationError) as exc:
        _classifier(session).classify("x")
    assert exc.value.kind is kind
    assert exc.value.status_code == status
    assert exc.value.message == "nope"


@pytest.mark.parametrize("error", [requests.Timeout("read timed out"), requests.ConnectionError("dns")])
def test_network_errors_are_unavailable(error):
    with pytest.raises(ClassificationError) as exc:
        _classifier(FakeSession(exc=error)).classify("x")
    assert exc.value.kind is ClassificationErrorKind.UNAVAILABLE


def test_non_json_body_is_unknown():
    session = FakeSession(FakeResponse(json_error=True))
    with pytest.raises(ClassificationError) as exc:
        _classifier(session).classify("x")
    assert exc.value.kind is ClassificationErrorKind.UNKNOWN


def test_error_body_as_text():
    session = FakeSession(FakeResponse(status_code=502, json_error=True, text="Bad Gateway"))
    with pytest.raises(ClassificationError) as exc:
        _classifier(session).classify("x")
    assert exc.value.kind is ClassificationErrorKind.UNAVAILABLE
    assert exc.value.message == "Bad Gateway"


def test_from_settings():
    settings = Settings(HF_API_KEY="hf_abc", hf_inference_url="https://hf.example/models/", hf_timeout_seconds=5)
    clf = HuggingFaceClassifier.from_settings(settings)
    assert clf.api_key == "hf_abc"
    assert clf.model_url == "https://hf.example/models/cardiffnlp/tweet-topic-21-multi"
    assert clf.timeout == 5
