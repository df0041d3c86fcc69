"""ChatClient facade tests (offline) plus an opt-in live API test."""

from __future__ import annotations

import json

import pytest

from geminiclient import ChatClient, Config, Content, Prompt, RequestBody
from geminiclient.errors import ValidationError
from geminiclient.model import ChatModel
from geminiclient.transports import HttpxTransport, MockTransport
from tests.helpers import RecordingTransport, ok


@pytest.mark.unit
def test_mock_mode_round_trip() -> None:
    with ChatClient(Config(use_mock=True)) as client:
        response = client.generate("Hello, can you assist me?")

    assert isinstance(client.transport, MockTransport)
    assert response.is_successful() is True
    assert response.text == "echo: Hello, can you assist me?"
    assert response.body is not None
    assert response.body.usage_metadata is not None
    assert response.body.usage_metadata.get("totalTokenCount") == 20


@pytest.mark.unit
def test_default_transport_is_httpx_with_config_timeout() -> None:
    client = ChatClient(Config(api_key="k", timeout_s=12.5))
    assert isinstance(client.transport, HttpxTransport)
    assert client.transport.timeout_s == 12.5
    assert isinstance(client.model, ChatModel)
    client.close()


@pytest.mark.unit
def test_build_request_targets_generate_content_with_key() -> None:
    client = ChatClient(Config(model="gemini-1.5-pro", api_key="abc"), transport=RecordingTransport())

    request = client.build_request("hi")

    assert request.method == "POST"
    assert request.uri.endswith("/models/gemini-1.5-pro:generateContent?key=abc")
    assert request.headers["Content-Type"] == "application/json"
    assert request.body == RequestBody.from_prompt("hi")
    assert request.validate() is True


@pytest.mark.unit
@pytest.mark.parametrize(
    "prompt",
    [Prompt("hi"), Content.from_text("hi"), RequestBody.from_prompt("hi")],
)
def test_build_request_accepts_prompt_shapes(prompt: object) -> None:
    client = ChatClient(Config(api_key="k"), transport=RecordingTransport())
    assert client.build_request(prompt).body == RequestBody.from_prompt("hi")  # type: ignore[arg-type]


@pytest.mark.unit
def test_generate_sends_through_injected_transport() -> None:
    transport = RecordingTransport(
        script=[ok('{"candidates":[{"content":{"parts":[{"text":"Hi"}]}}],"model":"v1"}')]
    )
    client = ChatClient(Config(api_key="k"), transport=transport)

    response = client.generate("Hello")

    assert response.text == "Hi"
    assert json.loads(transport.calls[0]["body"]) == {
        "contents": [{"parts": [{"text": "Hello"}]}]
    }
    assert "Authorization" not in transport.calls[0]["headers"]


@pytest.mark.unit
def test_model_attribute_is_replaceable() -> None:
    class _Stub:
        def __init__(self) -> None:
            self.requests: list[object] = []

        def call(self, request):
            self.requests.append(request)
            raise ValidationError("stubbed")

    client = ChatClient(Config(api_key="k"), transport=RecordingTransport())
    stub = _Stub()
    client.model = stub

    with pytest.raises(ValidationError, match="stubbed"):
        client.generate("x")
    assert len(stub.requests) == 1


@pytest.mark.unit
def test_close_leaves_injected_transport_alone() -> None:
    closed: list[bool] = []

    class _Closable(RecordingTransport):
        def close(self) -> None:
            closed.append(True)

    with ChatClient(Config(api_key="k"), transport=_Closable()):
        pass

    assert closed == []


@pytest.mark.api
def test_live_generate(gemini_api_key: str, gemini_model: str) -> None:
    with ChatClient(Config(model=gemini_model, api_key=gemini_api_key)) as client:
        response = client.generate("Reply with the single word: pong")

    assert response.is_successful() is True
    assert response.text.strip()
