from types import SimpleNamespace

import httpx
import openai
import pytest
from google.api_core import exceptions as google_exceptions

from errors import MalformedResponse, TransportError, UpstreamRefusal
from llm_adapter import MOCK_REPLY, LLMAdapter
from llm_output_parser import parse_llm_output
from fakes import fake_openai_client

MESSAGES = [
    {"role": "system", "content": "be helpful"},
    {"role": "user", "content": "make a page"},
]


def test_unknown_provider(settings):
    with pytest.raises(ValueError):
        LLMAdapter(provider="nope", settings=settings)


def test_unknown_provider_from_settings(settings):
    settings.LLM_PROVIDER = "Nope"

    with pytest.raises(ValueError) as exc:
        LLMAdapter(settings=settings)
    assert "nope" in str(exc.value)


def test_mock_reply_contains_a_project(settings):
    llm = LLMAdapter(provider="mock", settings=settings)
    reply = llm.generate(MESSAGES)

    assert reply == MOCK_REPLY
    assert [a.filename for a in parse_llm_output(reply)] == [
        "index.html",
        "styles.css",
        "script.js",
    ]


def test_missing_openai_key(settings):
    settings.OPENAI_API_KEY = None
    with pytest.raises(RuntimeError):
        LLMAdapter(provider="openai", settings=settings)


def test_openai_request_shape(settings):
    client = fake_openai_client(content="hello")
    llm = LLMAdapter(provider="openai", settings=settings, client=client)

    assert llm.generate(MESSAGES) == "hello"

    call = client.chat.completions.calls[0]
    assert call["model"] == "test-model"
    assert call["messages"] == MESSAGES
    assert call["max_tokens"] == settings.LLM_MAX_TOKENS


def test_openai_empty_content(settings):
    client = fake_openai_client(content=None)
    llm = LLMAdapter(provider="openai", settings=settings, client=client)

    assert llm.generate(MESSAGES) == ""


def test_openai_no_choices(settings):
    client = fake_openai_client(choices=[])
    llm = LLMAdapter(provider="openai", settings=settings, client=client)

    with pytest.raises(MalformedResponse) as exc:
        llm.generate(MESSAGES)
    assert exc.value.provider == "openai"


def test_openai_content_filter(settings):
    client = fake_openai_client(content="", finish_reason="content_filter")
    llm = LLMAdapter(provider="openai", settings=settings, client=client)

    with pytest.raises(UpstreamRefusal):
        llm.generate(MESSAGES)


def test_openai_connection_error(settings):
    error = openai.APIConnectionError(
        request=httpx.Request("POST", "https://api.x.ai/v1/chat/completions")
    )
    client = fake_openai_client(error=error)
    llm = LLMAdapter(provider="openai", settings=settings, client=client)

    with pytest.raises(TransportError):
        llm.generate(MESSAGES)


class FakeGeminiResponse:
    def __init__(self, text=None, block_reason=0, candidates=True):
        self._text = text
        self.prompt_feedback = SimpleNamespace(block_reason=block_reason)
        self.candidates = [object()] if candidates else []

    @property
    def text(self):
        if self._text is None:
            raise ValueError("finish_reason is SAFETY")
        return self._text


class FakeGeminiModel:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, contents, generation_config=None):
        self.calls.append(contents)
        if self.error is not None:
            raise self.error
        return self.response


def test_gemini_folds_system_prompt_into_first_turn(settings):
    model = FakeGeminiModel(FakeGeminiResponse(text="ok"))
    llm = LLMAdapter(provider="gemini", settings=settings, client=model)

    history = MESSAGES + [
        {"role": "assistant", "content": "done"},
        {"role": "user", "content": "again"},
    ]
    assert llm.generate(history) == "ok"

    contents = model.calls[0]
    assert [c["role"] for c in contents] == ["user", "model", "user"]
    assert contents[0]["parts"] == ["be helpful", "make a page"]


def test_gemini_blocked_prompt(settings):
    model = FakeGeminiModel(FakeGeminiResponse(text="", block_reason="SAFETY"))
    llm = LLMAdapter(provider="gemini", settings=settings, client=model)

    with pytest.raises(UpstreamRefusal):
        llm.generate(MESSAGES)


def test_gemini_safety_stop(settings):
    model = FakeGeminiModel(FakeGeminiResponse(text=None))
    llm = LLMAdapter(provider="gemini", settings=settings, client=model)

    with pytest.raises(UpstreamRefusal):
        llm.generate(MESSAGES)


def test_gemini_no_candidates(settings):
    model = FakeGeminiModel(FakeGeminiResponse(text="x", candidates=False))
    llm = LLMAdapter(provider="gemini", settings=settings, client=model)

    with pytest.raises(MalformedResponse):
        llm.generate(MESSAGES)


def test_gemini_transport_error(settings):
    model = FakeGeminiModel(error=google_exceptions.ServiceUnavailable("down"))
    llm = LLMAdapter(provider="gemini", settings=settings, client=model)

    with pytest.raises(TransportError):
        llm.generate(MESSAGES)
