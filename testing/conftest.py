import pytest

from config import Settings


@pytest.fixture
def settings():
    return Settings(
        LLM_PROVIDER="mock",
        LLM_MODEL="test-model",
        OPENAI_API_KEY="sk-test",
        GEMINI_API_KEY="gm-test",
    )
