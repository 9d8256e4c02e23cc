"""
Runtime settings for the website builder.
Reads .env (python-dotenv) then the process environment.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

XAI_BASE_URL = "https://api.x.ai/v1"


class Settings(BaseModel):
    LLM_PROVIDER: str = "mock"
    LLM_MODEL: str = "grok-beta"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 4000

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None

    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "models/gemini-2.0-flash"

    STATE_PATH: Optional[str] = None


def load_settings(env_file: Optional[str] = None) -> Settings:
    load_dotenv(dotenv_path=env_file)

    values = {
        name: os.getenv(name)
        for name in Settings.model_fields
        if os.getenv(name) not in (None, "")
    }

    # xAI keys go through the OpenAI-compatible client
    xai_key = os.getenv("XAI_API_KEY")
    if xai_key and "OPENAI_API_KEY" not in values:
        values["OPENAI_API_KEY"] = xai_key
        values.setdefault("OPENAI_BASE_URL", XAI_BASE_URL)

    return Settings(**values)
