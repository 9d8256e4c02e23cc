import logging
from typing import Dict, List, Optional

from config import Settings, load_settings
from errors import LLMError, MalformedResponse, TransportError, UpstreamRefusal

logger = logging.getLogger(__name__)

MOCK_REPLY = (
    "Here is a simple landing page.\n\n"
    "```html index.html\n"
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head><title>Mock Site</title></head>\n"
    "<body><h1 id='title'>Mock LLM Output</h1></body>\n"
    "</html>\n"
    "```\n\n"
    "```css styles.css\n"
    "body { font-family: sans-serif; margin: 0; }\n"
    "```\n\n"
    "```javascript script.js\n"
    "document.getElementById('title').textContent += '!';\n"
    "```\n\n"
    "Enjoy!"
)


class LLMAdapter:
    """
    Minimal LLM transport layer.
    Stateless. No parsing. No validation.
    Failures are raised as LLMError subclasses.
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        settings: Optional[Settings] = None,
        client=None,
    ):
        """
        provider:
          - "mock"
          - "openai"  (any OpenAI-compatible endpoint, incl. xAI)
          - "gemini"

        client: pre-built SDK client, skips provider initialization
        """
        self.settings = settings or load_settings()
        self.provider = (provider or self.settings.LLM_PROVIDER).lower()
        self.client = client

        if self.provider == "openai":
            if self.client is None:
                self._init_openai()

        elif self.provider == "gemini":
            if self.client is None:
                self._init_gemini()

        elif self.provider == "mock":
            pass

        else:
            raise ValueError(f"Unknown LLM provider: {self.provider}")

    # --------------------------------------------------
    # Public API
    # --------------------------------------------------

    def generate(self, messages: List[Dict[str, str]]) -> str:
        """
        Sends a chat history (system prompt first) and returns the raw
        assistant text. May return "" when the provider sent no content.
        """
        logger.info("Calling %s with %d messages", self.provider, len(messages))

        if self.provider == "mock":
            return self._mock_response(messages)

        try:
            if self.provider == "openai":
                return self._openai_response(messages)

            if self.provider == "gemini":
                return self._gemini_response(messages)

        except LLMError as e:
            e.provider = self.provider
            logger.warning("LLM call failed: %s: %s", type(e).__name__, e)
            raise

        raise RuntimeError("Invalid LLM provider state")

    # --------------------------------------------------
    # Provider initializers
    # --------------------------------------------------

    def _init_openai(self):
        try:
            import openai
        except ImportError:
            raise RuntimeError("Run: pip install openai")

        api_key = self.settings.OPENAI_API_KEY
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY (or XAI_API_KEY) not set")

        self.client = openai.OpenAI(
            api_key=api_key,
            base_url=self.settings.OPENAI_BASE_URL,
        )

    def _init_gemini(self):
        try:
            import google.generativeai as genai
        except ImportError:
            raise RuntimeError("Run: pip install google-generativeai")

        api_key = self.settings.GEMINI_API_KEY
        if not api_key:
            raise RuntimeError("GEMINI_API_KEY not set")

        genai.configure(api_key=api_key)
        self.client = genai.GenerativeModel(self.settings.GEMINI_MODEL)

    # --------------------------------------------------
    # Providers
    # --------------------------------------------------

    def _mock_response(self, messages: List[Dict[str, str]]) -> str:
        return MOCK_REPLY

    def _openai_response(self, messages: List[Dict[str, str]]) -> str:
        import openai

        try:
            response = self.client.chat.completions.create(
                model=self.settings.LLM_MODEL,
                messages=messages,
                temperature=self.settings.LLM_TEMPERATURE,
                max_tokens=self.settings.LLM_MAX_TOKENS,
            )
        except openai.APIStatusError as e:
            raise TransportError(f"HTTP {e.status_code}: {e.message}")
        except openai.APIError as e:
            raise TransportError(str(e))

        choices = getattr(response, "choices", None)
        if not choices:
            raise MalformedResponse("Response has no choices")

        choice = choices[0]
        if getattr(choice, "finish_reason", None) == "content_filter":
            raise UpstreamRefusal("Reply blocked by provider content filter")

        message = getattr(choice, "message", None)
        if message is None:
            raise MalformedResponse("First choice has no message")

        return message.content or ""

    def _gemini_response(self, messages: List[Dict[str, str]]) -> str:
        from google.api_core import exceptions as google_exceptions

        system = "\n\n".join(
            m["content"] for m in messages if m["role"] == "system"
        )
        contents = [
            {
                "role": "model" if m["role"] == "assistant" else "user",
                "parts": [m["content"]],
            }
            for m in messages
            if m["role"] != "system"
        ]
        if system and contents:
            contents[0] = {
                "role": contents[0]["role"],
                "parts": [system] + contents[0]["parts"],
            }

        try:
            response = self.client.generate_content(
                contents,
                generation_config={
                    "temperature": self.settings.LLM_TEMPERATURE,
                    "max_output_tokens": self.settings.LLM_MAX_TOKENS,
                },
            )
        except google_exceptions.GoogleAPIError as e:
            raise TransportError(str(e))

        feedback = getattr(response, "prompt_feedback", None)
        if feedback is not None and getattr(feedback, "block_reason", None):
            raise UpstreamRefusal(f"Prompt blocked: {feedback.block_reason}")

        if not getattr(response, "candidates", None):
            raise MalformedResponse("Response has no candidates")

        try:
            return response.text
        except ValueError as e:
            # .text raises when the candidate was stopped for safety
            raise UpstreamRefusal(str(e))
