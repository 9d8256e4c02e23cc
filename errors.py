class LLMError(Exception):
    """Base class for failures at the LLM boundary."""

    user_message = "Failed to get response from AI"

    def __init__(self, message: str = "", provider: str = ""):
        super().__init__(message or self.user_message)
        self.provider = provider


class TransportError(LLMError):
    """Network or HTTP failure while calling the provider."""

    user_message = "Could not reach the AI provider"


class MalformedResponse(LLMError):
    """Provider answered but the expected message structure is missing."""

    user_message = "The AI provider returned an unexpected response"


class UpstreamRefusal(LLMError):
    """Provider blocked the request or the reply at content level."""

    user_message = "The AI provider declined to answer this request"
