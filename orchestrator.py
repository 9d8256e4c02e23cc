import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from artifact import CodeArtifact
from errors import LLMError
from llm_adapter import LLMAdapter
from llm_output_parser import parse_llm_output, strip_fences
from project_state import ProjectState
from prompts import EMPTY_REPLY, build_messages

logger = logging.getLogger(__name__)


class ChatTurn(BaseModel):
    """Result of one user message, ready for display."""
    reply: str                      # raw assistant text
    display_text: str               # reply with code blocks removed
    artifacts: List[CodeArtifact]   # current project files
    preview: str                    # current preview document
    code_updated: bool = False
    error: Optional[str] = None


class Orchestrator:
    """
    Central execution controller.

    Responsibilities:
    - Keep the chat history
    - Invoke LLM (stateless)
    - Extract code artifacts from the reply
    - Replace project state and recompose the preview
    - Turn boundary failures into a chat message
    """

    def __init__(
        self,
        llm: Optional[LLMAdapter] = None,
        state: Optional[ProjectState] = None,
        llm_provider: Optional[str] = None,
    ):
        self.llm = llm or LLMAdapter(provider=llm_provider)
        self.state = state or ProjectState()

    # --------------------------------------------------
    # Public API
    # --------------------------------------------------

    def complete(self, history: List[Dict[str, str]]) -> str:
        """
        Stateless completion over an explicit history.
        Raises ValueError for a missing history and LLMError on failure.
        """
        if not history or not isinstance(history, list):
            raise ValueError("Messages array is required")

        reply = self.llm.generate(build_messages(history))
        return reply or EMPTY_REPLY

    def handle_message(self, user_message: str) -> ChatTurn:
        """
        Executes one full user interaction against the session state.
        """
        self.state.add_message("user", user_message)

        try:
            reply = self.complete(self.state.messages)
        except LLMError as e:
            logger.error("Chat turn failed: %s", e)
            text = f"Sorry, I encountered an error: {e}"
            self.state.add_message("assistant", text)
            return ChatTurn(
                reply=text,
                display_text=text,
                artifacts=self.state.artifacts,
                preview=self.state.preview,
                error=type(e).__name__,
            )

        self.state.add_message("assistant", reply)

        artifacts = parse_llm_output(reply)
        code_updated = bool(artifacts)
        if code_updated:
            self.state.replace_artifacts(artifacts)

        return ChatTurn(
            reply=reply,
            display_text=strip_fences(reply),
            artifacts=self.state.artifacts,
            preview=self.state.preview,
            code_updated=code_updated,
        )
