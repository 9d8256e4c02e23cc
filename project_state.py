import json
import logging
import os
from datetime import datetime
from typing import Dict, List, Optional

from artifact import CodeArtifact
from preview_composer import FALLBACK_DOCUMENT, compose_preview

logger = logging.getLogger(__name__)


class ProjectState:
    """
    Current state of one generated project.

    Each assistant reply that carries code replaces the artifact list
    wholesale. Nothing is merged across turns.
    """

    def __init__(self, state_path: Optional[str] = None):
        # ---- Core state ----
        self.artifacts: List[CodeArtifact] = []
        self.messages: List[Dict[str, str]] = []
        self.preview: str = FALLBACK_DOCUMENT
        self.revision: int = 0
        self.updated_at: Optional[datetime] = None

        self.state_path = state_path
        self._load()

    # ======================
    # Persistence
    # ======================

    def _load(self):
        if not self.state_path or not os.path.exists(self.state_path):
            return

        try:
            with open(self.state_path, "r") as f:
                content = f.read().strip()
                if not content:
                    return

                raw = json.loads(content)
                self.artifacts = [CodeArtifact(**a) for a in raw.get("artifacts", [])]
                self.messages = list(raw.get("messages", []))
                self.revision = int(raw.get("revision", 0))

                updated_at = raw.get("updated_at")
                self.updated_at = datetime.fromisoformat(updated_at) if updated_at else None

        except (json.JSONDecodeError, ValueError, TypeError, AttributeError):
            logger.warning("Corrupted state file %s, starting fresh", self.state_path)
            self.artifacts = []
            self.messages = []
            self.revision = 0
            self.updated_at = None
            return

        self.preview = compose_preview(self.artifacts)

    def _persist(self):
        if not self.state_path:
            return

        directory = os.path.dirname(self.state_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.state_path, "w") as f:
            json.dump(
                {
                    "revision": self.revision,
                    "updated_at": self.updated_at,
                    "messages": self.messages,
                    "artifacts": [a.model_dump() for a in self.artifacts],
                },
                f,
                indent=2,
                default=str,
            )

    # ======================
    # Chat history
    # ======================

    def add_message(self, role: str, content: str):
        self.messages.append({"role": role, "content": content})
        self._persist()

    # ======================
    # Artifacts
    # ======================

    def replace_artifacts(self, artifacts: List[CodeArtifact]) -> str:
        """
        Swaps in a new artifact list and recomposes the preview.
        Returns the new preview document.
        """
        self.artifacts = list(artifacts)
        self.preview = compose_preview(self.artifacts)
        self.revision += 1
        self.updated_at = datetime.utcnow()

        logger.info(
            "Project revision %d: %s",
            self.revision,
            ", ".join(a.filename for a in self.artifacts),
        )

        self._persist()
        return self.preview

    def reset(self):
        self.artifacts = []
        self.messages = []
        self.preview = FALLBACK_DOCUMENT
        self.revision = 0
        self.updated_at = None
        self._persist()
