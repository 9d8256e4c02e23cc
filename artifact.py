from pydantic import BaseModel, field_validator
from typing import List

from artifact_enums import ArtifactLanguage


class CodeArtifact(BaseModel):
    # Payload
    language: str = ArtifactLanguage.plaintext.value
    filename: str
    content: str = ""

    # ------------------
    # Validators
    # ------------------

    @field_validator("language")
    @classmethod
    def language_must_be_normalized(cls, v):
        if not v:
            raise ValueError("Artifact language cannot be empty")
        if v != v.lower():
            raise ValueError(f"Artifact language must be lowercase: {v}")
        return v

    @field_validator("filename")
    @classmethod
    def filename_must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError("Artifact filename cannot be empty")
        return v

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())


ArtifactList = List[CodeArtifact]
