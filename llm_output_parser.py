"""
Fenced code block extraction for raw LLM replies.

Two stages:
  1. find_fences()        -> locate complete ``` ... ``` regions (lexer)
  2. parse_info_string()  -> turn the opening line into (language, filename)

Pure functions. No I/O, no shared state.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from artifact import CodeArtifact
from artifact_enums import ArtifactLanguage

# Opening marker, info string up to the first newline, body up to the next
# closing marker. Non-greedy: a ``` inside a body closes the block early.
FENCE_PATTERN = re.compile(r"```(.*?)\r?\n([\s\S]*?)```")

DEFAULT_FILENAMES = {
    ArtifactLanguage.html.value: "index.html",
    ArtifactLanguage.css.value: "styles.css",
    ArtifactLanguage.javascript.value: "script.js",
    ArtifactLanguage.js.value: "script.js",
    ArtifactLanguage.typescript.value: "index.ts",
    ArtifactLanguage.ts.value: "index.ts",
    ArtifactLanguage.jsx.value: "App.jsx",
    ArtifactLanguage.tsx.value: "App.tsx",
    ArtifactLanguage.json.value: "config.json",
}


@dataclass
class Fence:
    """One complete fenced region as found in the source text."""
    start: int
    end: int
    info: str
    body: str


# --------------------------------------------------
# Stage 1: lexer
# --------------------------------------------------

def find_fences(text: str) -> List[Fence]:
    """
    Returns every complete, non-overlapping fenced region in order of
    appearance. An opening marker without a closing one is ignored.
    """
    if not text:
        return []

    return [
        Fence(
            start=m.start(),
            end=m.end(),
            info=m.group(1),
            body=m.group(2),
        )
        for m in FENCE_PATTERN.finditer(text)
    ]


# --------------------------------------------------
# Stage 2: info string parser
# --------------------------------------------------

def default_filename(language: str) -> str:
    return DEFAULT_FILENAMES.get(language.lower(), f"file.{language}")


def split_filename_language(token: str) -> Tuple[str, str]:
    """
    Handles a filename given where a bare language was expected,
    e.g. ```index.html -> ("html", "index.html").

    The language is whatever follows the last dot.
    """
    language = token.rsplit(".", 1)[-1].lower()
    return language or ArtifactLanguage.plaintext.value, token


def looks_like_filename(token: str) -> bool:
    return "." in token


def parse_info_string(info: str) -> Tuple[str, str]:
    """
    Returns (language, filename) for a fence opening line.

      "html index.html" -> ("html", "index.html")
      "css"             -> ("css", "styles.css")
      "index.html"      -> ("html", "index.html")
      ""                -> ("plaintext", "file.plaintext")
    """
    tokens = info.split()

    if not tokens:
        language = ArtifactLanguage.plaintext.value
        return language, default_filename(language)

    first = tokens[0]
    if looks_like_filename(first):
        return split_filename_language(first)

    language = first.lower()
    filename: Optional[str] = " ".join(tokens[1:]) or None

    return language, filename or default_filename(language)


# --------------------------------------------------
# Public API
# --------------------------------------------------

def parse_llm_output(text: str) -> List[CodeArtifact]:
    """
    Extracts an ordered list of code artifacts from an assistant reply.
    Never raises for string input; text without fences yields [].
    """
    artifacts = []

    for fence in find_fences(text):
        language, filename = parse_info_string(fence.info)
        artifacts.append(
            CodeArtifact(
                language=language,
                filename=filename,
                content=fence.body.strip(),
            )
        )

    return artifacts


extract = parse_llm_output


def strip_fences(text: str) -> str:
    """
    Removes every complete fenced region and returns the remaining prose.
    Prose segments around removed blocks are trimmed and joined by a
    blank line.
    """
    if not text:
        return ""

    segments = []
    cursor = 0
    for fence in find_fences(text):
        segments.append(text[cursor:fence.start])
        cursor = fence.end
    segments.append(text[cursor:])

    return "\n\n".join(s.strip() for s in segments if s.strip())
