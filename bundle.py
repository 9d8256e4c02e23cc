"""
Packaging for generated projects: one file per artifact, named by
its filename, content written verbatim.
"""

import io
import logging
import os
import posixpath
import zipfile
from pathlib import Path
from typing import List, Tuple, Union

from artifact import CodeArtifact

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _numbered(name: str, n: int) -> str:
    stem, ext = posixpath.splitext(name)
    return f"{stem}-{n}{ext}"


def _entries(artifacts: List[CodeArtifact]) -> List[Tuple[str, str]]:
    """
    (name, content) per artifact, in order. A repeated filename gets a
    numeric suffix: styles.css, styles-2.css, styles-3.css ...
    """
    taken = {a.filename for a in artifacts}
    seen = set()
    entries = []

    for a in artifacts:
        name = a.filename
        if name in seen:
            n = 2
            while _numbered(a.filename, n) in taken:
                n += 1
            name = _numbered(a.filename, n)
            taken.add(name)

        seen.add(name)
        entries.append((name, a.content))

    return entries


def bundle_bytes(artifacts: List[CodeArtifact]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, content in _entries(artifacts):
            zf.writestr(name, content)
    return buffer.getvalue()


def write_bundle(artifacts: List[CodeArtifact], path: PathLike) -> Path:
    """Writes all artifacts into a zip archive at `path`."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(bundle_bytes(artifacts))

    logger.info("Wrote %d files to %s", len(artifacts), path)
    return path


def write_files(artifacts: List[CodeArtifact], directory: PathLike) -> List[Path]:
    """
    Writes each artifact as a loose file under `directory`.
    Filenames that would escape the directory are rejected before
    anything is written.
    """
    root = Path(directory).resolve()

    targets = []
    for name, content in _entries(artifacts):
        target = (root / name).resolve()
        if root not in target.parents:
            raise ValueError(f"Unsafe artifact filename: {name}")
        targets.append((target, content))

    root.mkdir(parents=True, exist_ok=True)
    for target, content in targets:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    return [target for target, _ in targets]
