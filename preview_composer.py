"""
Builds a single self-contained HTML document from extracted artifacts.

Only the first html artifact is used as the base document. All css
artifacts become one <style> block, all javascript/js artifacts one
<script> block, concatenated in list order.

Output is not sanitized. Isolation is the rendering surface's job
(see sandbox.py).
"""

from typing import List, Optional

from artifact import CodeArtifact
from artifact_enums import ArtifactLanguage, SCRIPT_LANGUAGES

FALLBACK_DOCUMENT = (
    '<html><body style="font-family: sans-serif; display: flex; '
    "align-items: center; justify-content: center; height: 100vh; "
    'margin: 0; color: #666;"><h1>No HTML content generated yet</h1>'
    "</body></html>"
)

DOCUMENT_SHELL = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Preview</title>
</head>
<body>
    {body}
</body>
</html>"""


def _first_html(artifacts: List[CodeArtifact]) -> Optional[CodeArtifact]:
    return next(
        (a for a in artifacts if a.language == ArtifactLanguage.html.value),
        None,
    )


def _joined(artifacts: List[CodeArtifact], languages) -> Optional[str]:
    parts = [a.content for a in artifacts if a.language in languages]
    if not parts:
        return None
    return "\n".join(parts)


def inject_style(html: str, css: str) -> str:
    style_tag = f"<style>{css}</style>"

    if "</head>" in html:
        return html.replace("</head>", f"{style_tag}</head>", 1)
    if "<html>" in html:
        return html.replace("<html>", f"<html><head>{style_tag}</head>", 1)
    return f"<head>{style_tag}</head>{html}"


def inject_script(html: str, js: str) -> str:
    script_tag = f"<script>{js}</script>"

    if "</body>" in html:
        return html.replace("</body>", f"{script_tag}</body>", 1)
    return f"{html}{script_tag}"


def wrap_fragment(html: str) -> str:
    if "<html" in html:
        return html
    return DOCUMENT_SHELL.format(body=html)


def compose_preview(artifacts: List[CodeArtifact]) -> str:
    html_artifact = _first_html(artifacts)
    if html_artifact is None:
        return FALLBACK_DOCUMENT

    html = html_artifact.content

    css = _joined(artifacts, (ArtifactLanguage.css.value,))
    if css is not None:
        html = inject_style(html, css)

    js = _joined(artifacts, SCRIPT_LANGUAGES)
    if js is not None:
        html = inject_script(html, js)

    return wrap_fragment(html)


compose = compose_preview
