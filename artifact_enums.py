from enum import Enum


class ArtifactLanguage(str, Enum):
    html = "html"
    css = "css"
    javascript = "javascript"
    js = "js"
    typescript = "typescript"
    ts = "ts"
    jsx = "jsx"
    tsx = "tsx"
    json = "json"
    plaintext = "plaintext"


# Languages whose artifacts are inlined into the preview <script> block
SCRIPT_LANGUAGES = (ArtifactLanguage.javascript.value, ArtifactLanguage.js.value)
