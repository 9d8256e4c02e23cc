"""
Sandboxed rendering surface for preview documents.

The preview is loaded through an <iframe srcdoc=...>. Without
allow-same-origin the frame gets an opaque origin, so generated
scripts cannot reach the host page's storage or cookies.
"""

import html
from typing import Optional, Tuple

from pydantic import BaseModel

DEFAULT_PERMISSIONS: Tuple[str, ...] = ("allow-scripts",)

# Opt-in grants for more realistic generated sites
INTERACTIVE_PERMISSIONS: Tuple[str, ...] = (
    "allow-scripts",
    "allow-forms",
    "allow-popups",
    "allow-modals",
)


class SandboxPolicy(BaseModel):
    permissions: Tuple[str, ...] = DEFAULT_PERMISSIONS

    @property
    def attribute(self) -> str:
        return " ".join(self.permissions)

    @property
    def same_origin(self) -> bool:
        return "allow-same-origin" in self.permissions


def render_iframe(
    document: str,
    policy: Optional[SandboxPolicy] = None,
    title: str = "Preview",
) -> str:
    """Returns an <iframe> element that renders `document` in isolation."""
    if policy is None:
        policy = SandboxPolicy()

    return (
        f'<iframe title="{html.escape(title)}" '
        f'sandbox="{html.escape(policy.attribute)}" '
        f'srcdoc="{html.escape(document, quote=True)}" '
        'style="width: 100%; height: 100%; border: 0;"></iframe>'
    )
