"""
Website Build Demo

Sends one or more requests to the builder and saves:
- preview.html   (composed, self-contained document)
- sandbox.html   (preview wrapped in a sandboxed iframe)
- project.zip    (one entry per generated file)

Usage:
    python website_demo.py "Build a landing page for a coffee shop"
    python website_demo.py --provider openai --out build "Portfolio site" "Make it dark"
"""

import argparse
import logging
import os
import sys
from typing import List

from bundle import write_bundle
from config import load_settings
from llm_adapter import LLMAdapter
from orchestrator import Orchestrator
from project_state import ProjectState
from sandbox import SandboxPolicy, render_iframe


class WebsiteBuildDemo:
    def __init__(self, provider: str, out_dir: str):
        self.out_dir = out_dir
        os.makedirs(self.out_dir, exist_ok=True)

        settings = load_settings()
        self.orchestrator = Orchestrator(
            llm=LLMAdapter(provider=provider, settings=settings),
            state=ProjectState(state_path=settings.STATE_PATH),
        )

    def run(self, requests: List[str]) -> int:
        print("=" * 80)
        print("WEBSITE BUILD DEMO")
        print("=" * 80)

        for i, request in enumerate(requests, 1):
            print(f"\n📝 REQUEST {i}: {request}")
            print("─" * 80)

            turn = self.orchestrator.handle_message(request)

            if turn.error:
                print(f"❌ {turn.display_text}")
                return 1

            print(turn.display_text or "(code only)")
            print()

            if not turn.code_updated:
                print("ℹ️  No code in this reply, project unchanged")
                continue

            print(f"📦 {len(turn.artifacts)} files:")
            for a in turn.artifacts:
                print(f"   📄 {a.filename} ({a.language}, {a.line_count} lines)")

        self._save()
        return 0

    def _save(self):
        state = self.orchestrator.state

        preview_path = os.path.join(self.out_dir, "preview.html")
        with open(preview_path, "w", encoding="utf-8") as f:
            f.write(state.preview)

        sandbox_path = os.path.join(self.out_dir, "sandbox.html")
        with open(sandbox_path, "w", encoding="utf-8") as f:
            f.write(render_iframe(state.preview, SandboxPolicy()))

        bundle_path = write_bundle(
            state.artifacts, os.path.join(self.out_dir, "project.zip")
        )

        print()
        print(f"💾 Preview saved to: {preview_path}")
        print(f"💾 Sandbox page saved to: {sandbox_path}")
        print(f"💾 Project bundle saved to: {bundle_path}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a website from chat requests")
    parser.add_argument("requests", nargs="+", help="one message per turn")
    parser.add_argument("--provider", default=None, help="mock, openai or gemini")
    parser.add_argument("--out", default="website_build_demo", help="output directory")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    demo = WebsiteBuildDemo(provider=args.provider, out_dir=args.out)
    return demo.run(args.requests)


if __name__ == "__main__":
    sys.exit(main())
