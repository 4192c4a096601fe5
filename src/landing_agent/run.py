# run.py
# Entry point. Argument parsing and wiring only; no logic lives here.
#
# Usage: landing-agent -k <openrouter-api-key>
# Model strings: https://openrouter.ai/models

import argparse
import sys
from pathlib import Path

from landing_agent import display
from landing_agent.config import DEFAULT_MODEL, AgentConfig
from landing_agent.harness import LandingPageAgent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="landing-agent",
        description="Generate a landing page, commit it and open a PR.",
    )
    parser.add_argument("-k", dest="api_key", metavar="<openrouter-api-key>", help="OpenRouter API key")
    parser.add_argument(
        "--model", "-m",
        default=DEFAULT_MODEL,
        help=f"OpenRouter model id (default: {DEFAULT_MODEL})",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Project directory the agent edits (default: current directory)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=15,
        help="Maximum model calls per run (default: 15)",
    )
    parser.add_argument(
        "--base-branch",
        default="main",
        help="Branch pull requests target (default: main)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.api_key:
        parser.print_usage(sys.stderr)
        return 1

    display.configure_logging(args.verbose)

    config = AgentConfig(
        api_key=args.api_key,
        model=args.model,
        project_root=args.root.resolve(),
        max_iterations=args.max_iterations,
        base_branch=args.base_branch,
    )
    agent = LandingPageAgent(config)
    display.banner(config.model, config.max_iterations)

    theme = display.ask_theme().strip()
    if not theme:
        display.halt("No theme given. Nothing to build.")
        return 1

    agent.run(theme)
    return 0


if __name__ == "__main__":
    sys.exit(main())
