"""
Command-line interface for sorting-quiz

Serves the HTTP endpoint, or plays the quiz directly in the terminal
against the same orchestrator.
"""

import asyncio
import sys
import argparse
from typing import Optional, TextIO

from .config import config
from .errors import QuizError
from .gateway import ModelGateway
from .logging_config import setup_logging
from .providers import get_provider
from .providers.base import GatewayError
from .quiz.orchestrator import QuizOrchestrator
from .quiz.schema import QuizState, Verdict


def format_probabilities(state: QuizState) -> str:
    """One line per category with a bar, for terminal output."""
    width = max(len(c.name) for c in state.categories)
    lines = []
    for category in state.categories:
        bar = "█" * int(round(category.probability * 20))
        lines.append(f"  {category.name:<{width}}  {category.probability:5.2f}  {bar}")
    return "\n".join(lines)


async def play(
    orchestrator: QuizOrchestrator,
    state: QuizState,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    max_turns: int = 20,
) -> Optional[str]:
    """
    Run the quiz loop in a terminal.

    Returns:
        The winning category, or None if input ran out or max_turns passed
    """
    answer = None
    for _ in range(max_turns):
        result = await orchestrator.advance(state, answer)
        if isinstance(result, Verdict):
            print(f"\nYou are: {result.winner}", file=stdout)
            return result.winner

        state = result
        print(f"\n{format_probabilities(state)}", file=stdout)
        print(f"\n{state.current_question}", file=stdout)
        print("> ", end="", file=stdout, flush=True)

        line = stdin.readline()
        if not line:
            break
        answer = line.strip()

    print("\nNo clear winner yet.", file=stdout)
    print(state.to_json(), file=stdout)
    return None


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sorting-quiz",
        description="Adaptive quiz that sorts people into categories with an LLM",
        epilog='Example: sorting-quiz play "Shape Rotator" "Wordcel" --mock'
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument(
        "--host",
        default=config.server.host,
        help=f"Bind address (default: {config.server.host})"
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=config.server.port,
        help=f"Port (default: {config.server.port})"
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development)"
    )

    # Play command
    play_parser = subparsers.add_parser("play", help="Take the quiz in the terminal")
    play_parser.add_argument(
        "categories",
        nargs="+",
        help="Categories to sort into (at least two)"
    )
    play_parser.add_argument(
        "--provider",
        choices=["openai", "deepseek", "claude", "mock"],
        default=config.models.provider,
        help=f"Model provider (default: {config.models.provider})"
    )
    play_parser.add_argument(
        "--model",
        help="Model ID (default: provider default)"
    )
    play_parser.add_argument(
        "--mock",
        action="store_true",
        help="Use mock AI (for testing without API key)"
    )
    play_parser.add_argument(
        "--max-turns",
        type=int,
        default=20,
        help="Give up after this many questions (default: 20)"
    )

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "serve":
        import uvicorn

        setup_logging()
        uvicorn.run(
            "sorting_quiz.api:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=config.logging.level.lower(),
        )

    elif args.command == "play":
        if len(set(args.categories)) < 2:
            print("Need at least two distinct categories", file=sys.stderr)
            sys.exit(1)

        setup_logging("WARNING")
        provider = get_provider("mock" if args.mock else args.provider)
        orchestrator = QuizOrchestrator(ModelGateway(provider, model=args.model))
        state = QuizState.start(list(dict.fromkeys(args.categories)))

        try:
            winner = asyncio.run(play(orchestrator, state, max_turns=args.max_turns))
        except (QuizError, GatewayError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)

        if winner is None:
            sys.exit(3)


if __name__ == "__main__":
    main()
