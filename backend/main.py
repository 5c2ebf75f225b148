"""
Persona Relay Backend Entry Point

This module provides the main entry point for the backend.
It can be used for:
- Starting the API server
- Asking a single question from the command line

Usage:
    python -m backend.main
    python -m backend.main --port 8080
    python -m backend.main --ask "Headache and fever" --persona health
"""

import sys

from backend.api.deps import setup_logging
from backend.llm_router import CompletionRouter, Failure, build_turns
from configs import PERSONAS, load_settings


def ask(message: str, persona_name: str = "general") -> int:
    """
    Run one completion through the configured backend and print the answer.

    Returns:
        Process exit code (0 on success, 1 on backend failure)
    """
    persona = PERSONAS[persona_name]
    completion_router = CompletionRouter.from_settings(load_settings())
    result = completion_router.complete(
        build_turns(persona.system_prompt, persona.user_content(message))
    )

    if isinstance(result, Failure):
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    print(result.text)
    return 0


def serve(host: str, port: int) -> None:
    """Start the uvicorn server."""
    import uvicorn
    from backend.api.main import app

    uvicorn.run(app, host=host, port=port)


def main():
    """Main entry point for CLI usage."""
    import argparse

    setup_logging()
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Persona Relay - chat relay over Hugging Face or OpenAI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m backend.main
  python -m backend.main --port 8080
  python -m backend.main --ask "How do I keep aphids off tomatoes?" --persona agriculture
        """
    )

    parser.add_argument(
        "--ask", "-a",
        type=str,
        help="Send a single message and print the answer instead of serving"
    )
    parser.add_argument(
        "--persona", "-p",
        choices=sorted(PERSONAS),
        default="general",
        help="Persona used with --ask (default: general)"
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Interface to bind (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})"
    )

    args = parser.parse_args()

    if args.ask is not None:
        sys.exit(ask(args.ask, args.persona))

    serve(args.host, args.port)


if __name__ == "__main__":
    main()
