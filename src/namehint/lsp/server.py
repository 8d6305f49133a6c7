"""
namehint Language Server Protocol (LSP) Server.

This module implements a small LSP server using pygls. It does not analyze
any language itself; the host tooling that detects unresolved names
publishes namehint diagnostics, and this server provides:

- Quick fixes that replace an unresolved name with a suggestion
- A ``namehint.suggest`` command that ranks candidates for a name

Usage:
    # Start the server in stdio mode (for IDE integration)
    namehint-lsp

    # Start in TCP mode (for debugging)
    namehint-lsp --tcp --port 2088
"""

import logging
from typing import Any

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from namehint import __version__
from namehint.lsp.code_actions import build_code_actions
from namehint.similarity.ranking import MAX_SUGGESTIONS, MIN_SCORE, find_similar_names

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("namehint-lsp")

SUGGEST_COMMAND = "namehint.suggest"


def _unpack_arguments(args: tuple[Any, ...]) -> dict[str, Any]:
    """Get the single object argument of a command, however it was passed."""
    if len(args) == 1 and isinstance(args[0], list):
        args = tuple(args[0])
    if args and isinstance(args[0], dict):
        return args[0]
    return {}


def run_suggest_command(arguments: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Rank candidate names for the ``namehint.suggest`` command.

    Args:
        arguments: ``{"unknown": str, "candidates": [str], "minScore": float,
            "limit": int}``; only ``unknown`` and ``candidates`` are required;
            a non-numeric ``minScore`` or non-integer ``limit`` falls back
            to the default

    Returns:
        ``[{"name": str, "score": float}]``, best first
    """
    unknown = arguments.get("unknown")
    candidates = arguments.get("candidates")
    if not isinstance(unknown, str) or not isinstance(candidates, list):
        return []

    min_score = arguments.get("minScore", MIN_SCORE)
    if isinstance(min_score, bool) or not isinstance(min_score, (int, float)):
        logger.warning(f"Ignoring invalid minScore {min_score!r}")
        min_score = MIN_SCORE

    limit = arguments.get("limit", MAX_SUGGESTIONS)
    if isinstance(limit, bool) or not isinstance(limit, int):
        logger.warning(f"Ignoring invalid limit {limit!r}")
        limit = MAX_SUGGESTIONS

    names = [c for c in candidates if isinstance(c, str)]
    similar = find_similar_names(unknown, names, min_score=float(min_score), limit=limit)
    return [{"name": s.name, "score": s.score} for s in similar]


class NameHintLanguageServer(LanguageServer):
    """
    Language server offering "did you mean" quick fixes.
    """

    def __init__(self) -> None:
        """Initialize the namehint language server."""
        super().__init__(
            name="namehint-lsp",
            version=f"v{__version__}",
        )

        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register all LSP request handlers."""
        self.feature(
            types.TEXT_DOCUMENT_CODE_ACTION,
            types.CodeActionOptions(code_action_kinds=[types.CodeActionKind.QuickFix]),
        )(self._on_code_action)

        self.command(SUGGEST_COMMAND)(self._on_suggest)

    # =========================================================================
    # Code Actions
    # =========================================================================

    def _on_code_action(
        self, params: types.CodeActionParams
    ) -> list[types.CodeAction] | None:
        """Handle code action request."""
        uri = params.text_document.uri
        actions = build_code_actions(uri, list(params.context.diagnostics))
        logger.debug(f"Offering {len(actions)} quick fixes for {uri}")
        return actions or None

    # =========================================================================
    # Commands
    # =========================================================================

    def _on_suggest(self, *args: Any) -> list[dict[str, Any]]:
        """Handle the ``namehint.suggest`` command."""
        arguments = _unpack_arguments(args)
        results = run_suggest_command(arguments)
        logger.debug(f"Suggest for {arguments.get('unknown')!r}: {len(results)} results")
        return results


# =============================================================================
# Server Creation and Main Entry Point
# =============================================================================


def create_server() -> NameHintLanguageServer:
    """Create and configure a namehint language server instance."""
    server = NameHintLanguageServer()

    @server.feature(types.INITIALIZED)
    def on_initialized(
        params: types.InitializedParams,  # noqa: ARG001
    ) -> None:
        """Handle initialized notification."""
        logger.info("namehint Language Server initialized successfully")

    @server.feature(types.SHUTDOWN)
    def on_shutdown(
        params: None,  # noqa: ARG001
    ) -> None:
        """Handle shutdown request."""
        logger.info("Shutting down namehint Language Server")

    return server


def main() -> None:
    """
    Main entry point for the namehint language server.

    Starts the server in stdio mode for IDE integration.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="namehint Language Server",
        prog="namehint-lsp",
    )
    parser.add_argument(
        "--tcp",
        action="store_true",
        help="Start server in TCP mode instead of stdio",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to in TCP mode (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=2088,
        help="Port to listen on in TCP mode (default: 2088)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level (default: info)",
    )

    args = parser.parse_args()

    # Configure logging level
    log_level = getattr(logging, args.log_level.upper())
    logging.getLogger("namehint-lsp").setLevel(log_level)

    server = create_server()

    if args.tcp:
        logger.info(f"Starting namehint LSP in TCP mode on {args.host}:{args.port}")
        server.start_tcp(args.host, args.port)
    else:
        logger.info("Starting namehint LSP in stdio mode")
        server.start_io()


if __name__ == "__main__":
    main()
