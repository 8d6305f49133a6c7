"""
namehint Command-Line Interface.

Provides commands to inspect the similarity engine and rank suggestions.

Usage:
    namehint normalize Hello_World
    namehint tokens XMLHttpRequest
    namehint score frstName firstName --explain
    namehint suggest frstName firstName lastName fullName
    namehint suggest Dictionry --file type_names.txt --json
    namehint info
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from namehint import __version__
from namehint.config import CATEGORIES, load_config
from namehint.similarity.jaro import jaro
from namehint.similarity.normalize import normalize, split_identifier
from namehint.similarity.ranking import find_similar_names
from namehint.similarity.scoring import score_breakdown
from namehint.utils.errors import CandidateFileError, NameHintError


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    import os

    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


# Initialize on module load
_init_colors()


def _non_negative_int(value: str) -> int:
    """Parse a suggestion count, rejecting negative values."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="namehint",
        description="namehint - \"did you mean\" suggestions for unresolved identifiers",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Normalize command
    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Show the normalized form of an identifier",
    )
    normalize_parser.add_argument("text", help="Identifier to normalize")

    # Tokens command
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Show the word tokens of an identifier",
    )
    tokens_parser.add_argument("text", help="Identifier to split")

    # Score command
    score_parser = subparsers.add_parser(
        "score",
        help="Score a candidate against an unknown name",
    )
    score_parser.add_argument("unknown", help="The unresolved name")
    score_parser.add_argument("candidate", help="The candidate name")
    score_parser.add_argument(
        "--explain",
        action="store_true",
        help="Show every term of the composite score",
    )

    # Suggest command
    suggest_parser = subparsers.add_parser(
        "suggest",
        aliases=["s"],
        help="Rank candidate names for an unknown name",
    )
    suggest_parser.add_argument("unknown", help="The unresolved name")
    suggest_parser.add_argument(
        "candidates",
        nargs="*",
        help="Candidate names",
    )
    suggest_parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Read candidate names from a file, one per line",
    )
    suggest_parser.add_argument(
        "--min-score",
        type=float,
        default=None,
        help="Minimum composite score (default: from configuration, 0.3)",
    )
    suggest_parser.add_argument(
        "-n",
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Maximum number of suggestions (default: from configuration, 5)",
    )
    suggest_parser.add_argument(
        "--category",
        choices=CATEGORIES,
        default="variables",
        help="Configuration category whose threshold applies (default: variables)",
    )
    suggest_parser.add_argument(
        "--config",
        type=Path,
        help="Path to namehint.toml",
    )
    suggest_parser.add_argument(
        "--json",
        action="store_true",
        help="Output suggestions as JSON",
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Show information about the scoring model",
    )

    return parser


def read_candidates(path: Path) -> list[str]:
    """
    Read candidate names from a file.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        CandidateFileError: If the file cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CandidateFileError(f"cannot read candidates: {e.strerror or e}", path) from e

    names = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            names.append(line)
    return names


def cmd_normalize(args: argparse.Namespace) -> int:
    """Handle the normalize command."""
    print(normalize(args.text))
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens command."""
    for token in split_identifier(args.text):
        print(token)
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    """Handle the score command."""
    breakdown = score_breakdown(args.unknown, args.candidate)
    print(f"{Colors.BOLD}{breakdown.total:.4f}{Colors.RESET}")

    if args.explain:
        norm_unknown = normalize(args.unknown)
        norm_candidate = normalize(args.candidate)
        print(f"  {Colors.CYAN}jaro:{Colors.RESET}           {jaro(norm_unknown, norm_candidate):.4f}")
        print(f"  {Colors.CYAN}jaro-winkler:{Colors.RESET}   {breakdown.base:.4f}")
        print(f"  {Colors.CYAN}exact:{Colors.RESET}          +{breakdown.exact:.2f}")
        print(f"  {Colors.CYAN}containment:{Colors.RESET}    +{breakdown.containment:.2f}")
        print(f"  {Colors.CYAN}tokens:{Colors.RESET}         +{breakdown.tokens:.2f}")
        print(f"  {Colors.CYAN}length penalty:{Colors.RESET} -{breakdown.length_penalty:.2f}")

    return 0


def cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the suggest command."""
    try:
        config = load_config(args.config)
        candidates = list(args.candidates)
        if args.file is not None:
            candidates.extend(read_candidates(args.file))
    except NameHintError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    min_score = args.min_score if args.min_score is not None else config.threshold(args.category)
    limit = args.limit if args.limit is not None else config.max_suggestions

    similar = find_similar_names(
        args.unknown,
        candidates,
        min_score=min_score,
        limit=limit,
        strict=config.is_strict(args.category),
    )

    if args.json:
        print(json.dumps([{"name": s.name, "score": s.score} for s in similar], indent=2))
        return 0

    if not similar:
        print(f"{Colors.YELLOW}No suggestions for{Colors.RESET} '{args.unknown}'")
        return 0

    print("Did you mean:")
    for s in similar:
        print(f"  {Colors.GREEN}{s.name}{Colors.RESET} {Colors.GRAY}({s.score:.3f}){Colors.RESET}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command - show scoring information."""
    print(f"""
{Colors.BOLD}namehint{Colors.RESET}
========

{Colors.CYAN}Version:{Colors.RESET} {__version__}

{Colors.CYAN}Composite score:{Colors.RESET}
  Jaro-Winkler of normalized names       base in [0, 1]
  Exact normalized match                 +0.3
  One name contains the other            +0.2
  Equal word token (per pair)            +0.2
  Prefix word token (per pair)           +0.1
  Two or more token matches              +0.2
  Extra candidate character              -0.01 each

{Colors.CYAN}Suggestions:{Colors.RESET}
  Top 5 candidates, exact name excluded, score >= 0.3 by default

{Colors.CYAN}Commands:{Colors.RESET}
  namehint normalize <text>              Normalized form
  namehint tokens <text>                 Word tokens
  namehint score <unknown> <candidate>   Composite score
  namehint suggest <unknown> <names...>  Ranked suggestions
""")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "normalize": cmd_normalize,
        "tokens": cmd_tokens,
        "score": cmd_score,
        "suggest": cmd_suggest,
        "s": cmd_suggest,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
