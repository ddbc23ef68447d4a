"""CLI entry point — ``react-lens scan`` and ``react-lens serve``."""

from __future__ import annotations

# Phase 1: singleton logging before any transitive litellm imports
from react_lens.logging_config import setup_logging

setup_logging("WARNING")

import argparse  # noqa: E402
import asyncio  # noqa: E402
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

from react_lens import __version__  # noqa: E402
from react_lens.analysis.scanner import normalize_category, scan  # noqa: E402
from react_lens.analysis.schemas import Diagnostic, ScanResult  # noqa: E402
from react_lens.config import Settings  # noqa: E402
from react_lens.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
)
from react_lens.remediation.client import RemediationClient  # noqa: E402
from react_lens.remediation.schemas import FixResult  # noqa: E402
from react_lens.reporter import (  # noqa: E402
    render_full_report,
    render_score_only,
    render_suggestion,
)
from react_lens.resilience.errors import RemediationError  # noqa: E402

# Phase 2: Clear litellm's duplicate handlers after all imports
cleanup_third_party_handlers()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"react-lens {__version__}")
        return

    if args.command == "scan":
        _run_scan(args)
    elif args.command == "serve":
        _run_serve(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="react-lens",
        description="React codebase health analyzer.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    scan_parser = sub.add_parser(
        "scan",
        help="Scan a directory or file",
    )
    scan_parser.add_argument(
        "target",
        nargs="?",
        default=".",
        help="Target directory or file (default: .)",
    )
    scan_parser.add_argument(
        "--category",
        "-c",
        default=None,
        help="Scan one category: a11y | best-practices | bundle",
    )
    scan_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show file and line for diagnostics",
    )
    scan_parser.add_argument(
        "--score",
        action="store_true",
        help="Print only the score",
    )
    scan_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    scan_parser.add_argument(
        "--fix",
        action="store_true",
        help="Fetch AI fix suggestions (needs GOOGLE_API_KEY)",
    )

    serve = sub.add_parser(
        "serve",
        help="Start the HTTP API",
    )
    serve.add_argument(
        "--host",
        default="127.0.0.1",
        help="Bind address (default: 127.0.0.1)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port (default: 8000)",
    )

    return parser


def _run_scan(args: argparse.Namespace) -> None:
    """Execute the scan command."""
    category = normalize_category(args.category)
    if args.category and category is None:
        print(f"Invalid category: {args.category}", file=sys.stderr)
        sys.exit(1)

    settings = Settings()
    target = Path(args.target)
    try:
        result = scan(
            target,
            category=category,
            include_snippets=args.fix,
            skip_dirs=settings.skip_directories,
        )
    except OSError as exc:
        print(f"Scan failed: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(result.model_dump_json(indent=2, by_alias=True))
    elif args.score:
        print(render_score_only(result))
    else:
        print(render_full_report(result, verbose=args.verbose))

    if args.fix and result.diagnostics:
        _print_suggestions(result, settings)


def _print_suggestions(result: ScanResult, settings: Settings) -> None:
    if not settings.google_api_key:
        print(
            "\nGOOGLE_API_KEY not set. Skipping AI suggestions.",
            file=sys.stderr,
        )
        return
    targets = list(result.diagnostics[: settings.fix_max_suggestions])
    outcomes = asyncio.run(_fetch_suggestions(targets, settings))

    print("\nAI Suggestions")
    for diagnostic, outcome in zip(targets, outcomes, strict=True):
        if isinstance(outcome, RemediationError):
            print(
                f"\n{diagnostic.rule} ({diagnostic.file_path}:"
                f"{diagnostic.line}): {outcome.code} {outcome.message}",
                file=sys.stderr,
            )
            continue
        print()
        print(render_suggestion(diagnostic, outcome.suggestion))


async def _fetch_suggestions(
    diagnostics: list[Diagnostic], settings: Settings
) -> list[FixResult | RemediationError]:
    """Fix suggestions for each diagnostic, at most N requests in flight."""
    client = RemediationClient(settings)
    semaphore = asyncio.Semaphore(settings.llm_max_concurrency)

    async def _one(diagnostic: Diagnostic) -> FixResult | RemediationError:
        code = diagnostic.snippet or (
            "Snippet unavailable. Provide a generic fix pattern."
        )
        async with semaphore:
            try:
                return await client.fix_diagnostic(diagnostic, code)
            except RemediationError as exc:
                return exc

    return list(await asyncio.gather(*(_one(d) for d in diagnostics)))


def _run_serve(args: argparse.Namespace) -> None:
    """Run the FastAPI app with uvicorn."""
    import uvicorn

    uvicorn.run("react_lens.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
