"""Command line entry point for the Image Vision MCP server."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Iterable

from .config import DEFAULT_HOST, DEFAULT_MODEL, VisionConfig
from .dispatcher import DescriptionDispatcher, outcomes_as_dicts
from .errors import ConfigurationError
from .mcp.contracts import DescriptionRequest
from .prompts import InstructionKind
from .provider import OllamaDescriptionProvider
from .security.paths import PathAuthorizer

logger = logging.getLogger(__name__)


def _resolve_config(args: argparse.Namespace) -> VisionConfig:
    return VisionConfig.from_paths(
        args.permitted or [],
        host=args.host,
        model=args.model,
        uniform_denials=args.uniform_denials,
        timeout=args.timeout,
    )


def _configure_logging(level: str) -> None:
    # stdout carries the MCP stream, so logs go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _serve_mcp(config: VisionConfig, args: argparse.Namespace) -> None:
    """Start the MCP server."""
    from .mcp.server import create_server

    server = create_server(config)
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Shutting down server...")


def _check_paths(config: VisionConfig, args: argparse.Namespace) -> None:
    authorizer = PathAuthorizer(config)
    for path in args.paths:
        result = authorizer.check(path)
        status = "allowed" if result.allowed else f"denied ({result.reason.value})"
        print(f"{path}: {status}")


def _describe_paths(config: VisionConfig, args: argparse.Namespace) -> None:
    kind = InstructionKind(args.kind or InstructionKind.GENERIC.value)
    if args.prompt is not None:
        if args.kind is not None and kind is not InstructionKind.CUSTOM:
            raise SystemExit(f"--prompt cannot be combined with --kind {kind.value}")
        kind = InstructionKind.CUSTOM
    elif kind is InstructionKind.CUSTOM:
        raise SystemExit("--kind custom requires --prompt")

    dispatcher = DescriptionDispatcher(config, OllamaDescriptionProvider(config))
    request = DescriptionRequest(media_paths=list(args.paths), prompt=args.prompt)
    outcomes = asyncio.run(dispatcher.handle(request, kind))
    print(json.dumps(outcomes_as_dicts(outcomes), indent=2))


def _build_parser() -> argparse.ArgumentParser:
    # -h is the host flag, as in the original Node server; help is --help only
    parser = argparse.ArgumentParser(description=__doc__, add_help=False)
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument(
        "-p",
        "--permitted",
        action="append",
        metavar="DIR",
        help="Directory from which images may be read (repeat for several)",
    )
    parser.add_argument(
        "-h",
        "--host",
        default=None,
        help=f"Ollama endpoint URL (defaults to {DEFAULT_HOST})",
    )
    parser.add_argument(
        "-m",
        "--model",
        default=None,
        help=f"Vision model identifier (defaults to {DEFAULT_MODEL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each model response (default: wait forever)",
    )
    parser.add_argument(
        "--uniform-denials",
        action="store_true",
        help="Report missing and out-of-bounds paths with the same message",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve command (MCP server)
    serve_parser = subparsers.add_parser("serve", help="Start the MCP server on stdio")
    serve_parser.set_defaults(func=_serve_mcp)

    check_parser = subparsers.add_parser("check", help="Show whether paths may be read")
    check_parser.add_argument("paths", nargs="+", help="Paths to check")
    check_parser.set_defaults(func=_check_paths)

    describe_parser = subparsers.add_parser("describe", help="Describe images without MCP")
    describe_parser.add_argument("paths", nargs="+", help="Image files")
    describe_parser.add_argument(
        "--kind",
        default=None,
        choices=[kind.value for kind in InstructionKind],
        help="Built-in instruction to use (default: generic)",
    )
    describe_parser.add_argument("--prompt", help="Custom instruction (implies --kind custom)")
    describe_parser.set_defaults(func=_describe_paths)

    return parser


def main(argv: Iterable[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.log_level)

    try:
        config = _resolve_config(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    args.func(config, args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
