"""Command-line launcher: ``ragblog-server``.

    ragblog-server --port 9000 --log-level debug
    ragblog-server --corpus ./my-corpus.json --log-format json
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .ext.mcp import serve_http
from .foundation.config import get_settings
from .runtime.observability import configure_logging
from .tools import build_registry

logger = logging.getLogger("ragblog.cli")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ragblog-server",
        description="Serve the RAG blog knowledge base and web tools over HTTP.",
    )
    parser.add_argument("--host", help="Bind address (default: RAGBLOG_SERVER_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Bind port (default: RAGBLOG_SERVER_PORT or 8787)")
    parser.add_argument("--corpus", type=Path, help="Path to a corpus JSON file (default: packaged corpus)")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS,
        help="Log level (default: RAGBLOG_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--log-format", choices=("text", "json"), help="Log output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    updates: dict[str, object] = {}
    if args.corpus is not None:
        updates["corpus_path"] = args.corpus
    if args.log_level or args.log_format:
        updates["logging"] = settings.logging.model_copy(update={
            k: v for k, v in (("level", args.log_level), ("format", args.log_format)) if v
        })
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(settings.logging.level, settings.logging.format)
    registry = build_registry(settings=settings)
    logger.info(f"Registered tools: {', '.join(registry.names)}")
    serve_http(registry, host=args.host, port=args.port, settings=settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
