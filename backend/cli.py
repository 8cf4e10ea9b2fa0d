"""Command line entry for the employee directory API."""

from __future__ import annotations

import argparse
from typing import List, Optional

import uvicorn

from backend.core.config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="employee-directory", description="Run the employee directory API server.")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--reload", action="store_true", help="Restart the server when source files change")
    return parser


def run_server(host: str, port: int, reload: bool = False) -> None:
    uvicorn.run(
        "backend.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    run_server(args.host, args.port, reload=args.reload)


if __name__ == "__main__":
    main()
