"""Launch the ZPL printer emulator under Uvicorn."""

from __future__ import annotations

import argparse
import os
import sys
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

# Bind to loopback by default; pass --host 0.0.0.0 explicitly so printers on
# the network can reach the emulator.
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
APP_IMPORT_PATH = "zpl_emulator.main:app"


class InvalidPortError(ValueError):
    """Raised when the requested port is outside the TCP range."""

    def __init__(self, port: int | str) -> None:
        """Embed the rejected value in the message."""
        super().__init__(f"Port must be an integer between 1 and 65535, got {port!r}")


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser for the start-server script."""
    parser = argparse.ArgumentParser(description="Launch the ZPL printer emulator via Uvicorn.")
    parser.add_argument(
        "--host",
        help="Server bind address (default: env HOST or 127.0.0.1).",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Server port (default: env PORT or 8000).",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload; useful for development.",
    )
    return parser


def resolve_host(cli_host: str | None, env: Mapping[str, str]) -> str:
    """Pick the bind host: CLI value, then HOST, then the loopback default."""
    for candidate in (cli_host, env.get("HOST")):
        if candidate is not None and candidate.strip():
            return candidate.strip()
    return DEFAULT_HOST


def resolve_port(cli_port: int | None, env: Mapping[str, str]) -> int:
    """Pick the bind port: CLI value, then PORT, then 8000."""
    if cli_port is not None:
        port = cli_port
    else:
        env_port = env.get("PORT")
        if env_port is None:
            return DEFAULT_PORT
        try:
            port = int(env_port)
        except ValueError as exc:
            raise InvalidPortError(env_port) from exc

    if not (1 <= port <= 65535):
        raise InvalidPortError(port)
    return port


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint to launch uvicorn with the resolved bind address."""
    args = build_parser().parse_args(argv)
    env = dict(os.environ)
    try:
        host = resolve_host(args.host, env)
        port = resolve_port(args.port, env)
    except InvalidPortError as exc:
        print(exc, file=sys.stderr)
        return 1

    uvicorn.run(APP_IMPORT_PATH, host=host, port=port, reload=args.reload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
