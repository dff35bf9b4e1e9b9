"""
Command-line entrypoint.

    conviction-trust assess <wallet> [--base-url URL] [--timeout SEC]
        Print the TrustAssessment for one wallet as JSON (stdout).

    conviction-trust serve [--host HOST] [--port PORT]
        Run the FastAPI server under uvicorn.

Env: CORTEX_API_URL, CORTEX_TIMEOUT_SEC, API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from conviction_trust.assessment import TrustAssessor
from conviction_trust.config import get_settings
from conviction_trust.conviction import CortexConvictionSource
from conviction_trust.trust_logging import get_logger, resolve_level

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conviction-trust",
        description="Assess reasoning trust for agent wallets from conviction scores",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    assess = sub.add_parser("assess", help="Assess one wallet and print JSON")
    assess.add_argument("wallet", help="Wallet identifier")
    assess.add_argument("--base-url", default=None, help="Cortex API base URL (default: CORTEX_API_URL)")
    assess.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    return parser


def run_assess(wallet: str, base_url: str | None = None, timeout: float | None = None) -> str:
    """Assess one wallet and return the assessment as a JSON string."""
    settings = get_settings()
    source = CortexConvictionSource(
        base_url or settings.cortex_api_url,
        timeout_sec=timeout if timeout is not None else settings.timeout_sec,
    )
    assessment = asyncio.run(TrustAssessor(source).assess_reasoning_trust(wallet))
    return assessment.model_dump_json(indent=2)


def run_serve(host: str | None = None, port: int | None = None) -> None:
    import uvicorn

    settings = get_settings()
    api_host = host or settings.api_host
    api_port = port if port is not None else settings.api_port
    logger.info("server_starting", host=api_host, port=api_port)
    uvicorn.run(
        "conviction_trust.api_server.app:app",
        host=api_host,
        port=api_port,
        log_level=logging.getLevelName(resolve_level(os.getenv("LOG_LEVEL"))).lower(),
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "assess":
        try:
            print(run_assess(args.wallet, base_url=args.base_url, timeout=args.timeout))
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        return 0
    run_serve(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
