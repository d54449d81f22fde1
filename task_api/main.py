"""Command-line entry point: serve the task API with uvicorn."""

import argparse
import logging

import uvicorn

from .app import create_app
from .config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="In-memory task API")
    parser.add_argument("--host", default=settings.host, help=f"bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"bind port (default: {settings.port})")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"log level (default: {settings.log_level})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Starting server at http://%s:%d", args.host, args.port)
    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
