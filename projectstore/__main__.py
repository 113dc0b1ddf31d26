"""
Serve the application with uvicorn.

Usage:
    python -m projectstore --port 8080
"""

import argparse
import logging

import uvicorn

from projectstore.core.config import settings
from projectstore.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Project Store API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    configure_logging(level=settings.log_level)

    logger.info("Starting Project Store at http://%s:%d", args.host, args.port)
    uvicorn.run("projectstore.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
