"""
Run the QuickEx backend under uvicorn.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from quickex.config import get_settings

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="QuickEx backend server")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (defaults to HOST)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (defaults to PORT)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Backend listening on http://localhost:%s", port)
    logger.info("Swagger docs available at http://localhost:%s/docs", port)

    uvicorn.run(
        "quickex.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
