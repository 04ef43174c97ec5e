#!/usr/bin/env python3
"""
Run the contracts mock API with uvicorn.

  python scripts/run_api.py
  python scripts/run_api.py --port 8080 --reload

Host/port default to config/server_config.yml, overridden by PORT/HOST env vars.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from src.utils.config_loader import CONFIG_PATH_ENV, load_server_config


def setup_logging(level: str, verbose: bool = False) -> None:
    level = "DEBUG" if verbose else level
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve the in-memory insurance contracts mock API")
    parser.add_argument("--config", type=Path, default=None, help="Path to server_config.yml")
    parser.add_argument("--host", default=None, help="Override bind host")
    parser.add_argument("--port", type=int, default=None, help="Override listening port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    if args.config is not None:
        # The served app reloads its config on import, so it must see the same file
        os.environ[CONFIG_PATH_ENV] = str(args.config.resolve())
    cfg = load_server_config(args.config)
    setup_logging(cfg.log_level, args.verbose)

    host = args.host or cfg.host
    port = args.port or cfg.port
    logging.getLogger(__name__).info("Mock API server is running on http://%s:%d", host, port)

    uvicorn.run(
        "src.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="debug" if args.verbose else cfg.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
