"""Launch the web app with uvicorn."""
from __future__ import annotations
import argparse
import logging

import uvicorn

from gemini_imagegen.common.config import Settings
from gemini_imagegen.common.logging_setup import setup_logging
from gemini_imagegen.serve.fastapi_app import create_app

LOGGER = logging.getLogger("imagegen.serve.server")

def main() -> None:
    setup_logging()
    ap = argparse.ArgumentParser(description="Serve the Gemini image generator web app")
    ap.add_argument("--cfg", default=None, help="Optional YAML config path")
    ap.add_argument("--host", default=None, help="Bind address (overrides config)")
    ap.add_argument("--port", type=int, default=None, help="Port (overrides config)")
    args = ap.parse_args()

    settings = Settings.from_env(args.cfg)
    host = args.host or settings.host
    port = args.port or settings.port
    if not settings.api_key:
        LOGGER.warning("GOOGLE_API_KEY is not set; /api/generate will answer 500")

    LOGGER.info("Server running at http://%s:%s", host, port)
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)

if __name__ == "__main__":
    main()
