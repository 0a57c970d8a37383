"""Launch the gateway under uvicorn."""
from __future__ import annotations
import argparse
import os

import uvicorn

from gemini_gateway.common.logging_setup import setup_logging
from gemini_gateway.common.settings import Settings

def main() -> None:
    setup_logging()
    settings = Settings.from_env()
    ap = argparse.ArgumentParser(description="Run the Gemini gateway")
    ap.add_argument("--host", default=settings.host)
    ap.add_argument("--port", type=int, default=settings.port)
    args = ap.parse_args()

    os.environ["PORT"] = str(args.port)
    # log_config=None keeps uvicorn on the root handler from setup_logging.
    uvicorn.run(
        "gemini_gateway.serve.fastapi_app:app",
        host=args.host,
        port=args.port,
        log_config=None,
    )

if __name__ == "__main__":
    main()
