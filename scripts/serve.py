#!/usr/bin/env python3
"""Run the regional settings API with uvicorn."""
import argparse

# Load .env file
from dotenv import load_dotenv
load_dotenv()

import uvicorn

from homelogger.api.app import create_app
from homelogger.config import Settings


def main() -> None:
    config = Settings()
    parser = argparse.ArgumentParser(description="Serve the HomeLogger regional API")
    parser.add_argument("--host", default=config.api_host)
    parser.add_argument("--port", type=int, default=config.api_port)
    args = parser.parse_args()

    print(f"Starting HomeLogger regional API at http://{args.host}:{args.port}")
    print(f"Database: {config.database_url}")

    uvicorn.run(create_app(config), host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
