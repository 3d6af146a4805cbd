"""Run a single search from the command line and print the JSON response."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

from hotel_finder.app import create_app
from hotel_finder.config.logging import configure_logging
from hotel_finder.config.settings import load_settings
from hotel_finder.search.service import search


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns 0 on success and 1 on any failed search."""

    parser = argparse.ArgumentParser(description="Search the hotel dataset with a free-text query.")
    parser.add_argument("query", help='Free-text request, e.g. "cheapest Marriott in Hyderabad".')
    parser.add_argument("--csv", help="Path to hotels.csv (overrides HOTELS_CSV_PATH).")
    args = parser.parse_args(argv)

    load_dotenv(".env")
    settings = load_settings()
    if args.csv:
        settings = settings.model_copy(update={"hotels_csv_path": args.csv})
    configure_logging(settings.log_level, debug_llm=settings.debug_llm)

    app = create_app(settings)
    response = asyncio.run(search(args.query, app))

    json.dump(response.body, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
