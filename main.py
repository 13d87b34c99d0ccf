import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console

from scraper import scrape
from settings import get_setting, load_config

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

USAGE = "Usage: basic-scraper <url>"


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basic-scraper",
        description="Scrape one page with headless Chromium and print JSON",
    )
    parser.add_argument("url", nargs="?", help="page to scrape")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (debug, info, warning, error, critical)",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_int,
        default=None,
        help="navigation and content wait timeout in milliseconds",
    )
    return parser


def _setup_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    log_file = get_setting("log_file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as e:
        # argparse has already printed usage and the error; --help exits 0.
        return 1 if e.code else 0
    if not args.url:
        print(USAGE)
        return 1

    try:
        _setup_logging(args.log_level)
        config = load_config(timeout=args.timeout)
        items = asyncio.run(scrape(args.url, config))
    except Exception as e:
        err_console.print(f"Failed: {e}", style="red", markup=False)
        return 1

    print("\nScraped Data:")
    print(json.dumps([item.to_dict() for item in items], indent=2))
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
