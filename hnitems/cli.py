import argparse
import logging
import sys
from typing import List, Optional

from hnitems.client import HackerNewsClient
from hnitems.config import Settings
from hnitems.errors import HackerNewsError
from hnitems.pipeline import TOP_ITEMS_COUNT, fetch_top_items, render

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hnitems",
        description=f"Print a one-line summary of the top {TOP_ITEMS_COUNT} Hacker News items.",
        epilog="Configured through HACKERNEWS_BASE_URL, HACKERNEWS_TIMEOUT, "
               "HACKERNEWS_MAX_WORKERS and HACKERNEWS_LOG_LEVEL.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    parse_args(argv)
    try:
        settings = Settings.from_env()
        logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
        client = HackerNewsClient.from_settings(settings)
        items = fetch_top_items(client, TOP_ITEMS_COUNT, max_workers=settings.max_workers)
    except HackerNewsError as e:
        log.debug("Pipeline failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    print(render(items))
    return 0
