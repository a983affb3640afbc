import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from hnitems.config import DEFAULT_MAX_WORKERS
from hnitems.presenter import summarize
from hnitems.schemas import Item

log = logging.getLogger(__name__)

TOP_ITEMS_COUNT = 15


def fetch_items(client, ids: Sequence[int], max_workers: int = DEFAULT_MAX_WORKERS) -> List[Item]:
    """Fetch and decode ``ids`` concurrently, returning items in ``ids`` order.

    Any failed fetch or decode fails the whole batch.
    """
    if not ids:
        return []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(ids))) as pool:
        return list(pool.map(client.item, ids))


def fetch_top_items(client, count: int = TOP_ITEMS_COUNT,
                    max_workers: int = DEFAULT_MAX_WORKERS) -> List[Item]:
    ids = client.top_stories()[:count]
    log.info("Fetching %d top items", len(ids))
    return fetch_items(client, ids, max_workers=max_workers)


def render(items: Sequence[Item]) -> str:
    return "\n\n".join(summarize(item) for item in items)
