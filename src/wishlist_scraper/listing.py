import logging
import sys
from typing import Dict, Iterable, List, Optional, TextIO

from wishlist_scraper.models import Item, PageBlob, PaginatedItemsResponse

logger = logging.getLogger(__name__)


def lookup_item(cache: Dict[str, Item], item_id: str) -> Optional[Item]:
    return cache.get(item_id)


def page_item_urls(item_ids: Iterable[str], cache: Dict[str, Item]) -> List[str]:
    """
    Join an id sequence against an item cache.

    URLs come out in sequence order. Ids without a cache entry are skipped
    without raising or warning; the site is expected to cache every id it
    lists.
    """
    urls: List[str] = []
    for item_id in item_ids:
        item = lookup_item(cache, item_id)
        if item is None:
            logger.debug("Item %s not in cache; skipping", item_id)
            continue
        urls.append(item.item_url)
    return urls


def wishlist_item_urls(blob: PageBlob) -> List[str]:
    return page_item_urls(blob.wishlist_data.sequence, blob.item_cache.wishlist)


def response_item_urls(resp: PaginatedItemsResponse) -> List[str]:
    # more_available says nothing about this batch; every item is listed
    return [item.item_url for item in resp.items]


def print_urls(urls: Iterable[str], out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    for url in urls:
        print(url, file=out)
