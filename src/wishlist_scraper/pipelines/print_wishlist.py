import logging
import sys
from typing import Optional, TextIO

import requests

from wishlist_scraper.config import Settings, load_settings
from wishlist_scraper.errors import WishlistError
from wishlist_scraper.listing import print_urls, response_item_urls, wishlist_item_urls
from wishlist_scraper.logging_config import setup_logging
from wishlist_scraper.scraper.api import get_wishlist
from wishlist_scraper.scraper.blob import parse_page_blob
from wishlist_scraper.scraper.fetch import fetch_page

logger = logging.getLogger(__name__)


def run(
    settings: Settings,
    out: Optional[TextIO] = None,
    session: Optional[requests.Session] = None,
) -> None:
    """
    Print the wishlist page's items, then the next batch from the API.

    Raises the first WishlistError hit; URLs printed before it stay printed.
    """
    out = out or sys.stdout

    # 1) Wishlist page -> embedded blob
    html = fetch_page(settings.wishlist_url, session=session, timeout=settings.http_timeout_s)
    blob = parse_page_blob(html)

    # 2) Items rendered on the page
    print_urls(wishlist_item_urls(blob), out=out)

    # 3) One follow-up batch
    next_page = get_wishlist(
        settings.api_url,
        blob.fan_id,
        blob.wishlist_data.last_token,
        session=session,
        timeout=settings.http_timeout_s,
    )
    print_urls(response_item_urls(next_page), out=out)


def main(settings: Optional[Settings] = None, out: Optional[TextIO] = None) -> int:
    setup_logging()

    try:
        settings = settings or load_settings()
        run(settings, out=out)
    except WishlistError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return exc.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
