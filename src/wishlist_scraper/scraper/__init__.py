from wishlist_scraper.scraper.api import build_wishlist_request, get_wishlist
from wishlist_scraper.scraper.blob import extract_blob, find_blob, parse_page_blob, unescape_blob
from wishlist_scraper.scraper.fetch import fetch_page

__all__ = [
    "build_wishlist_request",
    "extract_blob",
    "fetch_page",
    "find_blob",
    "get_wishlist",
    "parse_page_blob",
    "unescape_blob",
]
