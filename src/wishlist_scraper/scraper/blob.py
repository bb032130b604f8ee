"""
Pull the page data blob out of a wishlist page.

The page carries its initial state as JSON in an attribute:

    <div id="pagedata" data-blob="{&quot;fan_data&quot;: ...}">

Only `&quot;` is escaped by the site, so only `&quot;` is unescaped here.
"""
import logging
import re
from typing import Optional, Union

from pydantic import ValidationError

from wishlist_scraper.errors import BlobNotFoundError, MalformedBlobError
from wishlist_scraper.models import PageBlob

logger = logging.getLogger(__name__)

BLOB_PATTERN = re.compile(r'id="pagedata".*?data-blob="(.*?)">')
QUOTE_ENTITY = "&quot;"


def _as_text(html: Union[str, bytes]) -> str:
    if isinstance(html, bytes):
        return html.decode("utf-8", errors="replace")
    return html


def find_blob(html: str) -> Optional[str]:
    """Return the raw (still escaped) attribute value, or None if the page has none."""
    m = BLOB_PATTERN.search(html)
    return m.group(1) if m else None


def unescape_blob(raw: str) -> str:
    return raw.replace(QUOTE_ENTITY, '"')


def extract_blob(html: Union[str, bytes]) -> str:
    raw = find_blob(_as_text(html))
    if raw is None:
        raise BlobNotFoundError('No id="pagedata" element with a data-blob attribute in page')
    return unescape_blob(raw)


def parse_page_blob(html: Union[str, bytes]) -> PageBlob:
    blob_json = extract_blob(html)
    try:
        blob = PageBlob.model_validate_json(blob_json)
    except ValidationError as exc:
        raise MalformedBlobError(f"Page blob did not match the expected schema: {exc}") from exc

    logger.debug(
        "Decoded page blob: fan_id=%s, %d wishlist ids, %d cached wishlist items",
        blob.fan_id,
        len(blob.wishlist_data.sequence),
        len(blob.item_cache.wishlist),
    )
    return blob
