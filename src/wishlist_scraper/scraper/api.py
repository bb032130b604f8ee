import logging
from typing import Dict, Optional, Union

import requests
from pydantic import ValidationError

from wishlist_scraper.errors import MalformedResponseError
from wishlist_scraper.models import PaginatedItemsResponse
from wishlist_scraper.scraper.fetch import send_request

logger = logging.getLogger(__name__)


def build_wishlist_request(fan_id: Union[int, str], last_token: str) -> Dict[str, str]:
    """
    Request body for the wishlist_items API.

    `older_than_token` is the `last_token` the site handed out last, either
    in the page blob or in a previous API response.
    """
    return {
        "fan_id": str(fan_id),
        "older_than_token": last_token,
    }


def get_wishlist(
    api_url: str,
    fan_id: Union[int, str],
    last_token: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> PaginatedItemsResponse:
    """Fetch the batch of wishlist items older than `last_token`. One call, no paging loop."""
    payload = build_wishlist_request(fan_id, last_token)
    logger.info("Requesting wishlist items for fan %s older than %r", payload["fan_id"], last_token)

    body = send_request("POST", api_url, session=session, timeout=timeout, json=payload)

    try:
        resp = PaginatedItemsResponse.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponseError(f"Unexpected response from {api_url}: {exc}") from exc

    logger.info(
        "Got %d items (more_available=%s)", len(resp.items), resp.more_available
    )
    return resp
