import logging
from typing import Optional

import requests

from wishlist_scraper.errors import NetworkError, ReadError

logger = logging.getLogger(__name__)

_SESSION = requests.Session()


def _read_body(resp: requests.Response, url: str) -> bytes:
    try:
        return resp.content
    except requests.RequestException as exc:
        raise ReadError(f"Failed to read response body from {url}: {exc}") from exc


def send_request(
    method: str,
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    **kwargs,
) -> bytes:
    """
    Send one request and return the whole response body.

    No retries. The response is closed before returning, whether the body
    was read or not. The status code is not checked: callers find out
    from the body whether the answer is usable.
    """
    sess = session or _SESSION
    try:
        resp = sess.request(method, url, stream=True, timeout=timeout, **kwargs)
    except requests.RequestException as exc:
        raise NetworkError(f"{method} {url} failed: {exc}") from exc

    with resp:
        if not resp.ok:
            logger.warning("%s %s returned HTTP %s", method, url, resp.status_code)
        return _read_body(resp, url)


def fetch_page(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> bytes:
    logger.info("Fetching %s", url)
    body = send_request("GET", url, session=session, timeout=timeout)
    logger.debug("Read %d bytes from %s", len(body), url)
    return body
