import logging
import os
import sys


def setup_logging(default_level: int = logging.INFO) -> None:
    """
    Send log records to stderr; stdout only carries item URLs.

    Call this once at startup (e.g. in `python -m wishlist_scraper`).
    """
    if logging.getLogger().handlers:
        # Already configured (e.g. by pytest); don't touch it.
        return

    log_level_name = os.getenv("LOG_LEVEL", "").upper()
    level = getattr(logging, log_level_name, default_level)

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
