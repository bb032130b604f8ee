"""
Errors raised while scraping a wishlist.

Each error aborts the run; `main` maps the class to its exit code.
"""


class WishlistError(Exception):
    exit_code = 1


class NetworkError(WishlistError):
    """The request could not be sent or no response arrived."""
    exit_code = 2


class ReadError(WishlistError):
    """The response body could not be read to the end."""
    exit_code = 3


class BlobNotFoundError(WishlistError):
    """The page has no `pagedata` element with a `data-blob` attribute."""
    exit_code = 4


class MalformedBlobError(WishlistError):
    """The page blob is not valid JSON or does not match `PageBlob`."""
    exit_code = 5


class MalformedResponseError(WishlistError):
    """The wishlist API answered with something that is not a `PaginatedItemsResponse`."""
    exit_code = 6


class ConfigError(WishlistError):
    """A WISHLIST_* environment variable or .env value could not be parsed."""
    exit_code = 1
