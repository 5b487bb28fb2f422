class PurchasesClientError(Exception):
    """The purchases service could not be reached or gave an unusable answer."""


class PurchasesRateLimitError(PurchasesClientError):
    """The purchases service throttled the fetch (HTTP 429)."""


class PurchasesValidationError(PurchasesClientError):
    """The body was not JSON, or its {success, data} envelope did not validate."""


class PurchasesHTTPError(PurchasesClientError):
    """A non-2xx status, or an envelope with success set to false."""
