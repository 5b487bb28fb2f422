from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from .exceptions import PurchasesClientError, PurchasesHTTPError, PurchasesRateLimitError, PurchasesValidationError
from .models import PurchasesQuery, PurchasesResponse


class PurchasesClient:
    """
    Fetches raw purchase payloads from the marketplace purchases service.
    Mapping is left to purchase_mapping.core.OrderMapper.

    Example:
        >>> from purchase_mapping.rest.client import PurchasesClient
        >>> from purchase_mapping.core import map_orders
        >>> with PurchasesClient(base_url="https://purchases.example.com/api") as client:
        ...     purchases = map_orders(client.fetch_purchases(limit=50))
    """

    def __init__(self, base_url: str, timeout: float = 15.0, *, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def fetch_purchases(self, limit: int = 100, status: Optional[str] = None, source: Optional[str] = None) -> Union[Dict[str, Any], List[Any]]:
        url = f"{self.base_url}/purchases"
        params = PurchasesQuery(limit=limit, status=status, source=source).model_dump(exclude_none=True)
        try:
            response = self._client.get(url, params=params)

            if response.status_code == 429:
                raise PurchasesRateLimitError("Rate limit exceeded. Please retry later.")

            if not response.is_success:
                raise PurchasesHTTPError(f"Unexpected status code: {response.status_code}")

            try:
                data = response.json()
            except ValueError as e:
                raise PurchasesValidationError(f"Invalid response format: {e}") from e

            if isinstance(data, dict) and "success" in data:
                try:
                    envelope = PurchasesResponse(**data)
                except ValidationError as e:
                    raise PurchasesValidationError(f"Invalid response format: {e}") from e

                if not envelope.success:
                    raise PurchasesHTTPError(f"Service reported failure: {envelope.error or 'unknown error'}")

                return envelope.payload()

            if isinstance(data, (dict, list)):
                return data

            raise PurchasesValidationError(f"Invalid response format: expected an object, got {type(data).__name__}")

        except httpx.RequestError as e:
            raise PurchasesClientError(f"Request failed: {e}") from e

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
