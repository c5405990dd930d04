from typing import Any, Optional
from urllib.parse import quote
import logging

import requests

from barcode_inventory.config import get_settings
from barcode_inventory.services.exceptions import (
    InternalError,
    ServiceUnavailable,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class ProductLookupService:
    """
    Pass-through client for the external product metadata service.

    Responses are relayed verbatim; nothing is validated or stored here.
    Callers map the upstream payload to a product themselves.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        settings = get_settings()
        self.base_url = (base_url or settings.PRODUCT_LOOKUP_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PRODUCT_LOOKUP_TIMEOUT
        self.session = session or requests.Session()

    def close(self) -> None:
        """Release pooled upstream connections."""
        self.session.close()

    def lookup(self, barcode: str) -> Any:
        """
        Fetch product metadata for a barcode.

        Args:
            barcode: Scanned or typed barcode

        Returns:
            The upstream JSON body

        Raises:
            UpstreamError: Upstream answered with a non-2xx status
            ServiceUnavailable: No response from upstream
            InternalError: The request could not be built or the body is not JSON
        """
        url = f"{self.base_url}/product/{quote(barcode, safe='')}"

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(f"Lookup for barcode {barcode} failed with status {e.response.status_code}")
            raise UpstreamError(
                "Failed to fetch product data",
                status_code=e.response.status_code,
                details=self._body(e.response),
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.error(f"Lookup service unreachable: {e}")
            raise ServiceUnavailable(
                "External service unavailable",
                details="No response received from external API",
            )
        except requests.RequestException as e:
            logger.error(f"Could not send lookup request: {e}")
            raise InternalError("Failed to fetch product data", details=str(e))

        try:
            return response.json()
        except ValueError:
            logger.error(f"Lookup for barcode {barcode} returned a non-JSON body")
            raise InternalError("Failed to fetch product data", details="Invalid JSON from external API")

    @staticmethod
    def _body(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
