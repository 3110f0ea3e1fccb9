"""Client for the public demo products API."""

import httpx
from loguru import logger

from src.shopnest.core.errors import NetworkFailure
from src.shopnest.runtime.config.config_data import SAMPLE_PRODUCT_URL

BODY_PREVIEW_CHARS = 120


class ApiClient:
    """Fetches the sample product over a caller-owned ``httpx.Client``.

    The caller creates the HTTP client and closes it; ApiClient only issues
    requests through it.
    """

    def __init__(self, http_client: httpx.Client, url: str = SAMPLE_PRODUCT_URL) -> None:
        self._client = http_client
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def fetch_sample_product(self) -> str:
        """GET the sample product and describe the response.

        Any HTTP status, including 4xx and 5xx, is described rather than
        raised. Only request failures are errors.

        Returns:
            ``"HTTP <status> | Body (primeros 120 chars): <preview>..."``

        Raises:
            NetworkFailure: If the host cannot be resolved or reached, the
                client's timeout elapses, or the body cannot be decoded
        """
        logger.debug(f"GET {self._url}")
        try:
            response = self._client.get(self._url)
        except httpx.RequestError as e:
            logger.warning(f"Request to {self._url} failed: {e!r}")
            raise NetworkFailure(str(e) or type(e).__name__) from e

        logger.info(f"GET {self._url} -> {response.status_code}")
        preview = response.text[:BODY_PREVIEW_CHARS]
        return (
            f"HTTP {response.status_code} | "
            f"Body (primeros {BODY_PREVIEW_CHARS} chars): {preview}..."
        )
