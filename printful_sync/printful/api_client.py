"""
Printful API Client

Thin client for the Printful REST API.
Handles bearer authentication, JSON decoding and transport errors.
HTTP status codes are returned to the caller, never raised.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from ..common.constants import DEFAULT_TIMEOUT, PRINTFUL_BASE_URL

logger = logging.getLogger(__name__)


class PrintfulAPIError(Exception):
    """Transport failure or undecodable response from the Printful API."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


@dataclass
class PrintfulResponse:
    """Status, raw text and decoded JSON (None if not JSON) of one response."""
    status_code: int
    text: str
    data: Any = None
    is_json: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """
        Return the decoded body.

        Raises:
            PrintfulAPIError: If the body was not valid JSON
        """
        if not self.is_json:
            raise PrintfulAPIError(
                f"Response is not valid JSON (HTTP {self.status_code})",
                status_code=self.status_code,
                body=self.text,
            )
        return self.data


class PrintfulAPIClient:
    """
    Client for the Printful REST API.

    One request per call: no retries, no pagination, no rate limiting.

    Usage:
        with PrintfulAPIClient(access_token="xxx") as client:
            response = client.list_catalog_products()
            if response.ok:
                products = response.json()["data"]
    """

    SUPPORTED_METHODS = {"GET", "POST", "DELETE"}

    def __init__(
        self,
        access_token: str,
        base_url: str = PRINTFUL_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the API client.

        Args:
            access_token: Printful private token (sent as Bearer)
            base_url: API root, e.g. https://api.printful.com
            timeout: Per-request timeout in seconds

        Raises:
            ValueError: If timeout is not greater than 0
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be greater than 0, got {timeout}")

        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        # No session-wide Content-Type: multipart uploads need their own boundary header
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {access_token}",
        })

        self.requests_made = 0

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def rest_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
        files: Optional[Dict] = None,
    ) -> PrintfulResponse:
        """
        Make one REST API request.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API path relative to base_url (e.g., "stores")
            data: JSON body for POST
            files: Multipart files for POST (requests' `files=` format)

        Returns:
            PrintfulResponse for any HTTP status

        Raises:
            ValueError: On an unsupported method
            PrintfulAPIError: On timeouts and other transport failures
        """
        if method not in self.SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        self.requests_made += 1
        logger.debug("%s %s", method, url)

        try:
            if method == "GET":
                response = self.session.get(url, timeout=self.timeout)
            elif method == "POST" and files is not None:
                response = self.session.post(url, files=files, timeout=self.timeout)
            elif method == "POST":
                response = self.session.post(url, json=data, timeout=self.timeout)
            else:
                response = self.session.delete(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error("Request timeout: %s", endpoint)
            raise PrintfulAPIError(f"Request timeout: {method} {endpoint}") from e
        except requests.exceptions.RequestException as e:
            logger.error("Request failed: %s", e)
            raise PrintfulAPIError(f"Request failed: {method} {endpoint}: {e}") from e

        try:
            body = response.json()
            is_json = True
        except ValueError:
            body = None
            is_json = False

        if response.status_code >= 400:
            logger.debug("API Error %d: %s", response.status_code, response.text[:200])

        return PrintfulResponse(
            status_code=response.status_code,
            text=response.text,
            data=body,
            is_json=is_json,
        )

    def list_catalog_products(self) -> PrintfulResponse:
        """GET /v2/catalog-products (first page only)."""
        return self.rest_request("GET", "v2/catalog-products")

    def list_catalog_variants(self, product_id: int) -> PrintfulResponse:
        """GET /v2/catalog-products/{id}/catalog-variants."""
        return self.rest_request("GET", f"v2/catalog-products/{product_id}/catalog-variants")

    def list_stores(self) -> PrintfulResponse:
        """GET /stores."""
        return self.rest_request("GET", "stores")

    def upload_file(self, path: str | Path, content_type: str) -> PrintfulResponse:
        """
        Upload a local file to the file library as multipart field "file".

        Raises:
            OSError: If the file cannot be read
            PrintfulAPIError: On transport failures
        """
        path = Path(path)
        with open(path, "rb") as f:
            files = {"file": (path.name, f, content_type)}
            return self.rest_request("POST", "files", files=files)

    def create_sync_product(self, payload: Dict[str, Any]) -> PrintfulResponse:
        """POST /sync/products with a JSON body."""
        return self.rest_request("POST", "sync/products", data=payload)
