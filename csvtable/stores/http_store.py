"""
HTTP object store client.

**Conceptual**: This module is a thin wrapper around HTTP requests to an
object store that serves each resource at `{base_url}/{name}`. It handles
authentication, request construction and error translation. It knows
nothing about CSV; the Dataset hands it finished text.

**HTTP request details**:
  - Read:  GET {base_url}/{name}, body decoded as UTF-8.
  - Write: PUT {base_url}/{name}, body encoded as UTF-8,
           Content-Type: text/csv; charset=utf-8.
  - Headers: Authorization: Bearer {token} when a token is configured.
  - Timeout: From settings (default 30 seconds).

**Error handling**: every failure (empty resource name, non-2xx status,
timeout, connection error, undecodable body) is raised as AccessError with
the underlying exception as cause. Nothing is retried here.
"""

import logging
from urllib.parse import quote

import requests

from csvtable.config.settings import HttpStoreSettings
from csvtable.data.errors import AccessError

logger = logging.getLogger(__name__)


class HttpStore:
    """
    ByteStore backed by an HTTP object store.

    **Example usage**:
        >>> from csvtable.config.settings import HttpStoreSettings
        >>> settings = HttpStoreSettings(base_url="https://objects.example.com/tables")
        >>> with HttpStore(settings) as store:
        ...     text = store.read_all("people.csv")
    """

    def __init__(self, settings: HttpStoreSettings):
        """
        Initialize the HTTP store with settings.

        Args:
            settings: Object store configuration (base_url, token, timeout_seconds).
        """
        self.settings = settings
        self.session = requests.Session()

        self.session.headers.update({
            "Accept": "text/csv, text/plain;q=0.9, */*;q=0.1",
            "User-Agent": "csvtable/1.0",
        })
        if self.settings.token:
            self.session.headers["Authorization"] = f"Bearer {self.settings.token}"

    def url_for(self, name: str) -> str:
        """Build the URL of resource `name`."""
        if not name or not name.strip("/"):
            raise ValueError("Resource name cannot be empty")
        quoted = quote(name.lstrip("/"), safe="/")
        return f"{self.settings.base_url.rstrip('/')}/{quoted}"

    def _url_or_access_error(self, operation: str, name: str) -> str:
        try:
            return self.url_for(name)
        except ValueError as e:
            logger.warning(f"Cannot {operation} '{name}': {e}")
            raise AccessError(operation, name, e) from e

    def read_all(self, name: str) -> str:
        """
        Fetch resource `name`.

        Raises:
            AccessError: On any HTTP, network or decoding failure.
        """
        url = self._url_or_access_error("read", name)
        try:
            response = self.session.get(url, timeout=self.settings.timeout_seconds)
            response.raise_for_status()
            text = response.content.decode("utf-8")
        except requests.Timeout as e:
            logger.warning(f"GET {url} timed out after {self.settings.timeout_seconds}s")
            raise AccessError("read", name, e) from e
        except (requests.RequestException, UnicodeDecodeError) as e:
            logger.warning(f"GET {url} failed: {e}")
            raise AccessError("read", name, e) from e

        logger.debug(f"GET {url} returned {len(text)} chars")
        return text

    def write_all(self, name: str, text: str) -> None:
        """
        Upload `text` as resource `name`, replacing any previous content.

        Raises:
            AccessError: On any HTTP or network failure.
        """
        url = self._url_or_access_error("write", name)
        try:
            response = self.session.put(
                url,
                data=text.encode("utf-8"),
                headers={"Content-Type": "text/csv; charset=utf-8"},
                timeout=self.settings.timeout_seconds,
            )
            response.raise_for_status()
        except requests.Timeout as e:
            logger.warning(f"PUT {url} timed out after {self.settings.timeout_seconds}s")
            raise AccessError("write", name, e) from e
        except requests.RequestException as e:
            logger.warning(f"PUT {url} failed: {e}")
            raise AccessError("write", name, e) from e

        logger.debug(f"PUT {url} stored {len(text)} chars")

    def close(self):
        """Close the HTTP session and release pooled connections."""
        self.session.close()

    def __enter__(self):
        """Enable context manager support (with statement)."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close the session when leaving the with block."""
        self.close()
        return False
