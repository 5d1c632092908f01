"""
Configuration settings for csvtable.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
when they are constructed, so a bad value fails at startup rather than on the
first read or write.

**Environment variables**:
  - CSVTABLE_STORE: Byte store backend, one of "local", "memory", "http".
  - CSVTABLE_ROOT_DIR: Base directory for relative names (local backend).
  - CSVTABLE_ENCODING: Text encoding for the local backend.
  - CSVTABLE_HTTP_BASE_URL / CSVTABLE_HTTP_TOKEN / CSVTABLE_HTTP_TIMEOUT_SECONDS:
    HTTP object store location, bearer token and timeout.
  - CSVTABLE_LOG_LEVEL: Level name for the "csvtable" logger.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import codecs
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (dev/local environments)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


STORE_BACKENDS = ("local", "memory", "http")


@dataclass(frozen=True)
class HttpStoreSettings:
    """
    Configuration for the HTTP object store backend.

    **Conceptual**: Resources live at `{base_url}/{name}`. They are read with
    GET and written with PUT. An optional bearer token is sent with every
    request.

    Attributes:
        base_url: Root URL of the object store (e.g. "https://objects.example.com/tables").
                 REQUIRED - raises ValueError if not provided.
        token: Bearer token for the Authorization header. None sends no header.
        timeout_seconds: HTTP request timeout in seconds (default 30).
    """
    base_url: str
    token: Optional[str] = None
    timeout_seconds: int = 30

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.base_url:
            raise ValueError(
                "CSVTABLE_HTTP_BASE_URL is required but not set. "
                "Please set it in your .env file or environment variables."
            )
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got: {self.timeout_seconds}"
            )

    @classmethod
    def from_env(cls) -> "HttpStoreSettings":
        """
        Load HTTP store settings from environment variables.

        **Environment variables**:
          - CSVTABLE_HTTP_BASE_URL (required): Root URL of the object store.
          - CSVTABLE_HTTP_TOKEN (optional): Bearer token.
          - CSVTABLE_HTTP_TIMEOUT_SECONDS (optional): Defaults to 30.

        Raises:
            ValueError: If the base URL is missing or the timeout is not an integer.
        """
        base_url = os.getenv("CSVTABLE_HTTP_BASE_URL", "")
        token = os.getenv("CSVTABLE_HTTP_TOKEN") or None
        timeout_str = os.getenv("CSVTABLE_HTTP_TIMEOUT_SECONDS", "30")

        try:
            timeout_seconds = int(timeout_str)
        except ValueError:
            raise ValueError(
                f"CSVTABLE_HTTP_TIMEOUT_SECONDS must be an integer, got: {timeout_str}"
            )

        return cls(
            base_url=base_url.rstrip("/"),
            token=token,
            timeout_seconds=timeout_seconds,
        )


@dataclass(frozen=True)
class StoreSettings:
    """
    Selection and options for the default byte store.

    Attributes:
        backend: "local" (filesystem, default), "memory" or "http".
        root_dir: Directory that relative resource names resolve against
                 (local backend only). None means the current directory.
        encoding: Text encoding used by the local backend (default utf-8).
    """
    backend: str = "local"
    root_dir: Optional[Path] = None
    encoding: str = "utf-8"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.backend not in STORE_BACKENDS:
            raise ValueError(
                f"CSVTABLE_STORE must be one of {list(STORE_BACKENDS)}, got: {self.backend!r}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"CSVTABLE_ENCODING is not a known encoding: {self.encoding!r}")

    @classmethod
    def from_env(cls) -> "StoreSettings":
        """
        Load store settings from environment variables.

        **Environment variables**:
          - CSVTABLE_STORE (optional): Defaults to "local".
          - CSVTABLE_ROOT_DIR (optional): Defaults to the current directory.
          - CSVTABLE_ENCODING (optional): Defaults to "utf-8".
        """
        root_dir_str = os.getenv("CSVTABLE_ROOT_DIR", "")
        return cls(
            backend=os.getenv("CSVTABLE_STORE", "local").strip().lower(),
            root_dir=Path(root_dir_str) if root_dir_str else None,
            encoding=os.getenv("CSVTABLE_ENCODING", "utf-8"),
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for csvtable.

    **Usage pattern**:
      ```python
      from csvtable.config.settings import get_settings

      settings = get_settings()
      store = build_store(settings)
      ```

    Attributes:
        store: Default byte store selection.
        http: HTTP store settings. None unless configured (required when
              store.backend is "http").
        log_level: Level name for the "csvtable" logger (default "WARNING").
    """
    store: StoreSettings = field(default_factory=StoreSettings)
    http: Optional[HttpStoreSettings] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.store.backend == "http" and self.http is None:
            raise ValueError(
                "CSVTABLE_STORE is 'http' but the HTTP store is not configured. "
                "Please set CSVTABLE_HTTP_BASE_URL in your .env file."
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"CSVTABLE_LOG_LEVEL is not a logging level: {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        **Design decision**: HTTP settings are optional unless the HTTP backend
        is selected, so local use needs no configuration at all.

        Raises:
            ValueError: If any value is invalid, or if the HTTP backend is
                       selected without CSVTABLE_HTTP_BASE_URL.
        """
        store_settings = StoreSettings.from_env()

        http_settings = None
        try:
            http_settings = HttpStoreSettings.from_env()
        except ValueError as e:
            if store_settings.backend == "http":
                raise ValueError(
                    f"HTTP store settings are required but could not be loaded: {e}"
                )
            # Otherwise the HTTP store is optional - continue without it

        return cls(
            store=store_settings,
            http=http_settings,
            log_level=os.getenv("CSVTABLE_LOG_LEVEL", "WARNING").strip().upper(),
        )


# Lazily loaded singleton. Tests can build Settings(...) directly instead.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid configuration.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          reset_settings()
          monkeypatch.setenv("CSVTABLE_STORE", "memory")
          assert get_settings().store.backend == "memory"
      ```
    """
    global _default_settings
    _default_settings = None
