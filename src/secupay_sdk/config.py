# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for the Secupay SDK."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_BASE_PATH = "https://app-wallee.com:443/api"
DEFAULT_TIMEOUT = 25.0
DEFAULT_USER_AGENT = f"Secupay-Python-Client/{__version__}/python"
DEFAULT_HTTP_CLIENT_TYPE = "httpx"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_str_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class ClientSettings:
    """Dispatcher and transport defaults."""

    base_path: str = DEFAULT_BASE_PATH
    timeout: float = DEFAULT_TIMEOUT
    certificate_authority: str | None = None
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    http_client_type: str = DEFAULT_HTTP_CLIENT_TYPE
    debug: bool = False
    debug_file: str | None = None

    def __post_init__(self) -> None:
        self.base_path = str(self.base_path or DEFAULT_BASE_PATH).rstrip("/")
        if not self.timeout or self.timeout <= 0:
            self.timeout = DEFAULT_TIMEOUT

    @property
    def verify(self) -> bool | str:
        """Value handed to the transport's TLS verification option."""
        if not self.verify_ssl:
            return False
        return self.certificate_authority or True

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            base_path=os.getenv("SECUPAY_BASE_PATH", cls.base_path),
            timeout=_float_env("SECUPAY_HTTP_TIMEOUT", cls.timeout),
            certificate_authority=_optional_str_env("SECUPAY_CA_FILE"),
            verify_ssl=_bool_env("SECUPAY_HTTP_VERIFY_SSL", cls.verify_ssl),
            user_agent=os.getenv("SECUPAY_USER_AGENT", cls.user_agent),
            http_client_type=os.getenv("SECUPAY_HTTP_CLIENT", cls.http_client_type).strip().lower(),
            debug=_bool_env("SECUPAY_DEBUG", cls.debug),
            debug_file=_optional_str_env("SECUPAY_DEBUG_FILE"),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()
