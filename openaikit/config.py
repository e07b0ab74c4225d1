"""
Configuration constants and the pydantic ClientConfig for openaikit.
"""

import logging
import os
import sys
from typing import Optional

from pydantic import BaseModel


# ─────────────────────────────────────────────────────────────────────
# DEFAULTS
# ─────────────────────────────────────────────────────────────────────

DEFAULT_BASE_URL: str = "https://api.openai.com/v1"
DEFAULT_TIMEOUT_SECONDS: float = 60.0


# ─────────────────────────────────────────────────────────────────────
# ENVIRONMENT LOADING
# ─────────────────────────────────────────────────────────────────────

def get_api_key() -> Optional[str]:
    """Get the API key from OPENAI_API_KEY."""
    value = os.environ.get("OPENAI_API_KEY", "").strip()
    return value or None


def get_organization() -> Optional[str]:
    """Get the organization ID from OPENAI_ORGANIZATION, if set."""
    value = os.environ.get("OPENAI_ORGANIZATION", "").strip()
    return value or None


def get_base_url() -> str:
    """
    Get the API base URL from environment or default.

    Set OPENAI_BASE_URL to point at a proxy or compatible server.
    Trailing slashes are stripped.
    """
    value = os.environ.get("OPENAI_BASE_URL", "").strip()
    return (value or DEFAULT_BASE_URL).rstrip("/")


def get_timeout_seconds() -> float:
    """
    Get request timeout in seconds.

    Set OPENAI_TIMEOUT_SECONDS in .env (default: 60).
    """
    try:
        return float(os.environ.get("OPENAI_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS


def configure_logging(verbose: bool = False) -> None:
    """Route openaikit logs to stderr. Debug level shows every request."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s %(message)s", stream=sys.stderr)


# ─────────────────────────────────────────────────────────────────────
# DATA MODELS
# ─────────────────────────────────────────────────────────────────────

class ClientConfig(BaseModel):
    """Connection settings for the REST client."""
    api_key: Optional[str] = None
    organization: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, load_env_file: bool = False) -> "ClientConfig":
        """
        Build config from environment variables.

        With load_env_file=True a .env file in the working directory
        is loaded first (existing variables win).
        """
        if load_env_file:
            from dotenv import find_dotenv, load_dotenv
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            api_key=get_api_key(),
            organization=get_organization(),
            base_url=get_base_url(),
            timeout_seconds=get_timeout_seconds(),
        )

    def auth_headers(self) -> dict[str, str]:
        """Headers injected into every request."""
        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if self.organization:
            headers["OpenAI-Organization"] = self.organization
        return headers
