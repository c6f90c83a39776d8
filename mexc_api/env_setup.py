"""Environment configuration setup utilities.

This module provides functions for loading environment variables from .env files
and configuring the SDK for local development and the examples.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from mexc_api.errors import ValidationError
from mexc_api.helpers import DEFAULT_API_URL

log = logging.getLogger(__name__)


def setup_environment() -> tuple[str, str, str, int | None]:
    """Load and return environment variables for MEXC API configuration.

    Loads environment variables from a .env file if present, otherwise falls
    back to system environment variables. Reads environment-specific variables
    based on the ENVIRONMENT variable (defaults to 'production').

    Returns:
        Tuple:
            - api_endpoint: The API base URL
            - api_key: The API key
            - api_secret: The API secret used to sign requests
            - recv_window: The receive window in milliseconds, or None when unset

    Raises:
        ValidationError: If the receive window is not an integer

    """
    env_file_path = Path(".env")
    if env_file_path.exists():
        log.info("Loading environment variables from .env file")
        load_dotenv(env_file_path)
    else:
        log.info(".env file not found. Falling back to Bash Environment variables.")

    environment = os.getenv("ENVIRONMENT", "production").lower()
    log.info("Using %s environment", environment)
    suffix = environment.upper()

    api_endpoint = os.environ.get(f"MEXC_API_ENDPOINT_{suffix}", DEFAULT_API_URL)
    api_key = os.environ.get(f"MEXC_API_KEY_{suffix}", "your-api-key")
    api_secret = os.environ.get(f"MEXC_API_SECRET_{suffix}", "your-api-secret")

    raw_recv_window = os.environ.get(f"MEXC_RECV_WINDOW_{suffix}")
    recv_window: int | None = None
    if raw_recv_window:
        try:
            recv_window = int(raw_recv_window)
        except ValueError as e:
            raise ValidationError(f"Invalid MEXC_RECV_WINDOW_{suffix}: {e}") from e

    return api_endpoint, api_key, api_secret, recv_window
