"""
Environment configuration for the v20 client.

``ClientSettings.from_env()`` reads the following variables:

* ``V20_ACCESS_TOKEN`` (or ``V20_ACCESS_TOKEN_FILE``; the file wins)
* ``V20_ENVIRONMENT`` – ``practice`` (default) or ``live``; selects the hosts
* ``V20_API_URL`` / ``V20_STREAM_URL`` – explicit host overrides
* ``V20_REQUEST_TIMEOUT`` – total REST timeout in seconds (default 30)
* ``V20_STREAM_READ_TIMEOUT`` – idle read timeout of streams (default 30)
* ``V20_MAX_REQUESTS_PER_SECOND`` – client-side pacing (default 100)
* ``V20_RETRY_ATTEMPTS`` – attempts for idempotent GETs (default 3)
* ``V20_STREAM_QUEUE_SIZE`` – buffered stream items (default 1024)
* ``V20_USER_AGENT``
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .secrets_manager import BaseSecretsManager, EnvFileSecretsManager

PRACTICE_API_URL = "https://api-fxpractice.oanda.com"
PRACTICE_STREAM_URL = "https://stream-fxpractice.oanda.com"
LIVE_API_URL = "https://api-fxtrade.oanda.com"
LIVE_STREAM_URL = "https://stream-fxtrade.oanda.com"

DEFAULT_USER_AGENT = "v20-client-python"

_HOSTS = {
    "practice": (PRACTICE_API_URL, PRACTICE_STREAM_URL),
    "live": (LIVE_API_URL, LIVE_STREAM_URL),
}


@dataclass(frozen=True)
class ClientSettings:
    access_token: str
    api_url: str = PRACTICE_API_URL
    stream_url: str = PRACTICE_STREAM_URL
    request_timeout: float = 30.0
    stream_read_timeout: float = 30.0
    max_requests_per_second: int = 100
    retry_attempts: int = 3
    stream_queue_size: int = 1024
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        secrets: Optional[BaseSecretsManager] = None,
    ) -> "ClientSettings":
        """Build settings from environment variables.

        Raises:
            ValueError: if no access token is configured, the environment
                name is unknown, or a numeric variable does not parse.
        """
        env = environ if environ is not None else os.environ
        secrets = secrets or EnvFileSecretsManager(environ=env)

        token = secrets.get_secret("V20_ACCESS_TOKEN")
        if not token:
            raise ValueError("V20_ACCESS_TOKEN (or V20_ACCESS_TOKEN_FILE) is not set")

        environment = env.get("V20_ENVIRONMENT", "practice").strip().lower()
        if environment not in _HOSTS:
            raise ValueError(f"V20_ENVIRONMENT must be 'practice' or 'live', got {environment!r}")
        api_url, stream_url = _HOSTS[environment]

        return cls(
            access_token=token,
            api_url=env.get("V20_API_URL") or api_url,
            stream_url=env.get("V20_STREAM_URL") or stream_url,
            request_timeout=float(env.get("V20_REQUEST_TIMEOUT", "30")),
            stream_read_timeout=float(env.get("V20_STREAM_READ_TIMEOUT", "30")),
            max_requests_per_second=int(env.get("V20_MAX_REQUESTS_PER_SECOND", "100")),
            retry_attempts=int(env.get("V20_RETRY_ATTEMPTS", "3")),
            stream_queue_size=int(env.get("V20_STREAM_QUEUE_SIZE", "1024")),
            user_agent=env.get("V20_USER_AGENT") or DEFAULT_USER_AGENT,
        )
