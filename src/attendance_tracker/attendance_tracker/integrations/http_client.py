"""Shared HTTP session with connection pooling and automatic retry."""
from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_TIMEOUT = 15

_retry_strategy = Retry(
    total=3,
    backoff_factor=1,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "PUT", "POST"],
)


def create_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=1, pool_maxsize=4, max_retries=_retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
