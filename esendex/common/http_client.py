from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

from .config import settings

_SESSION: requests.Session | None = None


def new_session(
    pool_connections: int | None = None,
    pool_maxsize: int | None = None,
) -> requests.Session:
    """Build a session with pooled adapters and retries disabled."""
    s = requests.Session()

    adapter = HTTPAdapter(
        pool_connections=pool_connections or settings.pool_connections,
        pool_maxsize=pool_maxsize or settings.pool_maxsize,
        max_retries=0,
    )
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


def get_session() -> requests.Session:
    global _SESSION
    if _SESSION is None:
        _SESSION = new_session()
    return _SESSION
