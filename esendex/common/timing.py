from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

from .config import settings


@contextmanager
def timed(
    name: str,
    *,
    logger,
    component: str,
    extra: Optional[Dict[str, Any]] = None,
):
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = int((time.perf_counter() - start) * 1000)
        payload: Dict[str, Any] = {
            "component": component,
            "timing": name,
            "duration_ms": duration_ms,
        }
        if extra:
            payload.update(extra)

        if duration_ms >= settings.slow_threshold_ms:
            logger.warning(payload)
        elif settings.timing_log_all:
            logger.info(payload)
        else:
            logger.debug(payload)
