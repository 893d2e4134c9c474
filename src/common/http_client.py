"""Shared HTTP helpers used by the metadata generators.

Encapsulates request logging so callers avoid duplicating it. Transport
errors are logged and re-raised; mapping them to exit codes is left to the
CLI. This module is dependency-light and can be imported by both the CLI and
the library modules without cycles.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def safe_get(
    url: str,
    *,
    context: str,
    timeout: Optional[float] = None,
    **kwargs: Any,
) -> requests.Response:
    """Perform a GET request with consistent error logging and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "maven").
        timeout: Request timeout in seconds. Falls back to
            ``Constants.REQUEST_TIMEOUT``; None keeps the requests default.
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The HTTP response object, whatever its status.

    Raises:
        requests.RequestException: On timeouts and connection failures.
    """
    safe_target = safe_url(url)
    effective_timeout = timeout if timeout is not None else Constants.REQUEST_TIMEOUT
    if effective_timeout is not None:
        kwargs["timeout"] = effective_timeout
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.get(url, **kwargs)
        except requests.Timeout:
            logger.error(
                "%s request timed out after %s seconds",
                context,
                effective_timeout,
            )
            raise
        except requests.RequestException as exc:  # includes ConnectionError
            logger.error("%s connection error: %s", context, exc)
            raise

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success" if 200 <= res.status_code < 300 else "non_2xx",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )
        return res
