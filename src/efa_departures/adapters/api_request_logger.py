"""Logging of outgoing departure monitor requests."""

import json
import logging
import os
from collections.abc import Mapping

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
REDACTED = "***REDACTED***"


def should_log_requests(enabled: bool | None = None) -> bool:
    """Check whether requests are logged.

    An explicit ``enabled`` (from ``AppConfig.log_requests``) wins, otherwise
    the ``EFA_LOG_REQUESTS`` environment variable decides.
    """
    if enabled is not None:
        return enabled
    return os.getenv("EFA_LOG_REQUESTS", "").lower() in ("1", "true", "yes", "on")


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def describe_form(form: Mapping[str, str]) -> str:
    """One ``key=value`` line per filled-in form field, sorted by key."""
    return "\n".join(f"  {key}={value}" for key, value in sorted(form.items()) if value != "")


def log_dm_request(
    url: str,
    headers: Mapping[str, str],
    form: Mapping[str, str],
    enabled: bool | None = None,
) -> None:
    """Log a departure monitor POST if request logging is on.

    Args:
        url: Endpoint the form is posted to.
        headers: Request headers, sensitive ones are redacted.
        form: Form fields, empty ones are left out.
        enabled: Explicit switch, see ``should_log_requests``.
    """
    if not should_log_requests(enabled):
        return

    safe_headers = json.dumps(redact_headers(headers), ensure_ascii=False)
    logger.info(f"EFA request: POST {url}\nHeaders: {safe_headers}\nForm:\n{describe_form(form)}")
