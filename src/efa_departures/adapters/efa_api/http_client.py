"""HTTP client for EFA departure monitor requests."""

import logging
from typing import TYPE_CHECKING

import aiohttp

from efa_departures.adapters.api_request_logger import log_dm_request
from efa_departures.adapters.efa_api.errors import EfaHttpError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class EfaHttpClient:
    """HTTP client posting departure monitor forms to an EFA endpoint."""

    def __init__(
        self, session: "ClientSession", user_agent: str, log_requests: bool | None = None
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session the requests are made on.
            user_agent: User-Agent header sent with every request.
            log_requests: Log each request at INFO, None defers to EFA_LOG_REQUESTS.
        """
        self._session = session
        self._headers = {"User-Agent": user_agent}
        self._log_requests = log_requests

    async def post_dm_request(self, url: str, form: dict[str, str]) -> bytes:
        """Post a departure monitor form and return the raw response body.

        The body is returned undecoded so the XML parser can honour the
        encoding declared by the document.

        Raises:
            EfaHttpError: On an error status or a transport failure.
        """
        log_dm_request(url, self._headers, form, enabled=self._log_requests)

        try:
            async with self._session.post(url, data=form, headers=self._headers) as response:
                if response.status >= 400:
                    logger.warning(f"EFA endpoint returned status {response.status} for {url}")
                    raise EfaHttpError(response.reason or "HTTP error", status=response.status)
                return await response.read()
        except aiohttp.ClientError as e:
            logger.warning(f"Error requesting EFA departures from {url}: {e}")
            raise EfaHttpError(str(e) or e.__class__.__name__) from e
        except TimeoutError as e:
            logger.warning(f"Timed out requesting EFA departures from {url}")
            raise EfaHttpError("request timed out") from e
