"""Moderation Client — bad-words censoring call that gates question creation.

Invariants:
    - Exactly one POST per check(): raw content as body, API key in the `apikey` header
    - Transport failures, timeouts and non-2xx statuses all raise QAError(EXTERNAL_API_ERROR)
    - No retries: a failure is surfaced once, immediately
    - The returned (censored) text is handed back to the caller untouched

Design Decisions:
    - One shared httpx.AsyncClient per process, owned by the app lifespan
      and closed on shutdown
"""

import asyncio
import logging

import httpx

from qa_api.core.errors import ErrorKind, QAError

logger = logging.getLogger(__name__)


class ModerationClient:
    """Wraps the external censoring endpoint with a timeout and error mapping."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        url: str,
        api_key: str,
        censor_character: str = "*",
        timeout_seconds: float = 10.0,
    ):
        self.http = http
        self.url = url
        self.api_key = api_key
        self.censor_character = censor_character
        self.timeout_seconds = timeout_seconds

    async def check(self, content: str) -> str:
        """Send content for censoring; return the service's response text."""
        try:
            response = await asyncio.wait_for(
                self._post(content), self.timeout_seconds,
            )
            response.raise_for_status()
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"Moderation call timed out: {e!r}")
            raise QAError(
                ErrorKind.EXTERNAL_API_ERROR,
                f"moderation service timed out after {self.timeout_seconds}s",
            )
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Moderation service rejected request: {e.response.status_code}",
            )
            raise QAError(
                ErrorKind.EXTERNAL_API_ERROR,
                f"moderation service returned {e.response.status_code}",
            )
        except httpx.HTTPError as e:
            logger.error(f"Moderation transport error: {e!r}")
            raise QAError(ErrorKind.EXTERNAL_API_ERROR, str(e) or type(e).__name__)
        return response.text

    async def _post(self, content: str) -> httpx.Response:
        return await self.http.post(
            self.url,
            params={"censor_character": self.censor_character},
            headers={"apikey": self.api_key},
            content=content.encode("utf-8"),
            timeout=self.timeout_seconds,
        )
