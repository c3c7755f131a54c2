"""
Transport policy: timeout and exponential-backoff retry for upstream calls.

Every request the BOE client issues goes through RetryPolicy.send(). The
policy owns no connection state; it receives the shared httpx.AsyncClient and
a fully built request description on each call, so timeouts and headers stay
request-scoped.

Retry Strategy:
    - Initial attempt plus at most ``retry_count`` retries
    - Delay before retry n: ``retry_delay_ms * 2 ** (n - 1)`` milliseconds
      (1s, 2s, 4s with the defaults)
    - Each attempt, body included, must finish within ``timeout_seconds``;
      a slow trickle of bytes does not extend it
    - Transient failures (retried): httpx.RequestError, which includes every
      httpx.TimeoutException, the whole-attempt timeout, and HTTP 5xx / 408
      responses
    - Any other status is returned immediately, success or not; the caller
      decides what a 404 means

Failure Semantics:
    When all attempts fail, TransportError is raised with the last exception
    chained as __cause__. asyncio.CancelledError is never intercepted: a
    cancelled caller aborts the in-flight request or the pending backoff sleep.
"""

import asyncio
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from ..errors import TransportError
from ..utils import get_logger

logger = get_logger(__name__)

TRANSIENT_STATUS_CODES = frozenset({408})


def is_transient_status(status_code: int) -> bool:
    """Return True when a response status should be retried."""
    return status_code >= 500 or status_code in TRANSIENT_STATUS_CODES


@dataclass(frozen=True)
class RetryPolicy:
    """
    Timeout and retry settings applied to a single outbound call.

    Attributes:
        retry_count: Maximum retries after the initial attempt.
        retry_delay_ms: Delay before the first retry, in milliseconds.
        timeout_seconds: Hard timeout for each individual attempt.
        backoff_multiplier: Factor applied to the delay after every retry.

    Example:
        >>> policy = RetryPolicy(retry_count=3, retry_delay_ms=1000)
        >>> [policy.backoff_delay(n) for n in (1, 2, 3)]
        [1.0, 2.0, 4.0]
    """

    retry_count: int = 3
    retry_delay_ms: int = 1000
    timeout_seconds: float = 30.0
    backoff_multiplier: float = 2.0

    @classmethod
    def from_config(cls, config) -> "RetryPolicy":
        return cls(
            retry_count=config.retry_count,
            retry_delay_ms=config.retry_delay_ms,
            timeout_seconds=config.timeout_seconds,
        )

    @property
    def max_attempts(self) -> int:
        return self.retry_count + 1

    def backoff_delay(self, retry_number: int) -> float:
        """
        Seconds to wait before the given retry (1-based).

        Args:
            retry_number: 1 for the first retry, 2 for the second, and so on.

        Returns:
            float: Delay in seconds.
        """
        return (
            self.retry_delay_ms
            * self.backoff_multiplier ** (retry_number - 1)
            / 1000.0
        )

    async def send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Issue one logical request, retrying transient failures.

        Args:
            client: Shared async client (owns the connection pool).
            method: HTTP method, e.g. "GET".
            url: Fully built URL including the encoded query string.
            headers: Request-scoped headers.

        Returns:
            httpx.Response: The first non-transient response. May be a 4xx.

        Raises:
            TransportError: If every attempt ended in a transient failure.
            asyncio.CancelledError: If the caller is cancelled.
        """
        last_status: Optional[int] = None
        last_error: Optional[BaseException] = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                # The httpx timeout bounds each phase; wait_for bounds the whole attempt
                response = await asyncio.wait_for(
                    client.request(
                        method,
                        url,
                        headers=headers,
                        timeout=self.timeout_seconds,
                    ),
                    self.timeout_seconds,
                )
            except httpx.RequestError as e:
                last_status = None
                last_error = e
                reason = f"{type(e).__name__}: {e}"
            except asyncio.TimeoutError as e:
                last_status = None
                last_error = e
                reason = f"no complete response within {self.timeout_seconds}s"
            else:
                if not is_transient_status(response.status_code):
                    return response
                last_status = response.status_code
                last_error = None
                reason = f"HTTP {response.status_code}"

            if attempt == self.max_attempts:
                break

            delay = self.backoff_delay(attempt)
            logger.warning(
                f"Transient failure ({reason}) for {method} {url}. "
                f"Retry {attempt}/{self.retry_count} after {delay:.1f}s"
            )
            await asyncio.sleep(delay)

        message = (
            f"{method} {url} failed after {self.max_attempts} attempts"
            + (f" (last status {last_status})" if last_status else "")
        )
        logger.error(message)
        raise TransportError(
            message,
            attempts=self.max_attempts,
            status_code=last_status,
            url=url,
        ) from last_error
