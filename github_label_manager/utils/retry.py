"""Retry decorator for GitHub API rate limits.

Only rate-limit responses are retried. Every other failure propagates on the
first attempt so that a label synchronization run stops at the first error.
"""

import asyncio
import functools
import time
from typing import Any, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _wait_time_from_headers(exc: RequestFailed, default: float) -> float:
    """Derive a wait time from the retry-after or x-ratelimit-reset response headers."""
    headers = exc.response.headers
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)
    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            remaining = int(rate_limit_reset) - int(time.time())
            if remaining > 0:
                return float(remaining + 1)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
    return default


def _is_rate_limit(exc: RequestFailed) -> bool:
    status_code = exc.response.status_code
    return status_code == 429 or (status_code == 403 and "rate limit" in str(exc).lower())


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async GitHub calls that hit a rate limit.

    Args:
        max_retries: Maximum number of retry attempts.
        initial_delay: Delay in seconds before the first retry when GitHub gives no hint.
        max_delay: Upper bound for any single wait.
        exponential_base: Multiplier applied to the fallback delay after each attempt.
    """

    def decorator(func: F) -> F:
        if not asyncio.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as e:
                    if attempt >= max_retries:
                        logger.error("Max retries reached for GitHub rate limit", function=func.__name__, attempt=attempt + 1)
                        raise
                    wait_time = e.retry_after.total_seconds() if e.retry_after else delay
                except RequestFailed as e:
                    if not _is_rate_limit(e):
                        raise
                    if attempt >= max_retries:
                        logger.error(
                            "Max retries reached for GitHub rate limit",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=e.response.status_code,
                        )
                        raise
                    wait_time = _wait_time_from_headers(e, delay)

                wait_time = min(wait_time, max_delay)
                logger.warning(
                    f"GitHub rate limit exceeded, waiting {wait_time} seconds",
                    function=func.__name__,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_time=wait_time,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)
                attempt += 1

        return wrapper  # type: ignore

    return decorator
