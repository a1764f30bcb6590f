"""Unit tests for the rate-limit retry decorator."""

from datetime import timedelta
from typing import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

from github_label_manager.utils.retry import retry_on_rate_limit


def failed_response(status_code: int, headers: dict[str, str] | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    return response


@pytest.fixture
def mock_sleep() -> Generator[AsyncMock, None, None]:
    with patch("github_label_manager.utils.retry.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.mark.asyncio
async def test_returns_result_without_retry(mock_sleep: AsyncMock) -> None:
    """Successful calls are not retried."""
    func = AsyncMock(return_value="ok")
    func.__name__ = "func"

    assert await retry_on_rate_limit()(func)() == "ok"
    func.assert_awaited_once()
    mock_sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_retries_primary_rate_limit_using_retry_after(mock_sleep: AsyncMock) -> None:
    """GitHub's retry-after hint sets the wait time."""
    func = AsyncMock(side_effect=[PrimaryRateLimitExceeded(failed_response(403), timedelta(seconds=7)), "ok"])
    func.__name__ = "func"

    assert await retry_on_rate_limit()(func)() == "ok"
    assert func.await_count == 2
    mock_sleep.assert_awaited_once_with(7.0)


@pytest.mark.asyncio
async def test_retries_secondary_rate_limit_capped_at_max_delay(mock_sleep: AsyncMock) -> None:
    """No single wait exceeds max_delay."""
    func = AsyncMock(side_effect=[SecondaryRateLimitExceeded(failed_response(403), timedelta(hours=1)), "ok"])
    func.__name__ = "func"

    assert await retry_on_rate_limit(max_delay=60)(func)() == "ok"
    mock_sleep.assert_awaited_once_with(60)


@pytest.mark.asyncio
async def test_retries_429_with_retry_after_header(mock_sleep: AsyncMock) -> None:
    """A 429 honours the retry-after header."""
    func = AsyncMock(side_effect=[RequestFailed(failed_response(429, {"retry-after": "3"})), "ok"])
    func.__name__ = "func"

    assert await retry_on_rate_limit()(func)() == "ok"
    mock_sleep.assert_awaited_once_with(3.0)


@pytest.mark.asyncio
async def test_fallback_delay_grows_exponentially(mock_sleep: AsyncMock) -> None:
    """Without hints the delay starts at initial_delay and is multiplied each attempt."""
    func = AsyncMock(side_effect=[RequestFailed(failed_response(429)), RequestFailed(failed_response(429)), "ok"])
    func.__name__ = "func"

    assert await retry_on_rate_limit(initial_delay=1, exponential_base=3)(func)() == "ok"
    assert [c.args[0] for c in mock_sleep.await_args_list] == [1, 3]


@pytest.mark.asyncio
async def test_gives_up_after_max_retries(mock_sleep: AsyncMock) -> None:
    """The last rate-limit error propagates once retries are exhausted."""
    func = AsyncMock(side_effect=RequestFailed(failed_response(429)))
    func.__name__ = "func"

    with pytest.raises(RequestFailed):
        await retry_on_rate_limit(max_retries=2, initial_delay=1)(func)()
    assert func.await_count == 3
    assert mock_sleep.await_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 404, 422, 500])
async def test_other_failures_are_not_retried(mock_sleep: AsyncMock, status_code: int) -> None:
    """Anything but a rate limit fails on the first attempt."""
    func = AsyncMock(side_effect=RequestFailed(failed_response(status_code)))
    func.__name__ = "func"

    with pytest.raises(RequestFailed):
        await retry_on_rate_limit()(func)()
    func.assert_awaited_once()
    mock_sleep.assert_not_awaited()


def test_rejects_sync_functions() -> None:
    """Only coroutine functions can be decorated."""

    def sync_func() -> None:
        return None

    with pytest.raises(TypeError):
        retry_on_rate_limit()(sync_func)
