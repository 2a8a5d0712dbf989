import asyncio
from typing import Awaitable, Callable, TypeVar

from record_aggregator.core.exceptions import SourceRequestError

T = TypeVar("T")


async def with_linear_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 2,
    delay_seconds: float = 1.0,
    on_retry: Callable[[int, float], None] | None = None,
    should_retry: Callable[[Exception], bool] | None = None,
) -> T:
    """Run ``operation`` at most ``max_retries + 1`` times.

    The wait before retry ``n`` (1-based) is ``delay_seconds * n``.
    """
    attempt = 0
    while attempt <= max_retries:
        try:
            return await operation()
        except Exception as exc:
            if should_retry and not should_retry(exc):
                if isinstance(exc, SourceRequestError):
                    raise
                raise SourceRequestError(str(exc)) from exc
            attempt += 1
            if attempt > max_retries:
                raise SourceRequestError(str(exc)) from exc
            delay = delay_seconds * attempt
            if on_retry:
                on_retry(attempt, delay)
            await asyncio.sleep(delay)
    raise SourceRequestError("retry attempts exhausted")
