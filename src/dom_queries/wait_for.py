import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from .core.config import QueryConfig, resolve_config
from .core.exceptions import ConfigurationError, QueryTimeoutError, SuggestionError
from .page import LivePage

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def resolve_container(container: Any) -> Any:
    """Snapshot live pages; other containers are used as they are"""
    if isinstance(container, LivePage):
        return await container.snapshot()
    return container


async def wait_for(callback: Callable[[Any], Union[T, Awaitable[T]]],
                   container: Any = None,
                   *,
                   timeout: Optional[float] = None,
                   interval: Optional[float] = None,
                   config: Optional[QueryConfig] = None) -> T:
    """
    Call ``callback(container)`` until it stops raising.

    Every attempt is a complete evaluation against the container as it is at
    that moment. Any exception is retried except ConfigurationError and
    SuggestionError.

    Args:
        callback: Synchronous or asynchronous check
        container: Passed to the callback; a LivePage is snapshotted per attempt
        timeout: Deadline in ms, defaults to ``config.async_util_timeout``
        interval: Delay between attempts in ms, defaults to ``config.async_util_interval``
        config: Query configuration

    Raises:
        QueryTimeoutError: The deadline passed; carries the last error
    """
    config = resolve_config(config)
    timeout = config.async_util_timeout if timeout is None else timeout
    interval = config.async_util_interval if interval is None else interval

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout / 1000
    attempt = 0

    while True:
        attempt += 1
        root = await resolve_container(container)
        try:
            result = callback(root)
            if inspect.isawaitable(result):
                result = await result
            logger.debug(f"wait_for succeeded after {attempt} attempt(s)")
            return result
        except (ConfigurationError, SuggestionError):
            raise
        except Exception as e:
            last_error = e

        remaining = deadline - loop.time()
        if remaining <= 0:
            logger.debug(f"wait_for timed out after {attempt} attempt(s) ({timeout}ms)")
            raise QueryTimeoutError(
                str(last_error),
                container=root,
                last_error=last_error,
                timeout=timeout,
            ) from last_error

        await asyncio.sleep(min(interval / 1000, remaining))
