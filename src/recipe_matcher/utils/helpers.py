"""Error handling helpers shared by the suggestion pipeline."""

from typing import Any, Awaitable, Optional

from recipe_matcher.utils.logger import logger


def _log_error(operation_name: str, exception: Exception, log_level: str = "warning", extra: Optional[dict] = None) -> None:
    """Log error with appropriate level.

    Args:
        operation_name: Description for logging
        exception: Exception that occurred
        log_level: Logging level ("debug", "warning", "error"). Default: "warning".
        extra: Optional context fields forwarded to the log record.
    """
    msg = f"{operation_name}: {exception}"
    if log_level == "debug":
        logger.debug(msg, extra=extra)
    elif log_level == "error":
        logger.error(msg, extra=extra)
    else:
        logger.warning(msg, extra=extra)


async def safe_execute_async(
    coro: Awaitable[Any],
    operation_name: str,
    log_level: str = "warning",
    default_return: Any = None,
    catch: tuple[type[BaseException], ...] = (Exception,),
    extra: Optional[dict] = None,
) -> Any:
    """Safely execute async operation with consistent error logging.

    Used for per-item work inside a fan-out where one failure must not abort
    its siblings: a failed ingredient search or a failed detail lookup is
    logged and replaced by ``default_return``.

    Args:
        coro: Awaitable coroutine to execute.
        operation_name: Description for logging (e.g., "Search recipes for 'rice'").
        log_level: Logging level ("debug", "warning", "error"). Default: "warning".
        default_return: Value to return on a caught exception. Default: None.
        catch: Exception types treated as a skippable failure. Anything else propagates.
        extra: Optional context fields forwarded to the log record.

    Returns:
        Result of coroutine if successful, default_return on a caught exception.

    Example:
        meals = await safe_execute_async(source.search_by_ingredient("rice"), "Search", default_return=[])
    """
    try:
        return await coro
    except catch as e:
        _log_error(operation_name, e, log_level, extra)
        return default_return
