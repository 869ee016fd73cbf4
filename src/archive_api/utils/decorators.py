"""Logging decorators for record lifecycle operations."""
import time
import logging
import functools
from typing import Any, Callable, TypeVar, cast

from archive_api.errors import ArchiveError

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def log_record_operation(func: F) -> F:
    """Log the outcome and duration of a RecordLifecycle method.

    The log line is tagged `<kind>.<operation>`, e.g. `videos.create`.
    Expected failures (ArchiveError) are logged as warnings, anything else as errors.
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        operation = f"{self.kind.name}.{func.__name__}"
        started = time.perf_counter()
        try:
            result = func(self, *args, **kwargs)
        except ArchiveError as e:
            logger.warning(f"{operation} failed after {time.perf_counter() - started:.3f}s: {e.message}")
            raise
        except Exception as e:
            logger.error(f"{operation} failed after {time.perf_counter() - started:.3f}s: {e}")
            raise
        logger.info(f"{operation} completed in {time.perf_counter() - started:.3f}s")
        return result
    return cast(F, wrapper)
