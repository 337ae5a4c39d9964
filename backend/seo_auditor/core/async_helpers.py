"""
Async helpers for the API layer.
Fetching and density analysis are blocking; they run in a thread pool so
the event loop keeps serving other requests.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
import functools
import logging

logger = logging.getLogger(__name__)

# Thread pool for blocking I/O and CPU-bound analysis (created on first use)
_executor: ThreadPoolExecutor | None = None


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    if _executor is None:
        _executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="analysis")
    return _executor


async def run_blocking(func, *args, **kwargs):
    """Run a blocking callable in the shared pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_get_executor(), functools.partial(func, *args, **kwargs))


def shutdown_executor():
    """Cleanup thread pool (call on app shutdown)."""
    global _executor
    if _executor is not None:
        logger.info("Shutting down analysis thread pool")
        _executor.shutdown(wait=True)
        _executor = None
