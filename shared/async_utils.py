# shared/async_utils.py
import asyncio
import concurrent.futures
import logging
import threading
from typing import Coroutine, TypeVar

from shared.errors import RequestTimeoutError

T = TypeVar('T')

logger = logging.getLogger(__name__)

_loop = None
_loop_thread = None
_loop_lock = threading.Lock()


def get_event_loop() -> asyncio.AbstractEventLoop:
    """Get or create a persistent event loop for async operations"""
    global _loop, _loop_thread

    with _loop_lock:
        if _loop is None or _loop.is_closed():
            ready = threading.Event()

            def run_loop():
                global _loop
                _loop = asyncio.new_event_loop()
                asyncio.set_event_loop(_loop)
                ready.set()
                _loop.run_forever()

            _loop_thread = threading.Thread(target=run_loop, name="relay-event-loop", daemon=True)
            _loop_thread.start()

            # Wait for loop to be created
            ready.wait()
            logger.debug("Background event loop started")

    return _loop


def run_async(coro: Coroutine, timeout: float = 120) -> T:
    """
    Run a coroutine on the background event loop from a Flask sync view

    Args:
        coro: Async coroutine to execute
        timeout: Seconds to wait before giving up

    Returns:
        Result from the coroutine

    Raises:
        RequestTimeoutError: If the coroutine does not finish in time
        Exception: Whatever the coroutine raised
    """
    loop = get_event_loop()
    future = asyncio.run_coroutine_threadsafe(coro, loop)

    try:
        return future.result(timeout=timeout)
    except concurrent.futures.TimeoutError:
        future.cancel()
        logger.error(f"Coroutine timed out after {timeout}s")
        raise RequestTimeoutError("Request timeout")
