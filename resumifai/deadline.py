import os
import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError

from .config import _int
from .errors import TimeoutExceeded


def make_pool(environ=None) -> ThreadPoolExecutor:
    workers = _int(os.environ if environ is None else environ, "GUARD_WORKERS", 32)
    if workers < 1:
        logging.warning(f"Ignoring GUARD_WORKERS={workers}, using 32")
        workers = 32
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="deadline")


# Shared by every request; a call that misses its deadline keeps its worker
# until the underlying library returns, and its result is dropped.
_pool = make_pool()


def call_with_deadline(fn, *args, timeout_ms: int, what: str = "external call", **kwargs):
    """Run fn(*args, **kwargs) and return its result, or raise TimeoutExceeded
    once timeout_ms elapses. Exceptions raised by fn propagate unchanged."""
    future = _pool.submit(fn, *args, **kwargs)
    try:
        return future.result(timeout=timeout_ms / 1000)
    except FutureTimeoutError:
        future.cancel()
        logging.warning(f"{what} exceeded {timeout_ms} ms")
        raise TimeoutExceeded(f"Timeout: {what} took longer than {timeout_ms} ms") from None
