import time
from functools import wraps

from config.logging_config import logger


def timed(label: str = None):
    """
    Logs the duration of the decorated call together with the size of what it returned.

    Args:
        label (str): Name used in the log line. Defaults to the function name.
    """
    def decorator(func):
        key = label or func.__name__

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            size = f" ({len(result)} items)" if hasattr(result, "__len__") else ""
            logger.debug(f"[TIME] {key}: {elapsed:.6f} seconds{size}")
            return result
        return wrapper
    return decorator
