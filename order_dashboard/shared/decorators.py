from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def log_errors(
    func: Callable[P, R] | None = None,
    *,
    wrap: type[Exception] | None = None,
    message: str | None = None,
):
    """Log any exception raised by the decorated callable, then re-raise it.

    The log line carries the qualified function name, the exception type and
    its message. When ``wrap`` is given the original exception is chained
    into a new ``wrap(message)`` so callers only ever see one error kind.

    Usage::

        @log_errors
        def select(self, table: str, params: dict) -> list[dict]: ...

        @log_errors(wrap=FetchError, message="Failed to load orders.")
        def fetch_all_orders(self, identity: ViewerIdentity) -> list[Order]: ...
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                logger.error(f"[{fn.__qualname__}] {type(exc).__name__}: {exc}")
                if wrap is None or isinstance(exc, wrap):
                    raise
                raise wrap(message or str(exc)) from exc

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
