"""
Result pair for services that must not raise across their public contract.

A ServiceResult carries either ``data`` or an ``error`` (a domain exception
instance). Services are written the usual way, raising domain exceptions,
and the ``returns_result`` decorator turns the outcome into a result:

    @returns_result(LeaderboardsServiceError, fallback=lambda: StorageError(...))
    def get_group_by_id(*, group_id):
        ...

    result = get_group_by_id(group_id=group_id)
    if not result.ok:
        ...  # result.error is a typed exception, isinstance() it

Anything that is not an expected domain error is logged with its traceback
and replaced by ``fallback()``.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, Type, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of a service call: data on success, error on failure."""

    data: Optional[T] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, data: Optional[T] = None) -> 'ServiceResult[T]':
        return cls(data=data, error=None)

    @classmethod
    def failure(cls, error: Exception) -> 'ServiceResult[T]':
        return cls(data=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> T:
        """Return data, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.data

    def unwrap_or(self, default: T) -> T:
        """Return data, or ``default`` on failure."""
        if self.error is not None:
            return default
        return self.data


def returns_result(
    expected: Union[Type[Exception], Tuple[Type[Exception], ...]],
    fallback: Callable[[], Exception],
) -> Callable[[Callable[..., Any]], Callable[..., ServiceResult]]:
    """
    Wrap a raising service function so it returns a ServiceResult.

    Args:
        expected: Domain exception class(es) passed through as the error
        fallback: Builds the generic error used for anything unexpected
    """
    def decorator(func):
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return ServiceResult.success(func(*args, **kwargs))
            except expected as exc:
                return ServiceResult.failure(exc)
            except Exception:
                logger.exception("Unexpected failure in %s", func.__qualname__)
                return ServiceResult.failure(fallback())

        return wrapper

    return decorator
