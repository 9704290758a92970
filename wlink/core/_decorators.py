import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from ._operation import Operation
from .exceptions import NotSupportedError

T = TypeVar("T", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def operation(**config: Any) -> Callable[[T], T]:
    """Route a component method to its provider.

    The provider method with the same name runs when the bound provider
    has one. Otherwise, or when the provider rejects the operation, the
    body of the component method runs.
    """

    def decorator(func: T) -> T:
        setattr(func, "__operation__", True)
        setattr(func, "__config__", config)
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(self, *args, **kwargs) -> Any:
            if not self.__supports__(func.__name__):
                return func(self, *args, **kwargs)
            bound_args = signature.bind(self, *args, **kwargs)
            bound_args.apply_defaults()
            operation = Operation.normalize(
                name=func.__name__,
                args=dict(bound_args.arguments),
            )
            logger.debug(
                "Running %s with %s", operation, self.__provider__.__type__
            )
            try:
                return self.__run__(operation)
            except NotSupportedError:
                return func(self, *args, **kwargs)

        return cast(T, wrapper)

    return decorator
