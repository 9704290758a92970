from typing import Any, Callable

from ._operation import Operation
from .exceptions import NotSupportedError


class Provider:
    """Implementation behind a component.

    Provider methods are matched to component operations by name.
    `__setup__` runs before the first operation and again after a
    failed setup.
    """

    __component__: Any
    __handle__: str | None
    __type__: str
    __ready__: bool

    def __init__(self, **kwargs):
        self.__handle__ = kwargs.pop("__handle__", None)
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        self.__ready__ = False
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __setup__(self) -> None:
        pass

    def __run__(
        self,
        operation: Operation | None = None,
        **kwargs,
    ) -> Any:
        func = self._get_func(operation)
        if operation is None or func is None:
            raise NotSupportedError(str(operation) if operation else None)
        if not self.__ready__:
            self.__setup__()
            self.__ready__ = True
        return func(**(operation.args or {}))

    def __supports__(self, feature: str) -> bool:
        return callable(getattr(self, feature, None))

    def _get_func(
        self,
        operation: Operation | None,
    ) -> Callable[..., Any] | None:
        if operation is None or not operation.name:
            return None
        func = getattr(self, operation.name, None)
        return func if callable(func) else None
