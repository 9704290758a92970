from __future__ import annotations

import importlib
import inspect
from typing import Any

from ._operation import Operation
from ._provider import Provider
from .exceptions import LoadError, NotSupportedError


class Component:
    __provider__: Provider
    __handle__: str | None
    __type__: str

    def __init__(
        self,
        **kwargs,
    ):
        self.__handle__ = kwargs.pop("__handle__", None)
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        if "__provider__" in kwargs:
            self.__bind__(kwargs.pop("__provider__"))

    def __bind__(
        self,
        provider: Provider | dict | str | None,
    ) -> None:
        if provider is None:
            return
        if isinstance(provider, Provider):
            provider.__component__ = self
            self.__provider__ = provider
            return
        if isinstance(provider, dict):
            provider = dict(provider)
            type = provider.pop("type")
            parameters = provider.pop("parameters", dict())
        else:
            type = provider
            parameters = dict()
        module_name = self.__class__.__module__.rsplit(".", 1)[0]
        provider_instance = Component.load_provider_instance(
            path=f"{module_name}.providers.{type}",
            parameters=parameters,
        )
        self.__bind__(provider=provider_instance)

    def __run__(
        self,
        operation: Operation | None = None,
        **kwargs,
    ) -> Any:
        if not hasattr(self, "__provider__"):
            raise NotSupportedError(f"{self.__type__} has no provider")
        return self.__provider__.__run__(
            operation=operation,
            **kwargs,
        )

    def __supports__(self, feature: str) -> bool:
        if not hasattr(self, "__provider__"):
            return False
        return self.__provider__.__supports__(feature)

    @staticmethod
    def load_provider_instance(
        path: str,
        parameters: dict[str, Any],
    ) -> Provider:
        try:
            module = importlib.import_module(path)
        except ImportError as e:
            raise LoadError(f"Provider {path} could not be loaded: {e}")
        for _, member in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(member, Provider)
                and member is not Provider
                and member.__module__ == module.__name__
            ):
                return member(**parameters)
        raise LoadError(f"No provider class found in {path}")
