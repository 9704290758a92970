from ._builtin import BUILTIN_PROVIDERS, BuiltinProvider, find_builtin_provider
from ._models import InterfaceCatalog, InterfaceIdentifier, PackageInfo
from ._whitelist import RUNTIME_INTERFACES, RuntimeWhitelist

__all__ = [
    "BUILTIN_PROVIDERS",
    "BuiltinProvider",
    "InterfaceCatalog",
    "InterfaceIdentifier",
    "PackageInfo",
    "RUNTIME_INTERFACES",
    "RuntimeWhitelist",
    "find_builtin_provider",
]
