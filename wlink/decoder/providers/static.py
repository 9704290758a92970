"""
Static provider for decoder.
"""

__all__ = ["Static"]

from typing import Any

from wlink.core import Provider
from wlink.core.exceptions import DecodeError
from wlink.interface import InterfaceCatalog

from .._helper import check_magic, digest


class Static(Provider):
    catalogs: dict[str, InterfaceCatalog]

    def __init__(
        self,
        catalogs: dict[str, InterfaceCatalog | dict[str, Any]] | None = None,
        **kwargs,
    ):
        """Initialize.

        Args:
            catalogs:
                Known catalogs keyed by the SHA-256 hex digest of
                the component binary.
        """
        super().__init__(**kwargs)
        self.catalogs = {}
        for key, catalog in (catalogs or {}).items():
            if isinstance(catalog, dict):
                catalog = InterfaceCatalog.from_dict(catalog)
            self.catalogs[key] = catalog

    def register(self, data: bytes, catalog: InterfaceCatalog) -> str:
        key = digest(data)
        self.catalogs[key] = catalog
        return key

    def decode(
        self,
        data: bytes,
        **kwargs,
    ) -> InterfaceCatalog:
        check_magic(data)
        key = digest(data)
        if key not in self.catalogs:
            raise DecodeError(f"Unknown component binary {key}")
        return self.catalogs[key].copy(deep=True)
