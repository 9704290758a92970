from __future__ import annotations

from pydantic import ConfigDict

from wlink.core import DataModel
from wlink.core.exceptions import BadRequestError


class InterfaceIdentifier(DataModel):
    """Interface identifier.

    Args:
        namespace:
            Interface namespace, e.g. wasi.
        package:
            Interface package, e.g. http.
        name:
            Interface name, e.g. incoming-handler.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    package: str
    name: str

    @staticmethod
    def parse(value: str) -> InterfaceIdentifier:
        """Parse `ns:pkg:name` or the WIT form `ns:pkg/name@version`."""
        text = value.strip()
        if "@" in text:
            text = text.split("@", 1)[0]
        if "/" in text:
            package_part, name = text.rsplit("/", 1)
            parts = package_part.split(":")
            parts.append(name)
        else:
            parts = text.split(":")
        if len(parts) != 3 or not all(parts):
            raise BadRequestError(f"Invalid interface identifier: {value}")
        return InterfaceIdentifier(
            namespace=parts[0],
            package=parts[1],
            name=parts[2],
        )

    def __str__(self) -> str:
        return f"{self.namespace}:{self.package}:{self.name}"


class PackageInfo(DataModel):
    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}:{self.name}"


class InterfaceCatalog(DataModel):
    """Imports and exports of a component.

    Args:
        imports:
            Interfaces the component requires.
        exports:
            Interfaces the component provides.
        package:
            Package the component itself belongs to.
    """

    imports: list[InterfaceIdentifier] = []
    exports: list[InterfaceIdentifier] = []
    package: PackageInfo | None = None

    def imports_interface(self, identifier: InterfaceIdentifier) -> bool:
        return identifier in self.imports

    def exports_interface(self, identifier: InterfaceIdentifier) -> bool:
        return identifier in self.exports

    def exports_package(self, namespace: str, package: str) -> bool:
        return any(
            export.namespace == namespace and export.package == package
            for export in self.exports
        )
