from __future__ import annotations

from wlink.core import DataModel

from ._models import InterfaceCatalog, InterfaceIdentifier, PackageInfo


class BuiltinProvider(DataModel):
    """Capability provider whose interfaces are known without decoding.

    Args:
        name:
            Component name the provider is deployed under.
        reference:
            Fragment of the OCI image reference identifying the provider.
        catalog:
            Interfaces the provider imports and exports.
    """

    name: str
    reference: str
    catalog: InterfaceCatalog


BUILTIN_PROVIDERS: list[BuiltinProvider] = [
    BuiltinProvider(
        name="httpserver",
        reference="wasmcloud/http-server",
        catalog=InterfaceCatalog(
            # The server calls into the component's incoming handler and
            # serves the component's outgoing requests.
            imports=[
                InterfaceIdentifier(
                    namespace="wasi",
                    package="http",
                    name="incoming-handler",
                )
            ],
            exports=[
                InterfaceIdentifier(
                    namespace="wasi",
                    package="http",
                    name="outgoing-handler",
                )
            ],
            package=PackageInfo(namespace="wasmcloud", name="httpserver"),
        ),
    ),
]


def find_builtin_provider(
    name: str | None = None,
    reference: str | None = None,
) -> BuiltinProvider | None:
    for provider in BUILTIN_PROVIDERS:
        if name is not None and provider.name == name:
            return provider
        if reference and provider.reference in reference:
            return provider
    return None
