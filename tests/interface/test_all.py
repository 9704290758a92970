# type: ignore
import pytest

from wlink.core.exceptions import BadRequestError
from wlink.interface import (
    RUNTIME_INTERFACES,
    InterfaceCatalog,
    InterfaceIdentifier,
    RuntimeWhitelist,
    find_builtin_provider,
)

from ._data import identifiers, invalid_identifiers


@pytest.mark.parametrize(
    "value,expected",
    identifiers,
)
def test_parse(value: str, expected: tuple[str, str, str]):
    identifier = InterfaceIdentifier.parse(value)
    assert (
        identifier.namespace,
        identifier.package,
        identifier.name,
    ) == expected
    assert str(identifier) == ":".join(expected)


@pytest.mark.parametrize(
    "value",
    invalid_identifiers,
)
def test_parse_invalid(value: str):
    with pytest.raises(BadRequestError):
        InterfaceIdentifier.parse(value)


def test_identifier_equality():
    a = InterfaceIdentifier.parse("ns:pkg:x")
    b = InterfaceIdentifier(namespace="ns", package="pkg", name="x")
    c = InterfaceIdentifier.parse("ns:pkg:y")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_catalog():
    catalog = InterfaceCatalog(
        imports=[InterfaceIdentifier.parse("ns:pkg:backend-call")],
        exports=[InterfaceIdentifier.parse("ns:other:handler")],
    )
    assert catalog.imports_interface(
        InterfaceIdentifier.parse("ns:pkg:backend-call")
    )
    assert not catalog.exports_interface(
        InterfaceIdentifier.parse("ns:pkg:backend-call")
    )
    assert catalog.exports_interface(
        InterfaceIdentifier.parse("ns:other:handler")
    )
    assert catalog.exports_package("ns", "other")
    assert not catalog.exports_package("ns", "pkg")

    # catalogs survive a dict round trip
    obj = catalog.to_dict()
    assert InterfaceCatalog.from_dict(obj) == catalog


def test_default_whitelist():
    whitelist = RuntimeWhitelist.default()
    assert len(whitelist) == len(RUNTIME_INTERFACES) == 12
    for namespace, package, name in RUNTIME_INTERFACES:
        identifier = InterfaceIdentifier(
            namespace=namespace, package=package, name=name
        )
        assert whitelist.contains(identifier)
    assert whitelist.contains(InterfaceIdentifier.parse("wasi:http:types"))

    # whole packages are not whitelisted, only exact triples
    for value in [
        "wasi:http:incoming-handler",
        "wasi:io:stream",
        "ns:io:streams",
    ]:
        assert not whitelist.contains(InterfaceIdentifier.parse(value))


def test_custom_whitelist():
    whitelist = RuntimeWhitelist.from_strings(
        ["wasi:keyvalue/store@0.2.0", "wasi:logging:logging"]
    )
    assert len(whitelist) == 2
    assert whitelist.contains(InterfaceIdentifier.parse("wasi:keyvalue:store"))
    assert not whitelist.contains(InterfaceIdentifier.parse("wasi:io:streams"))


def test_find_builtin_provider():
    provider = find_builtin_provider(name="httpserver")
    assert provider is not None
    assert provider.catalog.exports_interface(
        InterfaceIdentifier.parse("wasi:http:outgoing-handler")
    )

    provider = find_builtin_provider(
        reference="ghcr.io/wasmcloud/http-server:0.23.0"
    )
    assert provider is not None
    assert provider.name == "httpserver"

    assert find_builtin_provider(name="keyvalue") is None
    assert find_builtin_provider(reference="ghcr.io/acme/thing:1") is None
    assert find_builtin_provider() is None
