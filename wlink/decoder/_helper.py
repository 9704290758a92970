from __future__ import annotations

import hashlib
import logging
from typing import Any

from wlink.core.constants import WASM_MAGIC
from wlink.core.exceptions import DecodeError
from wlink.interface import InterfaceCatalog, InterfaceIdentifier, PackageInfo

logger = logging.getLogger(__name__)


def check_magic(data: bytes, source: str | None = None) -> None:
    if data[0:4] != WASM_MAGIC:
        raise DecodeError(f"Not a WASM file: {source or '<bytes>'}")


def digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def parse_package_name(value: str) -> PackageInfo:
    name = value.split("@", 1)[0]
    if ":" not in name:
        raise DecodeError(f"Invalid package name: {value}")
    namespace, package = name.split(":", 1)
    return PackageInfo(namespace=namespace, name=package)


def parse_resolve(resolve: dict[str, Any]) -> InterfaceCatalog:
    """Build an interface catalog from a decoded WIT resolve.

    The resolve is the JSON document printed by
    `wasm-tools component wit --json`. For a component, its world is
    the last one in the document; a WIT package without worlds only
    yields the package.

    Args:
        resolve:
            Decoded resolve document.

    Returns:
        Interface catalog.
    """
    try:
        packages = resolve.get("packages", [])
        worlds = resolve.get("worlds", [])
        if not worlds:
            if not packages:
                return InterfaceCatalog()
            return InterfaceCatalog(
                package=parse_package_name(packages[-1]["name"])
            )
        world = worlds[-1]
        logger.debug("Decoded world %s", world.get("name"))
        catalog = InterfaceCatalog(
            imports=_parse_items(resolve, world.get("imports", {})),
            exports=_parse_items(resolve, world.get("exports", {})),
        )
        package_id = world.get("package")
        if package_id is not None:
            catalog.package = parse_package_name(
                packages[package_id]["name"]
            )
        return catalog
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise DecodeError(f"Malformed resolve document: {e}") from e


def _parse_items(
    resolve: dict[str, Any],
    items: dict[str, Any],
) -> list[InterfaceIdentifier]:
    identifiers = []
    for key, item in items.items():
        if not isinstance(item, dict) or "interface" not in item:
            logger.debug("Skipping non-interface world item %s", key)
            continue
        interface_id = _get_interface_id(item["interface"])
        interface = resolve["interfaces"][interface_id]
        package_id = interface.get("package")
        if package_id is None:
            continue
        package = parse_package_name(resolve["packages"][package_id]["name"])
        identifiers.append(
            InterfaceIdentifier(
                namespace=package.namespace,
                package=package.name,
                name=_get_interface_name(
                    key, interface_id, interface, package
                ),
            )
        )
    return identifiers


def _get_interface_id(value: Any) -> int:
    if isinstance(value, dict):
        return value["id"]
    return value


def _get_interface_name(
    key: str,
    interface_id: int,
    interface: dict[str, Any],
    package: PackageInfo,
) -> str:
    if interface.get("name"):
        return interface["name"]
    if not key.startswith("interface-"):
        return key
    functions = interface.get("functions") or {}
    for function_name in functions:
        if function_name.startswith("[method]"):
            return function_name.split(".")[-1]
        return function_name
    return f"{package.name}-{interface_id}"
