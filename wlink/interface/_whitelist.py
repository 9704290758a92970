from __future__ import annotations

from typing import Iterable

from ._models import InterfaceIdentifier

RUNTIME_INTERFACES: tuple[tuple[str, str, str], ...] = (
    ("wasi", "io", "poll"),
    ("wasi", "io", "error"),
    ("wasi", "io", "streams"),
    ("wasi", "http", "types"),
    ("wasi", "cli", "environment"),
    ("wasi", "cli", "exit"),
    ("wasi", "cli", "stdin"),
    ("wasi", "cli", "stdout"),
    ("wasi", "cli", "stderr"),
    ("wasi", "clocks", "wall-clock"),
    ("wasi", "filesystem", "types"),
    ("wasi", "filesystem", "preopens"),
)


class RuntimeWhitelist:
    """Interfaces the hosting runtime satisfies without a link."""

    _interfaces: frozenset[InterfaceIdentifier]

    def __init__(self, interfaces: Iterable[InterfaceIdentifier]):
        self._interfaces = frozenset(interfaces)

    @staticmethod
    def default() -> RuntimeWhitelist:
        return RuntimeWhitelist.from_triples(RUNTIME_INTERFACES)

    @staticmethod
    def from_triples(
        triples: Iterable[tuple[str, str, str]],
    ) -> RuntimeWhitelist:
        return RuntimeWhitelist(
            InterfaceIdentifier(namespace=ns, package=pkg, name=name)
            for ns, pkg, name in triples
        )

    @staticmethod
    def from_strings(values: Iterable[str]) -> RuntimeWhitelist:
        return RuntimeWhitelist(
            InterfaceIdentifier.parse(value) for value in values
        )

    def contains(self, identifier: InterfaceIdentifier) -> bool:
        return identifier in self._interfaces

    def __len__(self) -> int:
        return len(self._interfaces)
