from __future__ import annotations

from enum import Enum

from wlink.core import DataModel
from wlink.core.exceptions import LinkError
from wlink.interface import InterfaceIdentifier
from wlink.manifest import ConfigDefinition, LinkProperty, TargetConfig, Trait


class LinkState(str, Enum):
    PENDING = "pending"
    PINNED = "pinned"
    RESOLVED = "resolved"
    UNSATISFIABLE = "unsatisfiable"


class LinkConstructor(DataModel):
    """Link requirement of one importing component.

    Args:
        source:
            Component that imports the interface.
        target:
            Component that exports the interface. Set by an explicit
            pin or by the resolution engine.
        interfaces:
            Interfaces the target must export.
        namespace:
            Namespace of the interfaces.
        package:
            Package of the interfaces.
        state:
            Resolution state.
        pinned:
            Whether the target was set by an explicit pin.
        reason:
            Why the link is unsatisfiable.
    """

    source: str
    target: str | None = None
    interfaces: list[str]
    namespace: str
    package: str
    state: LinkState = LinkState.PENDING
    pinned: bool = False
    reason: str | None = None

    @staticmethod
    def for_import(
        source: str,
        identifier: InterfaceIdentifier,
    ) -> LinkConstructor:
        return LinkConstructor(
            source=source,
            interfaces=[identifier.name],
            namespace=identifier.namespace,
            package=identifier.package,
        )

    @property
    def identifier(self) -> InterfaceIdentifier:
        return InterfaceIdentifier(
            namespace=self.namespace,
            package=self.package,
            name=self.interfaces[0],
        )

    def matches(
        self,
        source: str,
        interfaces: list[str],
        namespace: str,
        package: str,
    ) -> bool:
        return (
            self.source == source
            and self.interfaces == interfaces
            and self.namespace == namespace
            and self.package == package
        )

    def pin(self, target: str) -> None:
        self.target = target
        self.state = LinkState.PINNED
        self.pinned = True
        self.reason = None

    def resolve(self, target: str) -> None:
        self.target = target
        self.state = LinkState.RESOLVED
        self.pinned = False
        self.reason = None

    def fail(self, reason: str) -> None:
        self.state = LinkState.UNSATISFIABLE
        self.reason = reason

    def restore(self) -> None:
        """Clear a failure once the target checks out again."""
        if self.target is None:
            return
        self.state = LinkState.PINNED if self.pinned else LinkState.RESOLVED
        self.reason = None

    def validate(self) -> None:
        if not self.interfaces:
            raise LinkError("Link must have at least one interface")
        if not self.namespace:
            raise LinkError("Namespace cannot be empty")
        if not self.package:
            raise LinkError("Package cannot be empty")

    def to_trait(self) -> Trait:
        target = self.target or ""
        return Trait.new_link(
            LinkProperty(
                namespace=self.namespace,
                package=self.package,
                interfaces=list(self.interfaces),
                source=ConfigDefinition(),
                target=TargetConfig(name=target),
                name=f"{self.source}-{target}",
            )
        )
