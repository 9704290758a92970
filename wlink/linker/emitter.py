from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wlink.interface import RuntimeWhitelist
from wlink.manifest import (
    APPLICATION_KIND,
    DESCRIPTION_ANNOTATION_KEY,
    OAM_VERSION,
    VERSION_ANNOTATION_KEY,
    Manifest,
    Metadata,
    Specification,
)

from ._link import LinkConstructor

if TYPE_CHECKING:
    from .graph import ManifestGraph

logger = logging.getLogger(__name__)


class ManifestEmitter:
    whitelist: RuntimeWhitelist

    def __init__(self, whitelist: RuntimeWhitelist | None = None):
        self.whitelist = whitelist or RuntimeWhitelist.default()

    def emit(
        self,
        graph: ManifestGraph,
        name: str,
        version: str,
        description: str,
    ) -> Manifest:
        """Project the graph into a deployment description.

        Link constructors become link traits appended to the traits of
        their source component. Unresolved links are emitted with an
        empty target; reject an invalid validation report before
        emitting.

        Args:
            graph:
                Graph to emit.
            name:
                Application name, used when the graph has no metadata.
            version:
                Application version annotation.
            description:
                Application description annotation.

        Returns:
            Deployment description.
        """
        components = []
        for component in graph.components:
            entry = component.copy(deep=True)
            traits = list(entry.traits or [])
            for link in self.links_for(graph, component.name):
                traits.append(link.to_trait())
            entry.traits = traits
            components.append(entry)

        if graph.metadata is not None:
            metadata = graph.metadata.copy(deep=True)
        else:
            metadata = Metadata(
                name=name,
                annotations={
                    VERSION_ANNOTATION_KEY: version,
                    DESCRIPTION_ANNOTATION_KEY: description,
                },
            )
        logger.debug("Emitting %d components", len(components))
        return Manifest(
            api_version=graph.api_version or OAM_VERSION,
            kind=graph.kind or APPLICATION_KIND,
            metadata=metadata,
            spec=Specification(
                components=components,
                policies=[policy.copy(deep=True) for policy in graph.policies],
            ),
        )

    def links_for(
        self,
        graph: ManifestGraph,
        source: str,
    ) -> list[LinkConstructor]:
        return [
            link
            for link in graph.links_from(source)
            if not link.interfaces
            or not self.whitelist.contains(link.identifier)
        ]
