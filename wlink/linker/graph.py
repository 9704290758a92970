from __future__ import annotations

import logging

from pydantic import ValidationError as ModelValidationError

from wlink.core.config import DecodeFailurePolicy, LinkerConfig
from wlink.core.exceptions import (
    BadRequestError,
    ComponentError,
    DecodeError,
    LinkError,
)
from wlink.decoder import Decoder
from wlink.interface import (
    InterfaceCatalog,
    InterfaceIdentifier,
    RuntimeWhitelist,
    find_builtin_provider,
)
from wlink.manifest import (
    CAPABILITY_TYPE,
    COMPONENT_TYPE,
    Component,
    ComponentProperties,
    Manifest,
    Metadata,
    Policy,
)

from ._link import LinkConstructor
from ._report import ValidationReport
from .resolver import ResolutionEngine

logger = logging.getLogger(__name__)


class ManifestGraph:
    """Components, their interfaces and the links between them.

    The graph only grows: components, catalogs and link constructors are
    appended or updated in place, never removed. Catalogs keep the order
    in which components were first merged, which is the order the
    resolution engine searches for exporters.
    """

    config: LinkerConfig
    whitelist: RuntimeWhitelist
    api_version: str | None
    kind: str | None
    metadata: Metadata | None
    components: list[Component]
    catalogs: dict[str, InterfaceCatalog]
    links: list[LinkConstructor]
    policies: list[Policy]

    def __init__(
        self,
        config: LinkerConfig | None = None,
        decoder: Decoder | None = None,
        whitelist: RuntimeWhitelist | None = None,
    ):
        self.config = config or LinkerConfig()
        self.whitelist = whitelist or self.config.whitelist()
        logger.debug(
            "Runtime whitelist has %d interfaces", len(self.whitelist)
        )
        self._decoder = decoder
        self.api_version = None
        self.kind = None
        self.metadata = None
        self.components = []
        self.catalogs = dict()
        self.links = []
        self.policies = []

    @property
    def decoder(self) -> Decoder:
        if self._decoder is None:
            self._decoder = Decoder.from_config(self.config)
        return self._decoder

    def component_exists(self, name: str) -> bool:
        return any(component.name == name for component in self.components)

    def get_component(self, name: str) -> Component | None:
        for component in self.components:
            if component.name == name:
                return component
        return None

    def get_catalog(self, name: str) -> InterfaceCatalog | None:
        return self.catalogs.get(name)

    def links_from(self, source: str) -> list[LinkConstructor]:
        return [link for link in self.links if link.source == source]

    def merge_new_component(
        self,
        name: str,
        catalog: InterfaceCatalog,
        location: str | None,
        type: str = COMPONENT_TYPE,
    ) -> list[LinkConstructor]:
        """Add a component and a link constructor per import.

        Merging the same component twice duplicates its link
        constructors; each component is merged once per catalog.

        Args:
            name:
                Component name.
            catalog:
                Imports and exports of the component.
            location:
                Image of the component.
            type:
                Component type used when the component is new.

        Returns:
            Link constructors created for the component.
        """
        if not name:
            raise BadRequestError("Component name cannot be empty")
        links = []
        for identifier in catalog.imports:
            if self.whitelist.contains(identifier):
                logger.debug(
                    "Skipping runtime interface %s for %s", identifier, name
                )
                continue
            logger.debug("Adding link constructor %s -> %s", name, identifier)
            links.append(LinkConstructor.for_import(name, identifier))

        self.catalogs[name] = catalog
        component = self.get_component(name)
        if component is not None:
            component.properties.image = location
        else:
            self.components.append(
                Component(
                    name=name,
                    type=type,
                    properties=ComponentProperties(image=location, id=name),
                    traits=[],
                )
            )
        self.links.extend(links)
        logger.info(
            "Merged component %s (%d imports, %d exports, %d links)",
            name,
            len(catalog.imports),
            len(catalog.exports),
            len(links),
        )
        return links

    def merge_existing_description(self, description: Manifest) -> None:
        """Fold an existing deployment description into the graph.

        Link traits of components already in the graph pin their link
        constructors to the declared target. Components not yet in the
        graph are decoded from their image, or taken from the built-in
        capability providers, and merged as new components.

        Args:
            description:
                Deployment description.

        Raises:
            ComponentError:
                A link trait names an interface its component does not
                import.
        """
        if self.metadata is None:
            self.metadata = description.metadata.copy(deep=True)
        if self.api_version is None:
            self.api_version = description.api_version
        if self.kind is None:
            self.kind = description.kind

        for component in description.components:
            logger.info("Processing described component %s", component.name)
            if self.component_exists(component.name):
                self._apply_description(component)
            elif self._merge_described_component(component):
                self._apply_description(component)

        self.policies.extend(
            policy.copy(deep=True) for policy in description.policies
        )

    def validate(self) -> ValidationReport:
        engine = ResolutionEngine(
            whitelist=self.whitelist,
            ambiguity=self.config.ambiguity,
        )
        return engine.validate(self)

    def _merge_described_component(self, component: Component) -> bool:
        properties = component.properties
        if component.is_capability():
            provider = find_builtin_provider(
                name=component.name,
                reference=properties.image,
            )
            if provider is None:
                logger.warning(
                    "Ignoring unknown capability %s", component.name
                )
                return False
            self.merge_new_component(
                component.name,
                provider.catalog.copy(deep=True),
                properties.image or "",
                type=CAPABILITY_TYPE,
            )
            return True

        path = properties.image_path
        if not path:
            logger.warning(
                "Ignoring component %s without an image", component.name
            )
            return False
        try:
            catalog = self.decoder.decode_file(path=path)
        except (DecodeError, OSError) as e:
            message = f"Failed to process WASM file {path}: {e}"
            if (
                self.config.description_decode_failure
                == DecodeFailurePolicy.RAISE
            ):
                raise DecodeError(message) from e
            logger.warning(message)
            return False
        self.merge_new_component(component.name, catalog, properties.image)
        return True

    def _apply_description(self, component: Component) -> None:
        entry = self.get_component(component.name)
        catalog = self.get_catalog(component.name)
        if entry is None or catalog is None:
            return
        for trait in component.link_traits():
            try:
                link = trait.link
            except ModelValidationError as e:
                raise LinkError(
                    f"Invalid link trait on {component.name}: {e}"
                ) from e
            if link is None:
                continue
            if not link.interfaces:
                raise LinkError(
                    f"Link trait on {component.name} has no interfaces"
                )
            identifier = InterfaceIdentifier(
                namespace=link.namespace,
                package=link.package,
                name=link.interfaces[0],
            )
            if not catalog.imports_interface(identifier):
                raise ComponentError(
                    f"Component {component.name} does not import "
                    f"interface {identifier}"
                )
            if not link.target.name:
                continue
            constructor = self._find_link(
                component.name,
                link.interfaces,
                link.namespace,
                link.package,
            )
            if constructor is None:
                logger.warning(
                    "No pending link for %s on %s", identifier, component.name
                )
                continue
            constructor.pin(link.target.name)
            logger.info(
                "Pinned link %s -> %s for %s",
                component.name,
                link.target.name,
                identifier,
            )

        traits = entry.traits if entry.traits is not None else []
        for trait in component.other_traits():
            if trait not in traits:
                traits.append(trait.copy(deep=True))
        entry.traits = traits

    def _find_link(
        self,
        source: str,
        interfaces: list[str],
        namespace: str,
        package: str,
    ) -> LinkConstructor | None:
        for link in self.links:
            if link.matches(source, interfaces, namespace, package):
                return link
        return None
