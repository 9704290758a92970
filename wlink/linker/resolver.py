from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wlink.core.config import AmbiguityPolicy
from wlink.core.exceptions import ComponentError, InterfaceError, LinkError
from wlink.interface import InterfaceIdentifier, RuntimeWhitelist

from ._link import LinkConstructor, LinkState
from ._report import UnlinkedInterface, ValidationReport

if TYPE_CHECKING:
    from .graph import ManifestGraph

logger = logging.getLogger(__name__)


class ResolutionEngine:
    """Resolves and validates the link constructors of a graph.

    Links without a target are saturated optimistically: the first
    component, in catalog order, that exports the required interface
    becomes the target. Targets that are already set are checked and
    never replaced. Every problem is collected in the report; the pass
    never stops early.
    """

    whitelist: RuntimeWhitelist
    ambiguity: AmbiguityPolicy

    def __init__(
        self,
        whitelist: RuntimeWhitelist | None = None,
        ambiguity: AmbiguityPolicy = AmbiguityPolicy.FIRST,
    ):
        self.whitelist = whitelist or RuntimeWhitelist.default()
        self.ambiguity = ambiguity

    def validate(self, graph: ManifestGraph) -> ValidationReport:
        report = ValidationReport()
        self.validate_basic_requirements(graph, report)
        for link in graph.links:
            self.resolve_link(graph, link, report)
        logger.info(report.summary())
        return report

    def resolve_link(
        self,
        graph: ManifestGraph,
        link: LinkConstructor,
        report: ValidationReport,
    ) -> None:
        if not link.interfaces:
            return
        identifier = link.identifier
        if self.whitelist.contains(identifier):
            logger.debug(
                "Auto-satisfying runtime interface %s for %s",
                identifier,
                link.source,
            )
            return
        if link.target is not None:
            self._check_target(graph, link, identifier, report)
            return

        candidates = [
            name
            for name, catalog in graph.catalogs.items()
            if name != link.source and catalog.exports_interface(identifier)
        ]
        if not candidates:
            reason = (
                f"No component found that exports interface {identifier} "
                f"required by {link.source}"
            )
            link.fail(reason)
            report.add_error(InterfaceError(reason))
            report.unlinked_interfaces.append(
                UnlinkedInterface(
                    component=link.source,
                    interface=identifier,
                    potential_matches=self._potential_matches(
                        graph, link, identifier
                    ),
                )
            )
            return

        if len(candidates) > 1:
            message = (
                f"Interface {identifier} required by {link.source} is "
                f"exported by {', '.join(candidates)}"
            )
            if self.ambiguity == AmbiguityPolicy.ERROR:
                link.fail(message)
                report.add_error(InterfaceError(message))
                return
            if self.ambiguity == AmbiguityPolicy.WARN:
                report.add_warning(f"{message}; using {candidates[0]}")

        link.resolve(candidates[0])
        report.discovered_links.append(link)
        logger.info("Saturated link %s -> %s", link.source, candidates[0])

    def validate_basic_requirements(
        self,
        graph: ManifestGraph,
        report: ValidationReport,
    ) -> None:
        for component in graph.components:
            properties = component.properties
            if properties.image is None and properties.application is None:
                report.add_error(
                    ComponentError(
                        f"{component.name} must specify image or application"
                    )
                )
        for link in graph.links:
            try:
                self._validate_link_references(graph, link)
            except LinkError as e:
                report.add_error(e)

    def _check_target(
        self,
        graph: ManifestGraph,
        link: LinkConstructor,
        identifier: InterfaceIdentifier,
        report: ValidationReport,
    ) -> None:
        target = link.target
        catalog = graph.catalogs.get(target) if target is not None else None
        if catalog is None:
            reason = f"Target component {target} not found"
            link.fail(reason)
            report.add_error(ComponentError(reason))
            return
        if not catalog.exports_interface(identifier):
            reason = (
                f"Component {target} does not export interface "
                f"{identifier} required by {link.source}"
            )
            link.fail(reason)
            report.add_error(InterfaceError(reason))
            return
        if link.state == LinkState.UNSATISFIABLE:
            link.restore()

    def _validate_link_references(
        self,
        graph: ManifestGraph,
        link: LinkConstructor,
    ) -> None:
        if not graph.component_exists(link.source):
            raise LinkError(f"Source component '{link.source}' not found")
        if link.target is not None and not graph.component_exists(
            link.target
        ):
            raise LinkError(f"Target component '{link.target}' not found")
        link.validate()

    def _potential_matches(
        self,
        graph: ManifestGraph,
        link: LinkConstructor,
        identifier: InterfaceIdentifier,
    ) -> list[str]:
        return [
            name
            for name, catalog in graph.catalogs.items()
            if name != link.source
            and catalog.exports_package(
                identifier.namespace, identifier.package
            )
        ]
