from __future__ import annotations

import glob
import logging

import yaml
from pydantic import ValidationError as ModelValidationError

from wlink.core.config import DecodeFailurePolicy, LinkerConfig
from wlink.core.exceptions import (
    BadRequestError,
    DecodeError,
    InvalidManifestError,
    LoadError,
)
from wlink.decoder import Decoder
from wlink.interface import find_builtin_provider
from wlink.manifest import (
    CAPABILITY_TYPE,
    FILE_PREFIX,
    ComponentsConfig,
    Entity,
    Manifest,
)

from ._report import ValidationReport
from .emitter import ManifestEmitter
from .graph import ManifestGraph

logger = logging.getLogger(__name__)


class Linker:
    """Runs one linking invocation.

    Components from a components file are merged first, then an existing
    deployment description is folded in, the links are resolved once and
    the resulting deployment description is emitted.
    """

    config: LinkerConfig
    decoder: Decoder
    graph: ManifestGraph
    report: ValidationReport | None

    def __init__(
        self,
        config: LinkerConfig | None = None,
        decoder: Decoder | None = None,
    ):
        self.config = config or LinkerConfig()
        self.decoder = decoder or Decoder.from_config(self.config)
        self.graph = ManifestGraph(config=self.config, decoder=self.decoder)
        self.report = None

    def process_components(self, path: str) -> None:
        logger.info("Processing components from %s", path)
        try:
            components = ComponentsConfig.parse(path)
        except (OSError, yaml.YAMLError, ModelValidationError) as e:
            raise LoadError(f"Failed to load components file {path}: {e}")
        for entity in components.entities:
            self.process_entity(entity)

    def process_entity(self, entity: Entity) -> None:
        if entity.reference is not None:
            self._process_oci_entity(entity, entity.reference)
            return
        path = entity.path
        if path is None:
            path = self._find_default_source(entity)
        self._process_file_entity(entity, path)

    def merge_description(self, path: str) -> None:
        logger.info("Processing deployment description from %s", path)
        try:
            description = Manifest.parse(path)
        except (OSError, yaml.YAMLError, ModelValidationError) as e:
            raise LoadError(f"Failed to load description {path}: {e}")
        self.graph.merge_existing_description(description)

    def validate(self) -> ValidationReport:
        logger.info("Validating and resolving links")
        self.report = self.graph.validate()
        return self.report

    def emit(self, name: str, version: str, description: str) -> Manifest:
        emitter = ManifestEmitter(whitelist=self.graph.whitelist)
        return emitter.emit(
            self.graph,
            name=name,
            version=version,
            description=description,
        )

    def link(
        self,
        components: str | None = None,
        wadm: str | None = None,
        name: str = "application",
        version: str = "v0.0.1",
        description: str = "",
    ) -> Manifest:
        """Link components into a deployment description.

        Args:
            components:
                Path of the components file.
            wadm:
                Path of an existing deployment description.
            name:
                Application name.
            version:
                Application version.
            description:
                Application description.

        Returns:
            Deployment description with link traits.

        Raises:
            BadRequestError:
                Neither a components file nor a description is given.
            InvalidManifestError:
                Some links could not be resolved.
        """
        if components is None and wadm is None:
            raise BadRequestError(
                "Must provide either a components file or a description"
            )
        if components is not None:
            self.process_components(components)
        if wadm is not None:
            self.merge_description(wadm)
        report = self.validate()
        if not report.is_valid:
            raise InvalidManifestError(report)
        return self.emit(name=name, version=version, description=description)

    def _process_file_entity(self, entity: Entity, path: str) -> None:
        logger.info("Processing WASM component %s at %s", entity.name, path)
        try:
            catalog = self.decoder.decode_file(path=path)
        except (DecodeError, OSError) as e:
            message = f"Failed to process WASM file {path}: {e}"
            if (
                self.config.component_decode_failure
                == DecodeFailurePolicy.SKIP
            ):
                logger.warning(message)
                return
            raise DecodeError(message) from e
        logger.debug("Imports of %s: %s", entity.name, catalog.imports)
        logger.debug("Exports of %s: %s", entity.name, catalog.exports)
        self.graph.merge_new_component(
            entity.name,
            catalog,
            f"{FILE_PREFIX}{path}",
        )

    def _process_oci_entity(self, entity: Entity, reference: str) -> None:
        logger.info(
            "Processing OCI component %s at %s", entity.name, reference
        )
        provider = find_builtin_provider(reference=reference)
        if provider is None:
            # TODO: pull OCI components and decode them like local files.
            logger.warning(
                "Skipping OCI component %s: only built-in capability "
                "providers are supported",
                entity.name,
            )
            return
        self.graph.merge_new_component(
            entity.name,
            provider.catalog.copy(deep=True),
            reference,
            type=CAPABILITY_TYPE,
        )

    def _find_default_source(self, entity: Entity) -> str:
        pattern = entity.default_source(self.config.default_source)
        matches = sorted(glob.glob(pattern))
        if not matches:
            return pattern
        if len(matches) > 1:
            logger.warning(
                "Several binaries match %s, using %s", pattern, matches[0]
            )
        return matches[0]
