from __future__ import annotations

import os
from enum import Enum

import yaml
from pydantic import ValidationError as ModelValidationError

from wlink.interface import RuntimeWhitelist

from ._yaml_loader import YamlLoader
from .constants import CONFIG_FILE
from .data_model import DataModel
from .exceptions import LoadError

__all__ = [
    "AmbiguityPolicy",
    "CONFIG_FILE",
    "DecodeFailurePolicy",
    "LinkerConfig",
]


class DecodeFailurePolicy(str, Enum):
    RAISE = "raise"
    SKIP = "skip"


class AmbiguityPolicy(str, Enum):
    FIRST = "first"
    WARN = "warn"
    ERROR = "error"


class LinkerConfig(DataModel):
    """Linker config.

    Args:
        runtime_interfaces:
            Interfaces satisfied by the runtime, as `ns:pkg:name`.
            The WASI defaults are used when not set.
        component_decode_failure:
            What to do when a component from the components file
            cannot be decoded.
        description_decode_failure:
            What to do when a component found in an existing
            deployment description cannot be decoded.
        ambiguity:
            What to do when more than one component exports an
            interface required by an unpinned link.
        default_source:
            Glob used for entities without a source. `{name}` is
            replaced with the entity name.
        wasm_tools:
            Name or path of the wasm-tools executable.
    """

    runtime_interfaces: list[str] | None = None
    component_decode_failure: DecodeFailurePolicy = DecodeFailurePolicy.RAISE
    description_decode_failure: DecodeFailurePolicy = DecodeFailurePolicy.SKIP
    ambiguity: AmbiguityPolicy = AmbiguityPolicy.FIRST
    default_source: str = "./{name}/build/*.wasm"
    wasm_tools: str = "wasm-tools"

    def whitelist(self) -> RuntimeWhitelist:
        if self.runtime_interfaces is None:
            return RuntimeWhitelist.default()
        return RuntimeWhitelist.from_strings(self.runtime_interfaces)

    @staticmethod
    def parse(path: str) -> LinkerConfig:
        try:
            obj = YamlLoader.load(path=path)
            return LinkerConfig.from_dict(obj or {})
        except (OSError, yaml.YAMLError, ModelValidationError) as e:
            raise LoadError(f"Failed to load config file {path}: {e}")

    @staticmethod
    def load(path: str | None = None) -> LinkerConfig:
        if path is not None:
            return LinkerConfig.parse(path)
        if os.path.exists(CONFIG_FILE):
            return LinkerConfig.parse(CONFIG_FILE)
        return LinkerConfig()
