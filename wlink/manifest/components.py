from __future__ import annotations

from pydantic import field_validator

from wlink.core import DataModel, YamlLoader

from ._constants import FILE_PREFIX, OCI_PREFIX

__all__ = ["ComponentsConfig", "Entity"]


class Entity(DataModel):
    """Component listed in a components file.

    Args:
        name:
            Component name.
        source:
            `file://<path>` or `oci://<reference>`. When not set,
            the default build output location is used.
    """

    name: str
    source: str | None = None

    @field_validator("source")
    @classmethod
    def check_source(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not value.startswith((FILE_PREFIX, OCI_PREFIX)):
            raise ValueError(
                f"source must start with {FILE_PREFIX} or {OCI_PREFIX}"
            )
        return value

    @property
    def path(self) -> str | None:
        if self.source and self.source.startswith(FILE_PREFIX):
            return self.source[len(FILE_PREFIX) :]
        return None

    @property
    def reference(self) -> str | None:
        if self.source and self.source.startswith(OCI_PREFIX):
            return self.source[len(OCI_PREFIX) :]
        return None

    def default_source(self, pattern: str) -> str:
        return pattern.format(name=self.name)


class ComponentsConfig(DataModel):
    entities: list[Entity] = []

    @staticmethod
    def parse(path: str) -> ComponentsConfig:
        obj = YamlLoader.load(path=path)
        return ComponentsConfig.from_dict(obj or {})
