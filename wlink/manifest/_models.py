from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from wlink.core import DataModel, DataModelField, YamlLoader

from ._constants import (
    APPLICATION_KIND,
    CAPABILITY_TYPE,
    COMPONENT_TYPE,
    FILE_PREFIX,
    LINK_TRAIT,
    OAM_VERSION,
)

__all__ = [
    "ApplicationRef",
    "Component",
    "ComponentProperties",
    "ConfigDefinition",
    "LinkProperty",
    "Manifest",
    "Metadata",
    "Policy",
    "Specification",
    "TargetConfig",
    "Trait",
]


class DocumentModel(DataModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self, **kwargs: Any) -> dict:
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("exclude_none", True)
        return self.model_dump(**kwargs)


class ConfigDefinition(DocumentModel):
    config: list[dict[str, Any]] = []
    secrets: list[dict[str, Any]] = []


class TargetConfig(DocumentModel):
    name: str = ""
    config: list[dict[str, Any]] = []
    secrets: list[dict[str, Any]] = []


class LinkProperty(DocumentModel):
    """Properties of a link trait.

    Args:
        namespace:
            Namespace shared by the linked interfaces.
        package:
            Package shared by the linked interfaces.
        interfaces:
            Interface names satisfied by the target.
        source:
            Configuration passed to the source side.
        target:
            Component satisfying the interfaces.
        name:
            Link name.
    """

    namespace: str = ""
    package: str = ""
    interfaces: list[str] = []
    source: ConfigDefinition | None = None
    target: TargetConfig = TargetConfig()
    name: str | None = None


class Trait(DocumentModel):
    type: str
    properties: dict[str, Any] = {}

    def is_link(self) -> bool:
        return self.type == LINK_TRAIT

    @property
    def link(self) -> LinkProperty | None:
        if not self.is_link():
            return None
        return LinkProperty.from_dict(self.properties)

    @staticmethod
    def new_link(link: LinkProperty) -> Trait:
        return Trait(type=LINK_TRAIT, properties=link.to_dict())


class ApplicationRef(DocumentModel):
    name: str
    component: str | None = None


class ComponentProperties(DocumentModel):
    image: str | None = None
    application: ApplicationRef | None = None
    id: str | None = None
    config: list[dict[str, Any]] = []
    secrets: list[dict[str, Any]] = []

    @property
    def image_path(self) -> str | None:
        if self.image is None:
            return None
        if self.image.startswith(FILE_PREFIX):
            return self.image[len(FILE_PREFIX) :]
        return self.image


class Component(DocumentModel):
    name: str
    type: str = COMPONENT_TYPE
    properties: ComponentProperties = ComponentProperties()
    traits: list[Trait] | None = None

    def is_capability(self) -> bool:
        return self.type == CAPABILITY_TYPE

    def link_traits(self) -> list[Trait]:
        return [trait for trait in self.traits or [] if trait.is_link()]

    def other_traits(self) -> list[Trait]:
        return [trait for trait in self.traits or [] if not trait.is_link()]


class Policy(DocumentModel):
    name: str
    type: str
    properties: dict[str, Any] = {}


class Metadata(DocumentModel):
    name: str
    annotations: dict[str, str] = {}
    labels: dict[str, str] = {}


class Specification(DocumentModel):
    components: list[Component] = []
    policies: list[Policy] = []


class Manifest(DocumentModel):
    api_version: str = DataModelField(alias="apiVersion", default=OAM_VERSION)
    kind: str = APPLICATION_KIND
    metadata: Metadata
    spec: Specification = Specification()

    @property
    def components(self) -> list[Component]:
        return self.spec.components

    @property
    def policies(self) -> list[Policy]:
        return self.spec.policies

    def get_component(self, name: str) -> Component | None:
        for component in self.spec.components:
            if component.name == name:
                return component
        return None

    def to_yaml(self) -> str:
        return YamlLoader.dumps(self.to_dict(mode="json"))

    def dump(self, path: str) -> None:
        YamlLoader.dump(self.to_dict(mode="json"), path=path)

    @staticmethod
    def parse(path: str) -> Manifest:
        obj = YamlLoader.load(path=path)
        return Manifest.from_dict(obj)

    @staticmethod
    def loads(content: str) -> Manifest:
        return Manifest.from_dict(YamlLoader.loads(content))
