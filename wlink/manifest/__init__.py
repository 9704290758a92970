from ._constants import (
    APPLICATION_KIND,
    CAPABILITY_TYPE,
    COMPONENT_TYPE,
    DESCRIPTION_ANNOTATION_KEY,
    FILE_PREFIX,
    LINK_TRAIT,
    OAM_VERSION,
    OCI_PREFIX,
    VERSION_ANNOTATION_KEY,
)
from ._models import (
    ApplicationRef,
    Component,
    ComponentProperties,
    ConfigDefinition,
    LinkProperty,
    Manifest,
    Metadata,
    Policy,
    Specification,
    TargetConfig,
    Trait,
)
from .components import ComponentsConfig, Entity

__all__ = [
    "APPLICATION_KIND",
    "ApplicationRef",
    "CAPABILITY_TYPE",
    "COMPONENT_TYPE",
    "Component",
    "ComponentProperties",
    "ComponentsConfig",
    "ConfigDefinition",
    "DESCRIPTION_ANNOTATION_KEY",
    "Entity",
    "FILE_PREFIX",
    "LINK_TRAIT",
    "LinkProperty",
    "Manifest",
    "Metadata",
    "OAM_VERSION",
    "OCI_PREFIX",
    "Policy",
    "Specification",
    "TargetConfig",
    "Trait",
    "VERSION_ANNOTATION_KEY",
]
