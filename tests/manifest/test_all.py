# type: ignore
import pytest
from pydantic import ValidationError

from wlink.core import YamlLoader
from wlink.manifest import (
    CAPABILITY_TYPE,
    OAM_VERSION,
    ComponentsConfig,
    Entity,
    LinkProperty,
    Manifest,
    Metadata,
    Trait,
)

from ._data import components, description, invalid_sources


def test_parse_description(tmp_path):
    path = tmp_path / "wadm.yaml"
    path.write_text(description)
    manifest = Manifest.parse(str(path))
    assert manifest.api_version == OAM_VERSION
    assert manifest.kind == "Application"
    assert manifest.metadata.name == "hello"
    assert manifest.metadata.annotations["version"] == "v0.1.0"
    assert manifest.metadata.labels == {"team": "edge"}
    assert [c.name for c in manifest.components] == ["front", "httpserver"]
    assert manifest.policies[0].properties["backend"] == "nats-kv"

    front = manifest.get_component("front")
    assert front.properties.image_path == "./front/build/front_s.wasm"
    assert [t.type for t in front.other_traits()] == ["spreadscaler"]
    link = front.link_traits()[0].link
    assert link.namespace == "ns"
    assert link.package == "pkg"
    assert link.interfaces == ["backend-call"]
    assert link.target.name == "back"

    httpserver = manifest.get_component("httpserver")
    assert httpserver.is_capability()
    assert httpserver.type == CAPABILITY_TYPE
    link = httpserver.link_traits()[0].link
    assert link.source.config[0]["name"] == "default-http"
    assert manifest.get_component("back") is None


def test_dump_description(tmp_path):
    manifest = Manifest.loads(description)
    obj = YamlLoader.loads(manifest.to_yaml())
    assert obj["apiVersion"] == OAM_VERSION
    assert "api_version" not in obj
    assert list(obj.keys()) == ["apiVersion", "kind", "metadata", "spec"]

    # fields the models do not declare are kept
    front = obj["spec"]["components"][0]
    assert front["traits"][0]["properties"] == {"instances": 1}

    path = tmp_path / "out.yaml"
    manifest.dump(str(path))
    assert Manifest.parse(str(path)) == manifest


def test_new_link_trait():
    trait = Trait.new_link(
        LinkProperty(
            namespace="ns",
            package="pkg",
            interfaces=["backend-call"],
        )
    )
    assert trait.is_link()
    assert trait.properties["namespace"] == "ns"
    assert trait.properties["target"]["name"] == ""
    assert "source" not in trait.properties
    assert Trait(type="spreadscaler").link is None


def test_minimal_description():
    manifest = Manifest(metadata=Metadata(name="empty"))
    obj = manifest.to_dict()
    assert obj["apiVersion"] == OAM_VERSION
    assert obj["spec"] == {"components": [], "policies": []}


def test_components_config(tmp_path):
    path = tmp_path / "components.yaml"
    path.write_text(components)
    config = ComponentsConfig.parse(str(path))
    front, httpserver, back = config.entities
    assert front.path == "./front/build/front_s.wasm"
    assert front.reference is None
    assert httpserver.path is None
    assert httpserver.reference == "ghcr.io/wasmcloud/http-server:0.23.0"
    assert back.source is None
    assert back.path is None
    assert back.reference is None
    assert (
        back.default_source("./{name}/build/*.wasm") == "./back/build/*.wasm"
    )

    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert ComponentsConfig.parse(str(path)).entities == []


@pytest.mark.parametrize(
    "source",
    invalid_sources,
)
def test_entity_invalid_source(source: str):
    with pytest.raises(ValidationError):
        Entity(name="front", source=source)
