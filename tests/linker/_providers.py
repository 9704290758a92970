from typing import Any

from wlink.core import YamlLoader
from wlink.decoder import Decoder

from ..decoder._providers import component_binary
from ._data import get_catalog


def get_decoder(tmp_path, names: list[str]) -> tuple[Decoder, dict[str, str]]:
    decoder = Decoder(__provider__="static")
    paths = {}
    for name in names:
        data = component_binary(name)
        path = tmp_path / f"{name}.wasm"
        path.write_bytes(data)
        decoder.__provider__.register(data, get_catalog(name))
        paths[name] = str(path)
    return decoder, paths


def write_components(tmp_path, entities: list[dict[str, Any]]) -> str:
    path = tmp_path / "components.yaml"
    YamlLoader.dump({"entities": entities}, path=str(path))
    return str(path)


def write_description(tmp_path, description: dict[str, Any]) -> str:
    path = tmp_path / "wadm.yaml"
    YamlLoader.dump(description, path=str(path))
    return str(path)
