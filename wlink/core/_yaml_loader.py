from typing import Any

import yaml


class YamlLoader:
    @staticmethod
    def load(path: str) -> dict:
        with open(path, "r") as file:
            return yaml.load(file, Loader=yaml.FullLoader)

    @staticmethod
    def loads(content: str) -> dict:
        return yaml.load(content, Loader=yaml.FullLoader)

    @staticmethod
    def dumps(obj: Any) -> str:
        return yaml.safe_dump(obj, sort_keys=False)

    @staticmethod
    def dump(obj: Any, path: str) -> None:
        with open(path, "w") as file:
            yaml.safe_dump(obj, file, sort_keys=False)
