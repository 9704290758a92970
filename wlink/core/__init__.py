from ._component import Component
from ._decorators import operation
from ._log_helper import setup_logging
from ._operation import Operation
from ._provider import Provider
from ._yaml_loader import YamlLoader
from .data_model import DataModel, DataModelField

__all__ = [
    "Component",
    "DataModel",
    "DataModelField",
    "Operation",
    "Provider",
    "YamlLoader",
    "operation",
    "setup_logging",
]
