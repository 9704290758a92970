from ._link import LinkConstructor, LinkState
from ._report import UnlinkedInterface, ValidationReport
from .emitter import ManifestEmitter
from .graph import ManifestGraph
from .linker import Linker
from .resolver import ResolutionEngine

__all__ = [
    "LinkConstructor",
    "LinkState",
    "Linker",
    "ManifestEmitter",
    "ManifestGraph",
    "ResolutionEngine",
    "UnlinkedInterface",
    "ValidationReport",
]
