from ._helper import check_magic, digest, parse_resolve
from .component import Decoder

__all__ = ["Decoder", "check_magic", "digest", "parse_resolve"]
