from __future__ import annotations

from wlink.core import Component, operation
from wlink.core.config import LinkerConfig
from wlink.interface import InterfaceCatalog

from ._helper import check_magic


class Decoder(Component):
    """Reads the interface surface of WebAssembly components."""

    def __init__(
        self,
        **kwargs,
    ):
        kwargs.setdefault("__provider__", "wasm_tools")
        super().__init__(**kwargs)

    @staticmethod
    def from_config(config: LinkerConfig) -> Decoder:
        """Create the default wasm-tools decoder for a linker config."""
        return Decoder(
            __provider__=dict(
                type="wasm_tools",
                parameters=dict(executable=config.wasm_tools),
            )
        )

    @operation()
    def decode(
        self,
        data: bytes,
        **kwargs,
    ) -> InterfaceCatalog:
        """Decode a component binary.

        Args:
            data:
                Component binary.

        Returns:
            Imports, exports and package of the component.

        Raises:
            DecodeError:
                The binary is not a WebAssembly component or could
                not be decoded.
        """
        ...

    @operation()
    def decode_file(
        self,
        path: str,
        **kwargs,
    ) -> InterfaceCatalog:
        """Decode a component binary stored in a file.

        Args:
            path:
                Path of the component binary.

        Returns:
            Imports, exports and package of the component.
        """
        with open(path, "rb") as file:
            data = file.read()
        check_magic(data, path)
        return self.decode(data=data)
