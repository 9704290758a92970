"""
wasm-tools provider for decoder.
"""

__all__ = ["WasmTools"]

import json
import logging
import shutil
import subprocess

from wlink.core import Provider
from wlink.core.exceptions import DecodeError
from wlink.interface import InterfaceCatalog

from .._helper import check_magic, parse_resolve

logger = logging.getLogger(__name__)


class WasmTools(Provider):
    executable: str
    timeout: float | None

    _path: str | None

    def __init__(
        self,
        executable: str = "wasm-tools",
        timeout: float | None = 60,
        **kwargs,
    ):
        """Initialize.

        Args:
            executable:
                Name or path of the wasm-tools executable.
            timeout:
                Seconds to wait for wasm-tools.
        """
        super().__init__(**kwargs)
        self.executable = executable
        self.timeout = timeout
        self._path = None

    def __setup__(self) -> None:
        if self._path is not None:
            return
        path = shutil.which(self.executable)
        if path is None:
            raise DecodeError(f"{self.executable} not found on PATH")
        logger.debug("Using %s", path)
        self._path = path

    def decode(
        self,
        data: bytes,
        **kwargs,
    ) -> InterfaceCatalog:
        check_magic(data)
        self.__setup__()
        try:
            result = subprocess.run(
                [self._path, "component", "wit", "--json"],
                input=data,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise DecodeError(f"{self.executable} failed: {e}") from e
        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()
            raise DecodeError(f"{self.executable} failed: {stderr}")
        try:
            resolve = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Invalid wasm-tools output: {e}") from e
        return parse_resolve(resolve)
