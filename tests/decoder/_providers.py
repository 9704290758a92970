import json
import os
from typing import Any

from wlink.core.constants import WASM_MAGIC
from wlink.decoder import Decoder


class DecoderProvider:
    STATIC = "static"
    WASM_TOOLS = "wasm_tools"


provider_parameters = {
    DecoderProvider.STATIC: {},
    DecoderProvider.WASM_TOOLS: {
        "executable": "wlink-test-missing-wasm-tools",
    },
}


def get_component(provider_type: str, **parameters: Any) -> Decoder:
    return Decoder(
        __provider__=dict(
            type=provider_type,
            parameters={**provider_parameters[provider_type], **parameters},
        )
    )


def component_binary(name: str) -> bytes:
    # component layer version header followed by a unique payload
    return WASM_MAGIC + b"\x0d\x00\x01\x00" + name.encode()


def write_wasm_tools(
    tmp_path,
    stdout: str | dict | None = None,
    stderr: str | None = None,
    exit_code: int = 0,
) -> str:
    """Write a shell script standing in for wasm-tools."""
    lines = ["#!/bin/sh", "cat > /dev/null"]
    if stdout is not None:
        output = tmp_path / "stdout.txt"
        if isinstance(stdout, dict):
            stdout = json.dumps(stdout)
        output.write_text(stdout)
        lines.append(f"cat '{output}'")
    if stderr is not None:
        lines.append(f"echo '{stderr}' >&2")
    lines.append(f"exit {exit_code}")
    path = tmp_path / "wasm-tools"
    path.write_text("\n".join(lines) + "\n")
    os.chmod(path, 0o755)
    return str(path)
