ROOT_PACKAGE_NAME = "wlink"
CONFIG_FILE = "wlink.yaml"
WASM_MAGIC = b"\0asm"
