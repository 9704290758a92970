from wlink.interface import InterfaceCatalog, InterfaceIdentifier


def catalog(
    imports: list[str] | None = None,
    exports: list[str] | None = None,
) -> InterfaceCatalog:
    return InterfaceCatalog(
        imports=[InterfaceIdentifier.parse(i) for i in imports or []],
        exports=[InterfaceIdentifier.parse(e) for e in exports or []],
    )


catalogs = {
    "front": {
        "imports": [
            "ns:pkg:backend-call",
            "wasi:io:streams",
            "wasi:cli:stdout",
        ],
        "exports": ["wasi:http:incoming-handler"],
    },
    "back": {
        "imports": ["wasi:io:error"],
        "exports": ["ns:pkg:backend-call"],
    },
    "back2": {
        "imports": [],
        "exports": ["ns:pkg:backend-call"],
    },
    "store": {
        "imports": [],
        "exports": ["ns:pkg:storage"],
    },
    "runtime-only": {
        "imports": [
            "wasi:io:poll",
            "wasi:http:types",
            "wasi:filesystem:preopens",
        ],
        "exports": [],
    },
    "client": {
        "imports": ["wasi:http:outgoing-handler"],
        "exports": ["wasi:http:incoming-handler"],
    },
}


def get_catalog(name: str) -> InterfaceCatalog:
    return catalog(**catalogs[name])


def pinned_description(
    source: str,
    target: str,
    interface: str = "backend-call",
) -> dict:
    return {
        "apiVersion": "core.oam.dev/v1beta1",
        "kind": "Application",
        "metadata": {
            "name": "pinned",
            "annotations": {"version": "v1.2.3", "description": "Pinned"},
        },
        "spec": {
            "components": [
                {
                    "name": source,
                    "type": "component",
                    "properties": {"image": f"file://./{source}.wasm"},
                    "traits": [
                        {
                            "type": "spreadscaler",
                            "properties": {"instances": 3},
                        },
                        {
                            "type": "link",
                            "properties": {
                                "namespace": "ns",
                                "package": "pkg",
                                "interfaces": [interface],
                                "target": {"name": target},
                            },
                        },
                    ],
                }
            ],
            "policies": [
                {
                    "name": "nats-kv",
                    "type": "policy.secret.wasmcloud.dev/v1alpha1",
                    "properties": {"backend": "nats-kv"},
                }
            ],
        },
    }
