identifiers = [
    ("ns:pkg:backend-call", ("ns", "pkg", "backend-call")),
    ("wasi:http:incoming-handler", ("wasi", "http", "incoming-handler")),
    ("wasi:io/streams@0.2.0", ("wasi", "io", "streams")),
    ("wasi:clocks/wall-clock", ("wasi", "clocks", "wall-clock")),
    (" wasi:cli:stdout ", ("wasi", "cli", "stdout")),
]

invalid_identifiers = [
    "",
    "ns:pkg",
    "ns:pkg:",
    "ns::name",
    "ns:pkg:name:extra",
    "pkg/name",
]
