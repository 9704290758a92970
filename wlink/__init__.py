"""Optimistic linking of WebAssembly components into wadm manifests."""

__version__ = "0.1.0"
