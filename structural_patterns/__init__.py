"""Runnable examples of the structural design patterns: adapter, bridge, composite, decorator, facade and proxy."""

__version__ = "0.1.0"
__all__ = [
    "bridge",
    "composite",
    "decorator",
    "facade",
    "plug_adapter",
    "proxy",
    "shape_adapter",
]