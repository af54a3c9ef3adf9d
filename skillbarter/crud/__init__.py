"""CRUD package exports with lazy module loading.

Query modules are imported on first attribute access so that importing
one of them does not pull in the others.
"""

from importlib import import_module

__all__ = ["profile", "skill", "swap", "reward"]


def __getattr__(name):
    if name in __all__:
        return import_module(f".{name}", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
