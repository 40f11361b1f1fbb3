from __future__ import annotations

"""Simple combiner registry.

A *combiner* is a ``(base, x) -> new_base`` callable, the shape ``try_``
expects.  Naming them lets scenario files and the CLI refer to them by string.
"""

from importlib import import_module
from typing import Any, Callable, Dict, List

from optimistic.errors import UnknownCombinerError

# Public exports for `import *`
__all__ = [
    "Combiner",
    "register_combiner",
    "get_combiner",
    "list_combiners",
    "updater",
]

Combiner = Callable[[Any, Any], Any]

# Global in-memory store of combiners.
_REGISTRY: Dict[str, Combiner] = {}


def register_combiner(name: str, fn: Combiner | None = None):  # noqa: D401
    """Register *fn* under *name*; usable as a decorator when *fn* is omitted."""

    def _decorator(func: Combiner) -> Combiner:
        _REGISTRY[name] = func
        return func

    if fn is None:
        return _decorator
    return _decorator(fn)


def get_combiner(name: str) -> Combiner:  # noqa: D401
    """Return combiner registered as *name* (or imported from ``module:attr``)."""
    if name in _REGISTRY:
        return _REGISTRY[name]
    if ":" in name:
        mod_name, attr = name.split(":", 1)
        try:
            fn = getattr(import_module(mod_name), attr)
        except (ImportError, AttributeError) as e:
            raise UnknownCombinerError(f"Combiner '{name}' could not be imported: {e}") from e
        if not callable(fn):
            raise UnknownCombinerError(f"Combiner '{name}' is not callable")
        return fn
    raise UnknownCombinerError(f"Combiner '{name}' not found in registry")


def list_combiners() -> List[str]:
    return sorted(_REGISTRY)


def updater(name: str, arg: Any) -> Callable[[Any], Any]:  # noqa: D401
    """Turn combiner *name* into a one-argument updater for ``update``."""
    fn = get_combiner(name)
    return lambda base: fn(base, arg)


# --------------------------------------------------------------------------- #
# Built-ins
# --------------------------------------------------------------------------- #

@register_combiner("replace")
def _replace(base, x):
    return x


@register_combiner("add")
def _add(base, x):
    return base + x


@register_combiner("append")
def _append(base, x):
    return [*base, x]


@register_combiner("prepend")
def _prepend(base, x):
    return [x, *base]


@register_combiner("merge")
def _merge(base, x):
    return {**base, **x}
