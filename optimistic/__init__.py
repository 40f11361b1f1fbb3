"""optimistic: tiny, type-safe optimistic-update state.

Main components:
* `Resolved` / `Pending`: the two container variants
* `push`, `update`, `force`, `revert`, `resolve`, `try_`: pure transitions
* `Ok` / `Err`: outcomes fed to `resolve` and `try_`
* `OptimisticCell`: thread-safe holder of the current container
"""

# Version info
__version__ = "0.1.0"

# Core components
from optimistic.core.value import (
    Resolved,
    Pending,
    OptimisticValue,
    from_resolved,
    is_resolved,
    is_pending,
    unwrap,
    fallback_of,
    state_name,
    push,
    update,
    force,
    revert,
    resolve,
    try_,
    try_combine,
)
from optimistic.core.outcome import Ok, Err, Outcome, is_ok, capture, capture_async
from optimistic.core.cell import OptimisticCell

# Registry / scenarios
from optimistic.combiners import register_combiner, get_combiner, list_combiners, updater
from optimistic.errors import OptimisticError, ScenarioError, UnknownCombinerError

# Export all important symbols
__all__ = [
    # Container
    "Resolved",
    "Pending",
    "OptimisticValue",
    "from_resolved",
    "is_resolved",
    "is_pending",
    "unwrap",
    "fallback_of",
    "state_name",
    "push",
    "update",
    "force",
    "revert",
    "resolve",
    "try_",
    "try_combine",

    # Outcomes
    "Ok",
    "Err",
    "Outcome",
    "is_ok",
    "capture",
    "capture_async",

    # Helpers
    "OptimisticCell",
    "register_combiner",
    "get_combiner",
    "list_combiners",
    "updater",

    # Errors
    "OptimisticError",
    "ScenarioError",
    "UnknownCombinerError",
]
