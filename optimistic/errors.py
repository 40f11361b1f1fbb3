"""Exceptions raised by the optimistic helpers.

The container functions themselves never raise for domain reasons; these only
cover the scenario / combiner layers.
"""

__all__ = ["OptimisticError", "ScenarioError", "UnknownCombinerError"]


class OptimisticError(Exception):
    """Base class for package errors."""


class ScenarioError(OptimisticError):
    """Raised when a scenario file is invalid or a replay step fails."""


class UnknownCombinerError(OptimisticError, KeyError):
    """Raised when a combiner name is neither registered nor importable."""

    def __str__(self) -> str:  # KeyError quotes its message otherwise
        return str(self.args[0]) if self.args else ""
