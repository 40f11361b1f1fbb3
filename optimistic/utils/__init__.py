# This file makes the 'utils' directory a Python package.

"""Optimistic utilities."""

from .ids import snake_case, new_cell_id

__all__ = [
    "snake_case",
    "new_cell_id",
]
