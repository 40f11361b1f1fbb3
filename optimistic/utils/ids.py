from __future__ import annotations

"""optimistic.utils.ids
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Tiny helpers for identifier formatting.

Cells get a readable default name so transition events and log lines can be
told apart without the caller naming every cell.
"""

import re
import uuid

__all__ = ["snake_case", "new_cell_id"]

_PATTERN = re.compile(r"[^a-zA-Z0-9]+")


def snake_case(text: str) -> str:  # noqa: D401
    """Return *text* converted to ``snake_case``.

    * non‑alphanumeric chars become ``_``
    * multiple underscores are squeezed
    * leading/trailing underscores are stripped
    * everything lower‑cased
    """

    s = _PATTERN.sub("_", text)
    s = re.sub(r"_+", "_", s)
    return s.strip("_").lower()


def new_cell_id(prefix: str = "cell") -> str:
    """Return ``<prefix>_<8 hex chars>``, e.g. ``cell_1a2b3c4d``."""
    return f"{snake_case(prefix) or 'cell'}_{uuid.uuid4().hex[:8]}"
