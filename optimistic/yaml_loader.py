from __future__ import annotations
"""Minimal YAML → Scenario loader.

Example YAML:

```yaml
name: Like button
initial: 1
steps:
  - push: 2
  - push: 3
  - revert            # bare names for argument-less ops
  - update: {combiner: add, arg: 10}
  - resolve: {ok: 42}
  - try: {combiner: add, error: timeout}
```

Usage:
    from optimistic.yaml_loader import load_scenario
    records = load_scenario("likes.yml").replay()

Combiner names are looked up in :mod:`optimistic.combiners` (or imported when
written as ``"pkg.mod:func"``) at replay time, not at load time.
"""
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from optimistic.errors import ScenarioError
from optimistic.scenario import Scenario

__all__ = ["load_scenario", "parse_scenario"]


def parse_scenario(data: Any, source: str = "<data>") -> Scenario:  # noqa: D401
    """Validate already-parsed YAML/JSON *data* into a :class:`Scenario`."""
    if not isinstance(data, dict):
        raise ScenarioError(f"{source}: top level must be a mapping, got {type(data).__name__}")
    data = {**data}
    data.setdefault("name", Path(source).stem if source != "<data>" else "Scenario")
    try:
        return Scenario.model_validate(data)
    except ValidationError as e:
        raise ScenarioError(f"{source}: invalid scenario\n{e}") from e


def load_scenario(path: str | Path) -> Scenario:  # noqa: D401
    """Load YAML file at *path* into a Scenario."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScenarioError(f"cannot read {path}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ScenarioError(f"{path}: invalid YAML: {e}") from e
    return parse_scenario(data, source=str(path))
