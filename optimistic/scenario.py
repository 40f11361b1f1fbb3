from __future__ import annotations

"""Replayable scenarios: a scripted sequence of container transitions.

A scenario is plain data (usually loaded from YAML, see
:mod:`optimistic.yaml_loader`) describing an initial resolved value and the
transitions applied to it.  Replaying it against an :class:`OptimisticCell`
yields one :class:`ReplayRecord` per step, which makes the rollback rules easy
to eyeball::

    Scenario.model_validate({
        "initial": 1,
        "steps": [{"push": 2}, {"push": 3}, "revert"],
    }).replay()[-1].value   # 1
"""

from dataclasses import dataclass
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, model_validator

from optimistic.combiners import get_combiner, updater
from optimistic.core.cell import OptimisticCell
from optimistic.core.outcome import Err, Ok, Outcome
from optimistic.core.value import OptimisticValue, Pending, state_name, unwrap
from optimistic.errors import ScenarioError
from optimistic.utils.logging import log

__all__ = ["Step", "Scenario", "ReplayRecord", "OutcomeArgs", "UpdateArgs"]

Op = Literal["push", "update", "force", "revert", "resolve", "try"]
_NO_ARGS = ("force", "revert")

# fields each op reads; anything else given alongside it is rejected
_ARGS_BY_OP = {
    "push": {"value"},
    "update": {"update"},
    "force": set(),
    "revert": set(),
    "resolve": {"outcome"},
    "try": {"outcome", "combiner"},
}


class OutcomeArgs(BaseModel):
    """Exactly one of ``ok`` / ``error``; ``ok: null`` is a valid success."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: Any = None
    error: Any = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "OutcomeArgs":
        given = self.model_fields_set & {"ok", "error"}
        if len(given) != 1:
            raise ValueError("exactly one of 'ok' or 'error' is required")
        return self

    def to_outcome(self) -> Outcome[Any, Any]:
        if "ok" in self.model_fields_set:
            return Ok(self.ok)
        return Err(self.error)


class UpdateArgs(BaseModel):  # noqa: D101
    model_config = ConfigDict(extra="forbid", frozen=True)

    combiner: str
    arg: Any = None


class Step(BaseModel):
    """One transition.

    Accepts the compact YAML form (``{push: 2}``, ``{update: {...}}``,
    ``"revert"``) as well as the explicit ``{op: ..., ...}`` form.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    op: Op
    value: Any = None
    update: UpdateArgs | None = None
    outcome: OutcomeArgs | None = None
    combiner: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_compact(cls, data: Any) -> Any:
        if isinstance(data, str):
            data = {data: None}
        if not isinstance(data, dict) or "op" in data:
            return data
        if len(data) != 1:
            raise ValueError(
                f"a step must be a single-key mapping such as {{push: 2}}, got keys {sorted(data)}"
            )
        ((op, payload),) = data.items()
        if op == "push":
            return {"op": op, "value": payload}
        if op == "update":
            return {"op": op, "update": payload}
        if op in _NO_ARGS:
            if payload not in (None, {}):
                raise ValueError(f"'{op}' takes no arguments")
            return {"op": op}
        if op == "resolve":
            return {"op": op, "outcome": payload}
        if op == "try":
            if not isinstance(payload, dict):
                raise ValueError("'try' expects a mapping with 'combiner' and 'ok' or 'error'")
            if "arg" in payload:
                raise ValueError("'try' takes its argument from 'ok', not 'arg'")
            rest = {k: v for k, v in payload.items() if k != "combiner"}
            return {"op": op, "outcome": rest, "combiner": payload.get("combiner")}
        # unknown op – let the Literal check report it
        return {"op": op}

    @model_validator(mode="after")
    def _check_args(self) -> "Step":
        given = self.model_fields_set - {"op"}
        unused = given - _ARGS_BY_OP[self.op]
        if unused:
            raise ValueError(f"'{self.op}' does not take {sorted(unused)}")
        missing = _ARGS_BY_OP[self.op] - given
        if missing:
            raise ValueError(f"'{self.op}' requires {sorted(missing)}")
        if self.op == "update" and self.update is None:
            raise ValueError("'update' requires a combiner")
        if self.op in ("resolve", "try") and self.outcome is None:
            raise ValueError(f"'{self.op}' requires 'ok' or 'error'")
        if self.op == "try" and not self.combiner:
            raise ValueError("'try' requires a combiner")
        return self

    # ------------------------------------------------------------------ #
    def run(self, cell: OptimisticCell[Any]) -> OptimisticValue[Any]:
        """Apply this step to *cell* and return the new container."""
        match self.op:
            case "push":
                return cell.push(self.value)
            case "update":
                return cell.update(updater(self.update.combiner, self.update.arg))
            case "force":
                return cell.force()
            case "revert":
                return cell.revert()
            case "resolve":
                return cell.resolve(self.outcome.to_outcome())
            case "try":
                return cell.try_(self.outcome.to_outcome(), get_combiner(self.combiner))
        raise ValueError(f"unknown op {self.op!r}")  # pragma: no cover – Literal guards this


@dataclass(slots=True)
class ReplayRecord:  # noqa: D101
    index: int
    op: str
    state: str
    value: Any
    fallback: Any = None  # only meaningful while pending

    @classmethod
    def capture(cls, index: int, op: str, c: OptimisticValue[Any]) -> "ReplayRecord":
        fallback = c.fallback if isinstance(c, Pending) else None
        return cls(index=index, op=op, state=state_name(c), value=unwrap(c), fallback=fallback)


class Scenario(BaseModel):  # noqa: D101
    model_config = ConfigDict(extra="forbid")

    name: str = "Scenario"
    initial: Any
    steps: List[Step] = []

    def replay(self) -> List[ReplayRecord]:
        """Run every step on a fresh cell and return the trace (init first)."""
        cell: OptimisticCell[Any] = OptimisticCell(self.initial, name=self.name)
        records = [ReplayRecord.capture(0, "init", cell.current)]
        for idx, step in enumerate(self.steps, start=1):
            try:
                after = step.run(cell)
            except Exception as e:  # noqa: BLE001
                raise ScenarioError(f"{self.name}: step {idx} ({step.op}) failed: {e}") from e
            records.append(ReplayRecord.capture(idx, step.op, after))
        log.info("replayed '%s' (%d steps) → %s", self.name, len(self.steps), records[-1].state)
        return records
