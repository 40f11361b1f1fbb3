import textwrap
from pathlib import Path

import pytest

from optimistic import ScenarioError
from optimistic.yaml_loader import load_scenario, parse_scenario

YAML = textwrap.dedent(
    """
    name: Like button
    initial: 1
    steps:
      - push: 2
      - push: 3
      - revert
      - update: {combiner: add, arg: 10}
      - resolve: {ok: 42}
      - try: {combiner: add, error: timeout}
      - push: 50
      - force
    """
)


def test_load_scenario(tmp_path):
    path = tmp_path / "likes.yml"
    path.write_text(YAML)

    sc = load_scenario(path)
    assert sc.name == "Like button"
    assert len(sc.steps) == 8

    values = [r.value for r in sc.replay()]
    assert values == [1, 2, 3, 1, 11, 42, 42, 50, 50]


def test_name_defaults_to_file_stem(tmp_path):
    path = tmp_path / "counter_demo.yaml"
    path.write_text("initial: 0\nsteps: []\n")
    assert load_scenario(path).name == "counter_demo"


def test_missing_file(tmp_path):
    with pytest.raises(ScenarioError, match="cannot read"):
        load_scenario(tmp_path / "nope.yml")


def test_bad_yaml(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("steps: [unclosed\n")
    with pytest.raises(ScenarioError, match="invalid YAML"):
        load_scenario(path)


def test_invalid_scenario():
    with pytest.raises(ScenarioError, match="invalid scenario"):
        parse_scenario({"steps": [{"push": 1}]})  # no initial
    with pytest.raises(ScenarioError, match="top level"):
        parse_scenario(["push"])


DOCUMENTED = textwrap.dedent(
    """
    name: Like button
    initial: 1
    steps:
      - push: 2
      - push: 3
      - revert: {}
      - update: {combiner: add, arg: 10}
      - resolve: {ok: 42}
      - try: {error: "timeout", combiner: add}
      - force: {}
    """
)


def test_documented_format_loads(tmp_path):
    path = tmp_path / "documented.yml"
    path.write_text(DOCUMENTED)
    values = [r.value for r in load_scenario(path).replay()]
    assert values == [1, 2, 3, 1, 11, 42, 42, 42]


def test_shipped_like_button_example():
    path = Path(__file__).resolve().parents[1] / "examples" / "01_like_button" / "scenario.yml"
    recs = load_scenario(path).replay()
    assert [r.value for r in recs] == [41, 42, 43, 41, 42, 42]
    assert recs[-1].state == "resolved"
