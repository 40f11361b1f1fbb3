import pytest

from optimistic import UnknownCombinerError, get_combiner, list_combiners, register_combiner, updater


def test_builtins_registered():
    names = list_combiners()
    for n in ("replace", "add", "append", "prepend", "merge"):
        assert n in names
    assert get_combiner("prepend")(["a"], "b") == ["b", "a"]
    assert get_combiner("append")(["a"], "b") == ["a", "b"]
    assert get_combiner("merge")({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}
    assert get_combiner("replace")(1, 2) == 2
    assert get_combiner("add")(1, 2) == 3


def test_register_as_decorator():
    @register_combiner("times")
    def _times(base, x):
        return base * x

    assert get_combiner("times") is _times
    assert updater("times", 3)(4) == 12


def test_import_path_lookup():
    assert get_combiner("operator:sub")(5, 2) == 3


def test_unknown_combiner():
    with pytest.raises(UnknownCombinerError, match="not found"):
        get_combiner("nope")
    with pytest.raises(KeyError):
        get_combiner("nope")
    with pytest.raises(UnknownCombinerError, match="could not be imported"):
        get_combiner("no_such_module_xyz:fn")
    with pytest.raises(UnknownCombinerError, match="not callable"):
        get_combiner("math:pi")
