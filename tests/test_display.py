from optimistic import from_resolved, push
from optimistic.utils.display import describe, format_payload
from optimistic.utils.ids import new_cell_id, snake_case


def test_describe_variants():
    assert describe(from_resolved(1)).plain == "✓ 1"
    assert describe(push(from_resolved(1), 3)).plain == "… 3 (fallback 1)"


def test_format_payload_truncates():
    text = format_payload("x" * 200, max_len=10)
    assert len(text) == 10
    assert text.endswith("…")


def test_ids():
    assert snake_case("Like Button!") == "like_button"
    assert new_cell_id("My Cell").startswith("my_cell_")
