"""
Unit tests for descriptor list editing helpers.
"""

from aroma_wheel import SearchIndex, add_descriptor, remove_descriptor, suggest, toggle_descriptor


def test_add_descriptor_trims() -> None:
    assert add_descriptor(["Cherry"], "  Green Apple ") == ["Cherry", "Green Apple"]


def test_add_descriptor_ignores_blank() -> None:
    assert add_descriptor(["Cherry"], "   ") == ["Cherry"]


def test_add_descriptor_ignores_duplicate() -> None:
    assert add_descriptor(["Cherry"], "Cherry ") == ["Cherry"]


def test_add_descriptor_keeps_custom_terms() -> None:
    assert add_descriptor([], "Grandma's Kitchen") == ["Grandma's Kitchen"]


def test_add_descriptor_does_not_mutate() -> None:
    tags = ["Cherry"]
    add_descriptor(tags, "Plum")
    assert tags == ["Cherry"]


def test_remove_descriptor() -> None:
    assert remove_descriptor(["Cherry", "Plum", "Cherry"], "Cherry") == ["Plum"]
    assert remove_descriptor(["Cherry"], "cherry") == ["Cherry"]


def test_toggle_descriptor() -> None:
    tags = toggle_descriptor([], "Vanilla")
    assert tags == ["Vanilla"]
    tags = toggle_descriptor(tags, "Cedar")
    assert tags == ["Vanilla", "Cedar"]
    assert toggle_descriptor(tags, "Vanilla") == ["Cedar"]


def test_suggest_skips_entered_tags(index: SearchIndex) -> None:
    assert suggest(index, ["Cherry", "Sour Cherry"], "cherry") == ["Black Cherry", "Red Cherry"]
    assert suggest(index, [], "") == []
