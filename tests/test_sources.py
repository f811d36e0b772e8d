from __future__ import annotations

from script_completion.completion import NamespaceSuggestionSource, ReplaceRange

from fakes import NAMESPACE


def make_source() -> NamespaceSuggestionSource:
    return NamespaceSuggestionSource(NAMESPACE)


def labels(source: NamespaceSuggestionSource, text: str, caret: int) -> list[str]:
    found = source.get_suggestions_for_expression(text, caret)
    return [info.name for info in found.candidates]


def test_member_access_lists_members_in_declaration_order() -> None:
    found = make_source().get_suggestions_for_expression("keyboard.", 9)

    assert [info.name for info in found.candidates] == [
        "getKeyDown",
        "getPressed",
        "setKeyDown",
    ]
    assert found.active_token == ""
    assert found.replace_range == ReplaceRange(9, 0)
    assert found.candidates[0].description == "True while the key is held"


def test_prefix_filters_case_insensitively_and_sets_range() -> None:
    found = make_source().get_suggestions_for_expression("x = mouse.DEL", 13)

    assert [info.name for info in found.candidates] == ["deltaX", "deltaY"]
    assert found.active_token == "DEL"
    assert found.replace_range == ReplaceRange(10, 3)


def test_top_level_names_need_a_prefix() -> None:
    source = make_source()

    assert labels(source, "", 0) == []
    assert labels(source, "if ", 3) == []
    assert labels(source, "m", 1) == ["mouse"]


def test_unknown_or_leaf_parents_yield_nothing() -> None:
    source = make_source()

    assert labels(source, "joystick.", 9) == []
    assert labels(source, "keyboard.getKeyDown.", 20) == []
    assert labels(source, "1.", 2) == []


def test_suggestions_use_text_before_caret_only() -> None:
    assert labels(make_source(), "mouse.deltaX", 7) == ["deltaX", "deltaY"]


def test_keywords_complete_at_top_level_only() -> None:
    source = NamespaceSuggestionSource.with_python_keywords(NAMESPACE)

    assert "while" in labels(source, "wh", 2)
    assert labels(source, "keyboard.wh", 11) == []


def test_beginning_of_expression_positions() -> None:
    source = make_source()

    assert source.is_beginning_of_expression("foo.", 4)
    assert source.is_beginning_of_expression("foo.b", 5)
    assert source.is_beginning_of_expression("x = k", 5)
    assert not source.is_beginning_of_expression("foo", 3)
    assert not source.is_beginning_of_expression("foo.ba", 6)
    assert not source.is_beginning_of_expression("", 0)
    assert not source.is_beginning_of_expression("1.", 2)
    assert not source.is_beginning_of_expression("x = 1", 5)


def test_delimiters() -> None:
    source = make_source()

    for char in " \t\n()[],=+:":
        assert source.is_end_of_expression_delimiter(char)
    for char in "a_.9":
        assert not source.is_end_of_expression_delimiter(char)
