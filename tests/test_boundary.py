from __future__ import annotations

import pytest

from script_completion.completion import (
    TriggerPolicy,
    UnknownTriggerPolicyError,
    evaluate_policy,
    is_beginning_of_expression,
    is_end_of_expression_delimiter,
    is_stepping_out_of_expression,
)

from fakes import ScriptedSource


def test_beginning_fires_when_next_char_arrives_at_beginning() -> None:
    source = ScriptedSource(beginnings=[("foo.b", 5)])

    assert is_beginning_of_expression(source, "foo.", 4, "b") is True
    assert source.beginning_checks == [("foo.", 4), ("foo.b", 5)]


def test_beginning_fires_when_already_at_beginning() -> None:
    source = ScriptedSource(beginnings=[("foo.", 4)])

    assert is_beginning_of_expression(source, "foo.", 4, "b") is True
    assert source.beginning_checks == [("foo.", 4)]


def test_beginning_false_when_neither_position_qualifies() -> None:
    source = ScriptedSource(beginnings=[("foo.", 3)])

    assert is_beginning_of_expression(source, "foo.", 4, "b") is False


def test_lookahead_inserts_next_char_at_caret_not_end() -> None:
    source = ScriptedSource(beginnings=[("a.xb", 3)])

    assert is_beginning_of_expression(source, "a.b", 2, "x") is True


def test_missing_text_is_treated_as_empty() -> None:
    source = ScriptedSource(beginnings=[("k", 1)])

    assert is_beginning_of_expression(source, None, 0, "k") is True


def test_delimiter_classification_delegates_to_source() -> None:
    source = ScriptedSource(delimiters=" )")

    assert is_end_of_expression_delimiter(source, " ") is True
    assert is_end_of_expression_delimiter(source, ")") is True
    assert is_end_of_expression_delimiter(source, "x") is False


def test_stepping_out_is_inverse_of_beginning() -> None:
    source = ScriptedSource(beginnings=[("foo.", 4)])

    assert is_stepping_out_of_expression(source, "foo.", 4) is False
    assert is_stepping_out_of_expression(source, "foo.", 2) is True


def test_evaluate_policy_dispatches_each_policy() -> None:
    source = ScriptedSource(beginnings=[("foo.b", 5)], delimiters=" ")

    assert evaluate_policy(TriggerPolicy.OPEN_ON_BEGINNING, source, "foo.", 4, "b")
    assert evaluate_policy(TriggerPolicy.CLOSE_ON_DELIMITER, source, "foo.", 4, " ")
    assert not evaluate_policy(TriggerPolicy.CLOSE_ON_DELIMITER, source, "foo.", 4, "b")
    assert evaluate_policy(TriggerPolicy.CLOSE_ON_STEPPING_OUT, source, "foo.", 4)


def test_keystroke_policies_need_a_character() -> None:
    source = ScriptedSource(beginnings=[("foo.", 4)], delimiters=" ")

    assert not evaluate_policy(TriggerPolicy.OPEN_ON_BEGINNING, source, "foo.", 4)
    assert not evaluate_policy(TriggerPolicy.CLOSE_ON_DELIMITER, source, "foo.", 4)


def test_unknown_policy_is_rejected() -> None:
    with pytest.raises(UnknownTriggerPolicyError):
        evaluate_policy("bogus", ScriptedSource(), "", 0, "x")  # type: ignore[arg-type]
