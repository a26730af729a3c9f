"""Tests for command dispatch, pipelines and the text helpers."""

import pytest
from attrs.exceptions import NotCallableError

from textquery.domain.commands import (
    EndsWithText,
    GTEByText,
    Limit,
    LTEByText,
    OrderByTextAsc,
    OrderByTextDesc,
    StartsWithText,
    compare_text,
    create_pipeline,
    execute_all,
    execute_command,
    parse_integer,
)
from tests.fixtures.models import make_nodes, texts_of


class TestCompareText:
    """Test the text-or-number comparison rule."""

    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [
            ("2", "10", -1),
            ("10", "2", 1),
            ("-5", "-5", 0),
            (" 7", "7 ", 0),
            ("-1", "0", -1),
            ("abc", "abd", -1),
            ("10", "abc", -1),
            ("b", "", 1),
            ("-", "1", -1),
        ],
    )
    def test_text_or_number_rule(self, first, second, expected):
        """Test numeric comparison when both sides are integers."""
        assert compare_text(first, second) == expected

    def test_plus_sign_is_not_numeric(self):
        """Test a leading plus sign disables numeric comparison."""
        # "+9" falls back to strings, where "+" sorts before digits
        assert compare_text("+9", "10") == -1


class TestParseInteger:
    """Test strict integer parsing for threshold filters."""

    @pytest.mark.parametrize(
        ("text", "value"),
        [("0", 0), ("-12", -12), ("+3", 3), ("٥", 5), ("-१२", -12)],
    )
    def test_valid_literals(self, text, value):
        """Test signed and unicode-digit literals parse."""
        assert parse_integer(text) == value

    @pytest.mark.parametrize("text", ["", "-", "1e3", " 1", "0x1f"])
    def test_invalid_literals(self, text):
        """Test malformed literals raise ValueError."""
        with pytest.raises(ValueError):
            parse_integer(text)


class TestExecuteCommand:
    """Test single-command dispatch."""

    def test_dispatches_to_command(self, extract_text, fruits):
        """Test a command is applied to the collection."""
        execute_command(EndsWithText(extract_text, "o"), fruits)

        assert texts_of(fruits) == ["avocado"]

    def test_curried_form(self, extract_text, fruits):
        """Test partial application yields a reusable callable."""
        run = execute_command(OrderByTextDesc(extract_text))

        run(fruits)

        assert texts_of(fruits) == ["banana", "avocado", "apple"]

    def test_unknown_command_raises(self, letters):
        """Test unsupported objects raise without mutating."""
        with pytest.raises(TypeError, match="Unsupported command"):
            execute_command(object(), letters)

        assert texts_of(letters) == ["a", "b", "c", "d"]

    def test_logs_execution(self, extract_text, numbers, log_records):
        """Test execution logs structured counts."""
        execute_command(GTEByText(extract_text, 5), numbers)

        record = log_records[-1].record
        assert record["message"] == "Executed command"
        assert record["extra"]["command"] == "GTEByText"
        assert record["extra"]["removed_count"] == 2


class TestPipelines:
    """Test running several commands against one collection."""

    def test_execute_all_runs_left_to_right(self, extract_text):
        """Test commands chain in the given order."""
        nodes = make_nodes("12", "4", "30", "8", "15", "1")

        execute_all(
            [
                GTEByText(extract_text, 4),
                LTEByText(extract_text, 20),
                OrderByTextDesc(extract_text),
                Limit(2, index=1),
            ],
            nodes,
        )

        assert texts_of(nodes) == ["12", "8"]

    def test_order_of_commands_matters(self, extract_text):
        """Test reordering commands changes the result."""
        first = make_nodes("c", "a", "b")
        second = list(first)

        execute_all([OrderByTextAsc(extract_text), Limit(1)], first)
        execute_all([Limit(1), OrderByTextAsc(extract_text)], second)

        assert texts_of(first) == ["a"]
        assert texts_of(second) == ["c"]

    def test_create_pipeline_is_reusable(self, extract_text):
        """Test one pipeline can run on several collections."""
        pipeline = create_pipeline(
            StartsWithText(extract_text, "a"),
            OrderByTextAsc(extract_text),
        )
        one = make_nodes("avocado", "kiwi", "apple")
        two = make_nodes("apricot", "acai")

        assert pipeline(one) is None
        pipeline(two)

        assert texts_of(one) == ["apple", "avocado"]
        assert texts_of(two) == ["acai", "apricot"]

    def test_empty_pipeline_is_no_op(self, letters):
        """Test a pipeline without commands changes nothing."""
        original = list(letters)

        create_pipeline()(letters)

        assert letters == original

    def test_never_introduces_elements(self, extract_text):
        """Test results only contain input elements."""
        nodes = make_nodes("5", "1", "3", "9")
        original_ids = {id(node) for node in nodes}

        create_pipeline(
            OrderByTextDesc(extract_text),
            LTEByText(extract_text, 5),
            Limit(5),
        )(nodes)

        assert {id(node) for node in nodes} <= original_ids


class TestCommandConstruction:
    """Test command construction and validation."""

    def test_commands_are_frozen_value_objects(self, extract_text):
        """Test commands compare by value."""
        assert StartsWithText(extract_text, "a") == StartsWithText(extract_text, "a")
        assert Limit(3, index=1) != Limit(3)

    def test_extractor_must_be_callable(self):
        """Test a non-callable extractor is rejected."""
        with pytest.raises(NotCallableError):
            OrderByTextAsc("text")

    def test_threshold_must_be_integer(self, extract_text):
        """Test a string threshold is rejected."""
        with pytest.raises(TypeError):
            GTEByText(extract_text, "5")

    def test_prefix_must_be_string(self, extract_text):
        """Test a non-string prefix is rejected."""
        with pytest.raises(TypeError):
            StartsWithText(extract_text, None)
