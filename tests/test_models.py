"""Tests for Urgency, Task and the line encoding."""

import pytest

from tasklist.exceptions import TaskDecodeError
from tasklist.models import Task, Urgency, encode_tasks, split_lines


class TestUrgency:
    """Tests for Urgency enum."""

    def test_total_order(self):
        assert Urgency.LOW < Urgency.MEDIUM < Urgency.HIGH
        assert Urgency.HIGH > Urgency.LOW
        assert Urgency.MEDIUM <= Urgency.MEDIUM
        assert sorted([Urgency.HIGH, Urgency.LOW, Urgency.MEDIUM]) == [
            Urgency.LOW,
            Urgency.MEDIUM,
            Urgency.HIGH,
        ]

    def test_canonical_text(self):
        assert [str(u) for u in Urgency] == ["Low", "Medium", "High"]

    def test_from_text_valid(self):
        assert Urgency.from_text("Low") is Urgency.LOW
        assert Urgency.from_text("Medium") is Urgency.MEDIUM
        assert Urgency.from_text("High") is Urgency.HIGH

    @pytest.mark.parametrize("value", ["low", "HIGH", "medium ", "", "Urgent"])
    def test_from_text_is_case_sensitive(self, value):
        with pytest.raises(ValueError, match="Invalid urgency"):
            Urgency.from_text(value)

    def test_from_token_accepts_short_and_long_forms(self):
        assert Urgency.from_token("l") is Urgency.LOW
        assert Urgency.from_token("low") is Urgency.LOW
        assert Urgency.from_token("m") is Urgency.MEDIUM
        assert Urgency.from_token("medium") is Urgency.MEDIUM
        assert Urgency.from_token("h") is Urgency.HIGH
        assert Urgency.from_token("high") is Urgency.HIGH

    @pytest.mark.parametrize("token", ["L", "LOW", "High", "urgent", ""])
    def test_from_token_rejects_others(self, token):
        assert Urgency.from_token(token) is None


class TestTaskEncoding:
    """Tests for Task.encode / Task.decode."""

    def test_encode(self):
        task = Task(title="Buy milk", content="2 liters", urgency=Urgency.LOW)
        assert task.encode() == "Low|Buy milk: 2 liters"

    def test_decode(self):
        task = Task.decode("High|Pay rent: due Friday")
        assert task == Task(title="Pay rent", content="due Friday", urgency=Urgency.HIGH)

    def test_decode_splits_on_first_separators(self):
        task = Task.decode("Medium|Call: mom: about | dinner")
        assert task.title == "Call"
        assert task.content == "mom: about | dinner"
        assert task.urgency is Urgency.MEDIUM

    def test_decode_empty_content(self):
        task = Task.decode("Low|Nap: ")
        assert task.title == "Nap"
        assert task.content == ""

    def test_decode_missing_pipe(self):
        with pytest.raises(TaskDecodeError, match="missing '\\|' separator") as exc_info:
            Task.decode("Low Buy milk: 2 liters", line_number=3)
        assert exc_info.value.line_number == 3
        assert exc_info.value.line == "Low Buy milk: 2 liters"

    def test_decode_missing_title_separator(self):
        with pytest.raises(TaskDecodeError, match="missing ': ' separator"):
            Task.decode("Low|Buy milk:2 liters")

    def test_decode_non_canonical_urgency(self):
        with pytest.raises(TaskDecodeError, match="Invalid urgency 'low'") as exc_info:
            Task.decode("low|Buy milk: 2 liters", line_number=1)
        assert exc_info.value.to_dict()["details"]["line_number"] == 1

    def test_immutability(self):
        task = Task(title="Test", content="", urgency=Urgency.LOW)
        with pytest.raises(AttributeError):
            task.title = "Changed"


class TestEncodingProblem:
    """Tests for Task.encoding_problem."""

    def test_clean_task(self):
        task = Task(title="Buy milk", content="2 liters: semi-skimmed | organic", urgency=Urgency.LOW)
        assert task.encoding_problem() is None

    @pytest.mark.parametrize(
        ("title", "content", "message"),
        [
            ("", "x", "Title cannot be empty"),
            ("a|b", "x", "Title cannot contain '|'"),
            ("Note: this", "x", "Title cannot contain ': '"),
            ("two\nlines", "x", "Title cannot contain line breaks"),
            ("ok", "two\r\nlines", "Content cannot contain line breaks"),
        ],
    )
    def test_problems(self, title, content, message):
        task = Task(title=title, content=content, urgency=Urgency.MEDIUM)
        assert task.encoding_problem() == message


class TestFileText:
    """Tests for whole-file encoding and decoding."""

    def test_round_trip(self):
        tasks = [
            Task(title="Buy milk", content="2 liters", urgency=Urgency.LOW),
            Task(title="Pay rent", content="due Friday: no excuses", urgency=Urgency.HIGH),
            Task(title="Buy milk", content="again", urgency=Urgency.MEDIUM),
            Task(title="a:b", content="pipes | are fine here", urgency=Urgency.LOW),
        ]
        assert [Task.decode(line) for line in split_lines(encode_tasks(tasks))] == tasks

    def test_encode_has_no_trailing_newline(self):
        tasks = [
            Task(title="A", content="1", urgency=Urgency.LOW),
            Task(title="B", content="2", urgency=Urgency.HIGH),
        ]
        assert encode_tasks(tasks) == "Low|A: 1\nHigh|B: 2"

    def test_encode_empty(self):
        assert encode_tasks([]) == ""
        assert split_lines("") == []

    def test_split_lines_tolerates_trailing_newline_and_crlf(self):
        assert split_lines("a\r\nb\n") == ["a", "b"]

    def test_split_lines_keeps_blank_lines(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]
