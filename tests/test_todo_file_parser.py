"""Parsing and serialization of the flat TODO file format."""

from datetime import timedelta
from pathlib import Path

import pytest

from infrastructure.todo_file_parser import TodoFileParser, TodoParseError

CANONICAL = """TODO(*): Write report
    TODO(x): Collect numbers
    TODO(*): Draft summary
        TODO(): Ask Sam for review
TODO(): Water plants
<--->
DONE(2024-03-01 09:30 +0000): Renew passport
    DONE(2024-02-27 18:05 +0200): Book appointment
"""


def test_parse_builds_both_lists():
    active, completed = TodoFileParser.parse_text(CANONICAL)

    assert [item.text for item in active.items] == [
        "Write report",
        "Collect numbers",
        "Draft summary",
        "Ask Sam for review",
        "Water plants",
    ]
    assert active.items[0].children == [1, 2]
    assert active.items[3].parent == 2
    assert active.items[0].active_count == 2
    assert active.items[1].done is True
    active.validate()

    assert len(completed) == 2
    assert completed.items[1].parent == 0
    assert all(item.done for item in completed.items)
    stamp = completed.items[1].timestamp
    assert (stamp.year, stamp.month, stamp.day, stamp.hour, stamp.minute) == (2024, 2, 27, 18, 5)
    assert stamp.utcoffset() == timedelta(hours=2)
    completed.validate()


def test_serialize_reproduces_canonical_text():
    active, completed = TodoFileParser.parse_text(CANONICAL)
    assert TodoFileParser.serialize(active, completed) == CANONICAL


def test_active_marker_is_recomputed():
    active, completed = TodoFileParser.parse_text("TODO(): A\n    TODO(): a1\nTODO(*): B\n<--->\n")
    assert active.items[0].active_count == 1
    assert active.items[2].active_count == 0
    assert TodoFileParser.serialize(active, completed) == "TODO(*): A\n    TODO(): a1\nTODO(): B\n<--->\n"


def test_empty_content():
    active, completed = TodoFileParser.parse_text("")
    assert active.is_empty() and completed.is_empty()
    assert TodoFileParser.serialize(active, completed) == "<--->\n"


def test_separator_is_optional_without_completed_items():
    active, completed = TodoFileParser.parse_text("TODO(): A\n")
    assert len(active) == 1
    assert completed.is_empty()


@pytest.mark.parametrize(
    "content, line_no, reason",
    [
        ("TODO(): A\nnot a task\n", 2, "invalid format"),
        ("TODO(): A\n   TODO(): odd indent\n", 2, "invalid format"),
        ("TODO(): A\n        TODO(): too deep\n", 2, "indentation jumps more than one level"),
        ("DONE(2024-03-01 09:30 +0000): early\n<--->\n", 1, "DONE item before the separator"),
        ("<--->\nTODO(): late\n", 2, "TODO item after the separator"),
        ("<--->\n<--->\n", 2, "duplicate separator"),
        ("<--->\nDONE(2024-13-45 09:30 +0000): bad\n", 2, "invalid timestamp '2024-13-45 09:30 +0000'"),
        ("TODO(x): A\n    TODO(): a1\n", 1, "finished item has unfinished subtasks"),
    ],
)
def test_parse_errors_carry_line_numbers(content, line_no, reason):
    with pytest.raises(TodoParseError) as excinfo:
        TodoFileParser.parse_text(content, source="tasks.txt")
    err = excinfo.value
    assert err.path == "tasks.txt"
    assert err.line_no == line_no
    assert err.reason == reason
    assert str(err) == f"tasks.txt:{line_no}: {reason}"


def test_parse_file_reports_path(tmp_path: Path):
    path = tmp_path / "TODO"
    path.write_text("TODO(): fine\ngarbage\n", encoding="utf-8")
    with pytest.raises(TodoParseError) as excinfo:
        TodoFileParser.parse(path)
    assert excinfo.value.path == str(path)
    assert excinfo.value.line_no == 2


def test_unicode_text_survives(tmp_path: Path):
    path = tmp_path / "TODO"
    path.write_text("TODO(): Купить хлеб 🍞\n<--->\n", encoding="utf-8")
    active, _ = TodoFileParser.parse(path)
    assert active.items[0].text == "Купить хлеб 🍞"


def test_invalid_utf8_reports_line(tmp_path: Path):
    path = tmp_path / "TODO"
    path.write_bytes(b"TODO(): ok\nTODO(): bad \xff\xfe\n<--->\n")
    with pytest.raises(TodoParseError) as excinfo:
        TodoFileParser.parse(path)
    assert excinfo.value.line_no == 2
    assert excinfo.value.reason == "invalid UTF-8"
