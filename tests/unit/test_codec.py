"""Record codec: row format and whole-file decoding."""

from datetime import date

import pytest

from checklist import codec
from checklist.errors import MalformedRecord
from checklist.models import ONCE, Task


def test_decode_three_field_row():
    """Contract: legacy 3-field rows decode unchecked."""
    task = codec.decode_row("buy-milk,2024-01-10,once")
    assert task == Task("buy-milk", date(2024, 1, 10), ONCE, False)


def test_decode_four_field_row():
    task = codec.decode_row("water-plants,2024-01-01,7,1")
    assert task.interval == 7
    assert task.checked is True


def test_encode_row_always_writes_checked():
    assert codec.encode_row(Task("buy-milk", date(2024, 1, 10))) == "buy-milk,2024-01-10,once,0"
    assert (
        codec.encode_row(Task("water", date(2024, 1, 1), interval=3, checked=True))
        == "water,2024-01-01,3,1"
    )


def test_round_trip(sample_tasks):
    """Contract: decode_file(encode_file(tasks)) == tasks."""
    assert codec.decode_file(codec.encode_file(sample_tasks)) == sample_tasks


def test_encode_file_keeps_order(sample_tasks):
    lines = codec.encode_file(sample_tasks).decode().splitlines()
    assert [line.split(",")[0] for line in lines] == ["buy-milk", "water-plants", "file taxes"]


def test_encode_empty():
    assert codec.encode_file([]) == b""
    assert codec.decode_file(b"") == []


def test_decode_skips_blank_lines_and_header():
    data = b"task_name,due_date,interval,checked\n\nbuy-milk,2024-01-10,once,0\n\n"
    assert [t.name for t in codec.decode_file(data)] == ["buy-milk"]


def test_decode_skips_dash_separator():
    data = b"----------\nbuy-milk,2024-01-10,once\r\n"
    assert [t.name for t in codec.decode_file(data)] == ["buy-milk"]


def test_marker_only_skipped_when_first():
    """Boundary: a header in the middle of the file is a malformed row."""
    data = b"buy-milk,2024-01-10,once\ntask_name,due_date,interval\n"
    with pytest.raises(MalformedRecord) as exc:
        codec.decode_file(data)
    assert exc.value.line_no == 2


@pytest.mark.parametrize(
    "line,reason",
    [
        ("buy-milk,2024-01-10", "fields"),
        ("a,b,c,d,e", "fields"),
        ("buy-milk,2024-13-01,once", "date"),
        ("buy-milk,2024-1-5,once", "date"),
        ("buy-milk,2024-01-10,0", "positive"),
        ("buy-milk,2024-01-10,-3", "interval"),
        ("buy-milk,2024-01-10,weekly", "interval"),
        ("buy-milk,2024-01-10,once,maybe", "checked"),
        (",2024-01-10,once", "empty"),
    ],
)
def test_malformed_rows(line, reason):
    """Boundary: bad field count, date, interval or flag raise MalformedRecord."""
    with pytest.raises(MalformedRecord, match=reason):
        codec.decode_row(line, 3)


def test_malformed_record_identifies_line():
    data = b"buy-milk,2024-01-10,once\nbroken\n"
    with pytest.raises(MalformedRecord) as exc:
        codec.decode_file(data)
    assert exc.value.line_no == 2
    assert exc.value.line == "broken"
    assert "line 2" in str(exc.value)


def test_invalid_utf8_is_malformed():
    with pytest.raises(MalformedRecord, match="UTF-8"):
        codec.decode_file(b"\xff\xfe,2024-01-10,once\n")


def test_parse_interval():
    assert codec.parse_interval("once") is ONCE
    assert codec.parse_interval("ONCE") is ONCE
    assert codec.parse_interval("14") == 14
    with pytest.raises(ValueError):
        codec.parse_interval("0")


def test_validate_name_rejects_separator():
    with pytest.raises(ValueError, match="cannot contain"):
        codec.validate_name("milk, eggs")


@pytest.mark.parametrize(
    "sep", ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"]
)
def test_round_trip_names_with_unicode_line_breaks(sep):
    """Contract: only \\n ends a row; other splitlines() breaks stay inside the name."""
    tasks = [Task(f"a{sep}b", date(2024, 1, 1)), Task("next", date(2024, 1, 2), interval=2)]
    assert codec.decode_file(codec.encode_file(tasks)) == tasks


@pytest.mark.parametrize("text", ["٧", "７", "²"])
def test_parse_interval_rejects_non_ascii_digits(text):
    """Boundary: non-ASCII digits would be rewritten as ASCII on save."""
    with pytest.raises(ValueError, match="invalid interval"):
        codec.parse_interval(text)
    with pytest.raises(MalformedRecord):
        codec.decode_row(f"x,2024-01-01,{text}")
