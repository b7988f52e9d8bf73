import pytest
from pydantic import ValidationError

from policycheck.errors import ParseError
from policycheck.models import Policy, Record, ValidationMode
from policycheck.records import (
    count_valid,
    format_record,
    load_records,
    parse_record,
    validate_count,
    validate_position,
)


def test_parse_record():
    parsed = parse_record("1-3 a: abcde")
    assert parsed == Record(policy=Policy(low=1, high=3, target="a"), subject="abcde")


def test_parse_record_strips_newline():
    assert parse_record("1-3 a: abcde\n").subject == "abcde"


@pytest.mark.parametrize("line", ["1-3 a: abcde", "2-9 c: ccccccccc", "10-12 z: zzzzzzzzzzzzz"])
def test_format_record_round_trip(line):
    assert format_record(parse_record(line)) == line


@pytest.mark.parametrize("record", [
    Record(policy=Policy(low=1, high=3, target="a"), subject="abcde"),
    Record(policy=Policy(low=0, high=0, target="-"), subject="-"),
    Record(policy=Policy(low=7, high=2, target=":"), subject="a:b-c"),
    Record(policy=Policy(low=1, high=2, target="\u00e9"), subject="caf\u00e9"),
])
def test_parse_record_round_trip(record):
    assert parse_record(format_record(record)) == record


@pytest.mark.parametrize("target", [" ", "\t", "ab", ""])
def test_policy_rejects_unparseable_target(target):
    with pytest.raises(ValidationError):
        Policy(low=1, high=2, target=target)


@pytest.mark.parametrize("subject", ["a b", "abc\n", " ", ""])
def test_record_rejects_unparseable_subject(subject):
    with pytest.raises(ValidationError):
        Record(policy=Policy(low=1, high=2, target="a"), subject=subject)


def test_record_is_immutable():
    record = parse_record("1-3 a: abcde")
    with pytest.raises(ValidationError):
        record.subject = "other"


@pytest.mark.parametrize("line", [
    "abc",
    "a-3 a: abcde",
    "1-3 a abcde",
    "1-3 a: ",
    "1 a: abcde",
    "1-3 ab: abcde",
    "\u0661-3 a: abcde",
    "1-\uff13 a: abcde",
    "",
])
def test_parse_record_malformed(line):
    with pytest.raises(ParseError):
        parse_record(line)


def test_validate_count():
    assert validate_count(parse_record("1-3 a: abcde"))
    assert not validate_count(parse_record("1-3 b: cdefg"))
    assert validate_count(parse_record("2-9 c: ccccccccc"))


def test_validate_count_bounds_inclusive():
    assert validate_count(parse_record("2-3 a: aaa"))
    assert validate_count(parse_record("2-3 a: aab"))
    assert not validate_count(parse_record("2-3 a: aaaa"))


def test_validate_position():
    assert validate_position(parse_record("1-3 a: abcde"))
    assert not validate_position(parse_record("1-3 b: cdefg"))
    assert not validate_position(parse_record("2-9 c: ccccccccc"))


def test_validate_position_out_of_range():
    # position 5 lies past the subject and never matches
    assert validate_position(parse_record("1-5 a: abc"))
    assert not validate_position(parse_record("0-5 a: abc"))


def test_load_records_aborts_on_malformed_line():
    with pytest.raises(ParseError) as excinfo:
        load_records(["1-3 a: abcde", "abc"])
    assert excinfo.value.row == 2
    assert excinfo.value.line == "abc"


def test_load_records_skips_malformed_and_blank_lines():
    records, warnings = load_records(["1-3 a: abcde", "", "abc", "1-3 b: cdefg"], skip_malformed=True)
    assert len(records) == 2
    assert [w.row for w in warnings] == [3]
    assert warnings[0].value == "abc"


def test_count_valid_sample():
    records, _ = load_records(["1-3 a: abcde", "1-3 b: cdefg", "2-9 c: ccccccccc"])
    assert count_valid(records, ValidationMode.count) == 2
    assert count_valid(records, ValidationMode.position) == 1
    assert count_valid(records, "position") == 1
