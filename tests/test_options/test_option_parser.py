import copy

import pytest

from clia import (
    FlagInfo,
    FlagNotFoundError,
    MissingPayloadError,
    NoArgumentsAfterFlagError,
    NoPayloadAfterFlagError,
    UnrecognizedFlagError,
    extract_after,
    get_data_after_flag,
    get_list_after_flag,
    new_flag,
    new_flag_data,
    new_flag_list,
    parse_for_options,
)
from clia.option_parser import get_flags_in_args, get_valid_flags, split_list


@pytest.fixture
def valid_options():
    return [
        new_flag_list(
            FlagInfo("-f", "--filter", "Comma separated list of extensions"),
            "EXTENSIONS",
        ),
        new_flag_data(FlagInfo("-F", "--format", "Format the output"), "FORMAT"),
        new_flag(FlagInfo("-r", "--recursive", "Search through subdirectories")),
        new_flag(FlagInfo("", "--verbose", "Talk more")),
    ]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ("a b c", ["a", "b", "c"]),
        ("a,b c", ["a,b", "c"]),
        ("a,,b,", ["a", "b"]),
        ("  a  b ", ["a", "b"]),
        ("single", ["single"]),
        ("", []),
    ],
)
def test_split_list(value, expected):
    assert split_list(value) == expected


def test_extract_list_after_flag():
    assert extract_after(["--f", "a,b,c", "x"], "--f") == ["a", "b", "c"]
    assert extract_after(["--f", "a b c", "x"], "--f") == ["a", "b", "c"]
    assert extract_after(["--f", "a,b c", "x"], "--f") == ["a,b", "c"]


def test_extract_data_after_flag():
    assert extract_after(["--f", "a,b c", "x"], "--f", as_list=False) == "a,b c"
    assert get_data_after_flag(["prog", "-F", "NUMERIC"], "-F") == "NUMERIC"


def test_extract_uses_first_occurrence():
    args = ["prog", "-f", "a,b", "-f", "c"]
    assert get_list_after_flag(args, "-f") == ["a", "b"]


def test_flag_at_end():
    with pytest.raises(NoArgumentsAfterFlagError) as exc_info:
        extract_after(["x", "--f"], "--f")
    assert exc_info.value.flag == "--f"
    assert exc_info.value.tokens == ["x", "--f"]
    assert "No arguments after flag" in str(exc_info.value)


def test_payload_looks_like_flag():
    with pytest.raises(NoPayloadAfterFlagError) as exc_info:
        extract_after(["--f", "--g"], "--f")
    assert "No list/data found after flag" in str(exc_info.value)

    with pytest.raises(NoPayloadAfterFlagError):
        get_data_after_flag(["--f", "-5"], "--f")


def test_flag_not_found():
    with pytest.raises(FlagNotFoundError) as exc_info:
        get_list_after_flag(["prog", "a,b"], "-f")
    assert isinstance(exc_info.value, MissingPayloadError)
    assert exc_info.value.flag == "-f"


def test_valid_flags(valid_options):
    assert get_valid_flags(valid_options) == {
        "-f",
        "--filter",
        "-F",
        "--format",
        "-r",
        "--recursive",
        "--verbose",
    }


def test_flags_in_args_skip_program_name():
    assert get_flags_in_args(["-prog", "-r", "path", "--verbose"]) == [
        "-r",
        "--verbose",
    ]


def test_parse_all_kinds(valid_options):
    args = ["prog", "-r", "--filter", "rs,py", "-F", "NUMERIC", "path"]
    found = parse_for_options(args, valid_options)

    assert [option.present for option in found] == [True, True, True, False]
    assert found[0].list == ["rs", "py"]
    assert found[1].data == "NUMERIC"


def test_parse_no_flags(valid_options):
    found = parse_for_options(["prog", "path", "query"], valid_options)
    assert found == valid_options
    assert not any(option.present for option in found)


def test_long_flag_only_option(valid_options):
    found = parse_for_options(["prog", "--verbose"], valid_options)
    assert found[3].present is True


def test_short_flag_wins_over_long_flag(valid_options):
    args = ["prog", "--filter", "a,b", "-f", "c d"]
    found = parse_for_options(args, valid_options)
    assert found[0].present is True
    assert found[0].list == ["c", "d"]

    args = ["prog", "--format", "LONG", "-F", "SHORT"]
    found = parse_for_options(args, valid_options)
    assert found[1].data == "SHORT"


def test_unrecognized_flag(valid_options):
    with pytest.raises(UnrecognizedFlagError) as exc_info:
        parse_for_options(["prog", "--bogus"], valid_options)
    assert exc_info.value.flags == ["--bogus"]
    assert exc_info.value.tokens == ["prog", "--bogus"]


def test_unrecognized_flag_checked_before_payloads(valid_options):
    with pytest.raises(UnrecognizedFlagError) as exc_info:
        parse_for_options(["prog", "-f", "-x"], valid_options)
    assert exc_info.value.flags == ["-x"]


def test_clustered_short_flags_are_unrecognized(valid_options):
    with pytest.raises(UnrecognizedFlagError):
        parse_for_options(["prog", "-rf", "rs"], valid_options)


def test_missing_payload_aborts_scan(valid_options):
    with pytest.raises(NoArgumentsAfterFlagError):
        parse_for_options(["prog", "-r", "-F"], valid_options)

    with pytest.raises(NoPayloadAfterFlagError):
        parse_for_options(["prog", "--filter", "-r"], valid_options)


def test_empty_declarations():
    assert parse_for_options(["prog"], []) == []
    with pytest.raises(UnrecognizedFlagError):
        parse_for_options(["prog", "-r"], [])


def test_scan_is_idempotent(valid_options):
    args = ["prog", "-r", "-f", "a b", "--format", "BULLET"]
    assert parse_for_options(args, valid_options) == parse_for_options(
        args, valid_options
    )


def test_scan_does_not_mutate_templates(valid_options):
    before = copy.deepcopy(valid_options)
    args = ["prog", "-r", "-f", "a,b", "-F", "BULLET"]
    found = parse_for_options(args, valid_options)

    assert valid_options == before
    assert all(option.present is False for option in valid_options)
    assert valid_options[0].list == []
    assert valid_options[1].data == ""
    assert found[0].list is not valid_options[0].list

    found[0].list.append("mutated")
    assert valid_options[0].list == []


def test_scan_resets_populated_templates(valid_options):
    populated = parse_for_options(["prog", "-r", "-f", "a,b"], valid_options)
    found = parse_for_options(["prog"], populated)
    assert found == valid_options
