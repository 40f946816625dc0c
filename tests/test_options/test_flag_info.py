import pytest

from clia import FlagFormatError, FlagInfo


@pytest.mark.parametrize(
    "short_flag,long_flag",
    [
        ("-r", "--recursive"),
        ("-R", "--recursive"),
        ("", "--recursive"),
        ("-r", ""),
        ("-r", "--Recursive"),
        ("-r", "--Recurse-through-subfolders"),
    ],
)
def test_valid_flags(short_flag, long_flag):
    info = FlagInfo(short_flag, long_flag, "Search through subdirectories")
    assert info.short_flag == short_flag
    assert info.long_flag == long_flag
    assert info.description == "Search through subdirectories"


@pytest.mark.parametrize(
    "short_flag,long_flag",
    [
        ("-", "--recursive"),
        ("r", "--recursive"),
        ("rr", "--recursive"),
        ("-ab", "--recursive"),
        ("-recursive", "--recursive"),
        ("-2", "--recursive"),
        ("-#", "--recursive"),
        ("-é", "--recursive"),
        ("-r", "-recursive"),
        ("-r", "recursive"),
        ("-r", "--recursive-7"),
        ("-r", "--recursive-%"),
        ("-r", "--recursive_x"),
        ("", ""),
    ],
)
def test_invalid_flags(short_flag, long_flag):
    with pytest.raises(FlagFormatError) as exc_info:
        FlagInfo(short_flag, long_flag, "Search through subdirectories")
    assert exc_info.value.short_flag == short_flag
    assert exc_info.value.long_flag == long_flag
    assert repr(short_flag) in str(exc_info.value)


def test_flag_format_error_is_value_error():
    with pytest.raises(ValueError):
        FlagInfo("-2", "--two", "")


def test_is_valid_does_not_raise():
    assert FlagInfo.is_valid("-r", "--recursive") is True
    assert FlagInfo.is_valid("-2", "--recursive") is False
    assert FlagInfo.is_valid("", "") is False


def test_flags_skips_empty():
    assert FlagInfo("-r", "--recursive").flags == ("-r", "--recursive")
    assert FlagInfo("", "--recursive").flags == ("--recursive",)
    assert FlagInfo("-r", "").flags == ("-r",)


def test_flag_info_is_immutable():
    info = FlagInfo("-r", "--recursive", "Search through subdirectories")
    with pytest.raises(AttributeError):
        info.short_flag = "-x"


def test_equality():
    assert FlagInfo("-r", "--recursive", "a") == FlagInfo("-r", "--recursive", "a")
    assert FlagInfo("-r", "--recursive", "a") != FlagInfo("-r", "--recursive", "b")
