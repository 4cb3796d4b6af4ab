import pytest

from dailydrills.results import (
    DivisionByZeroError,
    LoadError,
    NegativeNumberError,
    NoTokenError,
    ReadError,
    load_and_double,
    read_number,
    safe_division,
)


def _write(tmp_path, text, name="number.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_number_takes_first_token(tmp_path):
    path = _write(tmp_path, "  17 99 abc\n")
    assert read_number(path) == 17


def test_read_number_accepts_sign(tmp_path):
    assert read_number(_write(tmp_path, "-8")) == -8
    assert read_number(_write(tmp_path, "+8", "plus.txt")) == 8


def test_read_number_missing_file(tmp_path):
    with pytest.raises(ReadError) as info:
        read_number(tmp_path / "absent.txt")
    assert isinstance(info.value.__cause__, OSError)


def test_read_number_only_whitespace(tmp_path):
    with pytest.raises(NoTokenError):
        read_number(_write(tmp_path, " \n\t "))


def test_read_number_not_a_number(tmp_path):
    with pytest.raises(ReadError, match="invalid digit"):
        read_number(_write(tmp_path, "abc"))


def test_read_number_too_large(tmp_path):
    with pytest.raises(ReadError, match="too large"):
        read_number(_write(tmp_path, str(2**31)))


def test_safe_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        safe_division(10, 0)


def test_safe_division_exact():
    assert safe_division(10, 2) == 5


def test_safe_division_truncates_toward_zero():
    assert safe_division(-7, 2) == -3
    assert safe_division(7, -2) == safe_division(-7, 2)


def test_safe_division_overflow():
    with pytest.raises(OverflowError):
        safe_division(-(2**31), -1)


def test_load_and_double_is_twice_read_number(tmp_path):
    path = _write(tmp_path, "21")
    assert load_and_double(path) == 2 * read_number(path)


def test_load_and_double_negative(tmp_path):
    with pytest.raises(NegativeNumberError):
        load_and_double(_write(tmp_path, "-5"))


def test_load_and_double_wraps_read_error(tmp_path):
    with pytest.raises(LoadError) as info:
        load_and_double(tmp_path / "absent.txt")
    assert isinstance(info.value.__cause__, ReadError)
    assert not isinstance(info.value, NegativeNumberError)