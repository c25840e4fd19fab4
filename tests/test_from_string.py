import math

import pytest

from paxtables.from_string import ConversionError, from_string, tuple_from_strings


def test_string_is_returned_as_is():
    assert from_string(str, "a;b c") == "a;b c"


@pytest.mark.parametrize("text", ["42", "-3", "0", "007"])
def test_integers_round_trip(text):
    assert from_string(int, text) == int(text)


def test_leading_plus_is_accepted():
    assert from_string(int, "+7") == 7
    assert from_string(float, "+2.5") == 2.5


@pytest.mark.parametrize("text", ["2.5", "-0.125", ".5", "1.", "1e3", "-4.5E-2", "17"])
def test_floats_round_trip(text):
    assert from_string(float, text) == float(text)


def test_numeric_prefix_is_used():
    assert from_string(int, "12abc") == 12
    assert from_string(int, "3.7") == 3
    assert from_string(float, "1e") == 1.0


def test_special_floats():
    assert from_string(float, "inf") == math.inf
    assert from_string(float, "-Infinity") == -math.inf
    assert math.isnan(from_string(float, "nan"))


def test_empty_string_message():
    with pytest.raises(ConversionError) as info:
        from_string(int, "")
    assert str(info.value) == "Could not convert '<empty string>' to numerical."


@pytest.mark.parametrize("text", ["+", "abc", "++1", " 1", "-", "inf"])
def test_bad_integers(text):
    with pytest.raises(ConversionError):
        from_string(int, text)


@pytest.mark.parametrize("text", ["x1", "++1", "-", "."])
def test_bad_floats(text):
    with pytest.raises(ConversionError):
        from_string(float, text)


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        from_string(float, "word")


def test_unsupported_kind():
    with pytest.raises(TypeError):
        from_string(list, "1")


def test_tuple_from_strings():
    assert tuple_from_strings((int, float, str), ["1", "2.5", "x"]) == (1, 2.5, "x")


def test_tuple_from_strings_ignores_extra():
    assert tuple_from_strings((int,), ["5", "ignored"]) == (5,)


def test_tuple_from_strings_too_few():
    with pytest.raises(ValueError):
        tuple_from_strings((int, int), ["1"])