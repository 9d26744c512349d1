import pytest

from spinapp.keys import (
    ConfigError,
    InvalidKeyError,
    InvalidPathError,
    Key,
    validate_key,
)


@pytest.mark.parametrize("key", ["a", "abc", "a1b2c3", "a_1", "a_1_b_3"])
def test_keys_good(key):
    assert str(Key(key)) == key


@pytest.mark.parametrize("key", ["", "aX", "1bc", "_x", "x_", "a__b", "x-y"])
def test_keys_bad(key):
    with pytest.raises(InvalidKeyError):
        Key(key)


@pytest.mark.parametrize(
    ("key", "detail"),
    [
        ("", "may not be empty"),
        ("1bc", "must start with an ASCII letter"),
        ("x_", "must end with an ASCII alphanumeric char"),
        ("a__b", "may not contain multiple consecutive underscores"),
        ("x-y", "invalid character '-'"),
        ("aX", "invalid character 'X'"),
    ],
)
def test_validate_key_messages(key, detail):
    with pytest.raises(InvalidKeyError) as info:
        validate_key(key)
    assert info.value.detail == detail
    assert str(info.value) == f"invalid config key: {detail}"


def test_key_equality():
    assert Key("abc") == Key("abc")
    assert Key("abc") != Key("abd")


def test_error_hierarchy_and_format():
    err = InvalidPathError("empty")
    assert isinstance(err, ConfigError)
    assert str(err) == "invalid config path: empty"