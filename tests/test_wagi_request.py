import pytest

from spinapp.wagi_request import DEFAULT_ARGV, wagi_argv, wagi_environment


def test_default_argv_matches_source_example():
    assert wagi_argv(DEFAULT_ARGV, "/test", "abc=def") == ["/test", "abc=def"]


def test_default_template_is_used_when_omitted():
    assert wagi_argv(path="/test", query="abc=def") == ["/test", "abc=def"]


def test_ampersands_split_into_separate_args():
    assert wagi_argv(DEFAULT_ARGV, "/a/b", "x=1&y=2") == ["/a/b", "x=1", "y=2"]


def test_missing_query_leaves_empty_arg():
    assert wagi_argv(DEFAULT_ARGV, "/test", None) == ["/test", ""]


def test_template_without_args_placeholder():
    assert wagi_argv("${SCRIPT_NAME}", "/test", "abc=def") == ["/test"]


def test_literal_template_parts_are_kept():
    result = wagi_argv("run ${SCRIPT_NAME}", "/test", "")
    assert result[0] == "run"
    assert result[1] == "/test"


def test_environment_with_base_path():
    env = wagi_environment(
        "https://fermyon.dev/base/foo/bar?key1=value1&key2=value2",
        "/foo/...",
        "/base",
        "fermyon.dev",
    )
    assert env["X_FULL_URL"] == "https://fermyon.dev/base/foo/bar?key1=value1&key2=value2"
    assert env["PATH_INFO"] == "/bar"
    assert env["X_MATCHED_ROUTE"] == "/base/foo/..."
    assert env["X_BASE_PATH"] == "/base"
    assert env["X_RAW_COMPONENT_ROUTE"] == "/foo/..."
    assert env["X_COMPONENT_ROUTE"] == "/foo"


def test_environment_without_base_path():
    env = wagi_environment(
        "https://fermyon.dev/foo/bar?key1=value1&key2=value2",
        "/foo/...",
        "/",
        "fermyon.dev",
    )
    assert env["X_FULL_URL"] == "https://fermyon.dev/foo/bar?key1=value1&key2=value2"
    assert env["PATH_INFO"] == "/bar"
    assert env["X_MATCHED_ROUTE"] == "/foo/..."
    assert env["X_BASE_PATH"] == "/"
    assert env["X_COMPONENT_ROUTE"] == "/foo"


def test_environment_has_six_wagi_names():
    env = wagi_environment("/foo", "/foo", "/", "example.com")
    assert set(env) == {
        "PATH_INFO",
        "X_FULL_URL",
        "X_MATCHED_ROUTE",
        "X_BASE_PATH",
        "X_RAW_COMPONENT_ROUTE",
        "X_COMPONENT_ROUTE",
    }


@pytest.mark.parametrize("host", [None])
def test_environment_defaults_host(host):
    env = wagi_environment("/foo/bar", "/foo/...", "/", host)
    assert env["X_FULL_URL"].startswith("http://localhost/")
    assert env["X_FULL_URL"].endswith("/foo/bar")