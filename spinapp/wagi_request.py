"""Preparation of requests for components run by the Wagi executor."""

from __future__ import annotations

from .headers import DEFAULT_HOST, compute_default_headers

DEFAULT_ARGV = "${SCRIPT_NAME} ${ARGS}"

_SCRIPT_NAME = "${SCRIPT_NAME}"
_ARGS = "${ARGS}"


def wagi_argv(template: str = DEFAULT_ARGV, path: str = "/", query: str | None = None) -> list[str]:
    """Build a component's argv from the configured template.

    ``${SCRIPT_NAME}`` becomes the request path and ``${ARGS}`` the query
    string with each '&' replaced by a space; the result is split on spaces.
    """
    args = (query or "").replace("&", " ")
    argv = template.replace(_SCRIPT_NAME, path).replace(_ARGS, args)
    return argv.split(" ")


def wagi_environment(uri: str, raw: str, base: str, host: str | None = None) -> dict[str, str]:
    """Return the default request information as Wagi environment variables.

    The host defaults to ``localhost`` when the request has no Host header.
    """
    effective_host = DEFAULT_HOST if host is None else host
    return {
        name.wagi: value
        for name, value in compute_default_headers(uri, raw, base, effective_host)
    }