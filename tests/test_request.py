"""Tests for request validation."""

import pytest

from relnotes.errors import ReleaseNotesError, ValidationError
from relnotes.models.request import FixtureRequest, RemoteRequest, parse_request


def _commit(**overrides):
    commit = {
        "sha": "abc1234def",
        "message": "feat: add login",
        "author": "alice",
        "url": "https://github.com/acme/webapp/commit/abc1234def",
    }
    commit.update(overrides)
    return commit


def test_parse_fixture_request_with_camel_case_keys():
    request = parse_request(
        {"mode": "fixture", "repository": "acme/webapp", "rangeLabel": "v1...v2", "commits": [_commit()]}
    )

    assert isinstance(request, FixtureRequest)
    assert request.range_label == "v1...v2"
    commits = request.to_commits()
    assert commits[0].sha == "abc1234def"
    assert commits[0].url == "https://github.com/acme/webapp/commit/abc1234def"


def test_parse_fixture_request_with_repo_alias():
    request = parse_request({"mode": "fixture", "repo": "acme/webapp", "range_label": "v1", "commits": []})

    assert request.repository == "acme/webapp"
    assert request.to_commits() == []


def test_parse_remote_request():
    request = parse_request({"mode": "remote", "repository": "acme/webapp", "from": "v1", "to": "v2"})

    assert isinstance(request, RemoteRequest)
    assert (request.from_ref, request.to_ref) == ("v1", "v2")


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"mode": "carrier-pigeon", "repository": "x"},
        {"mode": "fixture", "repository": "x", "rangeLabel": "v1"},
        {"mode": "fixture", "repository": "x", "rangeLabel": "v1", "commits": [_commit(url="not a url")]},
        {"mode": "fixture", "repository": "x", "rangeLabel": "v1", "commits": [{"sha": "abc"}]},
        {"mode": "remote", "repository": "x", "from": "v1"},
        ["not", "a", "mapping"],
    ],
)
def test_invalid_requests(raw):
    with pytest.raises(ValidationError) as exc_info:
        parse_request(raw)

    assert exc_info.value.errors
    assert isinstance(exc_info.value, ReleaseNotesError)


def test_validation_message_lists_every_violation():
    raw = {"mode": "fixture", "repository": "x", "rangeLabel": "v1", "commits": [{"sha": "abc"}]}

    with pytest.raises(ValidationError) as exc_info:
        parse_request(raw)

    message = str(exc_info.value)
    for field_name in ("message", "author", "url"):
        assert f"commits.0.{field_name}" in message


def test_commit_url_is_not_rewritten():
    url = "https://GitHub.com/acme/webapp/commit/abc 123"
    request = parse_request({"mode": "fixture", "repository": "x", "rangeLabel": "v1", "commits": [_commit(url=url)]})

    assert request.to_commits()[0].url == url
