"""Tests for the commit classifier node."""

import pytest

from relnotes.models.base import ChangeCategory
from relnotes.nodes.classifier import (
    RISK_KEYWORDS,
    categorize_message,
    classifier_node,
    classify_commit,
    detect_risk_keywords,
)


@pytest.mark.parametrize(
    "message, expected",
    [
        ("feat: add login", ChangeCategory.FEATURES),
        ("FEAT: Add login", ChangeCategory.FEATURES),
        ("feat(ui): add dark mode", ChangeCategory.FEATURES),
        ("perf: cache user lookups", ChangeCategory.FEATURES),
        ("fix: null pointer", ChangeCategory.FIXES),
        ("Fix(Auth): expired tokens", ChangeCategory.FIXES),
        ("chore: bump deps", ChangeCategory.CHORES),
        ("docs: update readme", ChangeCategory.CHORES),
        ("refactor(core): split module", ChangeCategory.CHORES),
        ("test: cover parser", ChangeCategory.CHORES),
        ("style: format", ChangeCategory.CHORES),
        ("ci: cache pip", ChangeCategory.CHORES),
        ("build: pin hatchling", ChangeCategory.CHORES),
    ],
)
def test_categorize_recognized_prefixes(message, expected):
    assert categorize_message(message) == expected


@pytest.mark.parametrize(
    "message",
    [
        "Initial commit",
        "feature: add login",
        "fixup typo",
        "fix - missing colon",
        " feat: leading space",
        "",
    ],
)
def test_categorize_unrecognized_defaults_to_chores(message):
    assert categorize_message(message) == ChangeCategory.CHORES


def test_risk_keywords_use_word_boundaries():
    assert detect_risk_keywords("migrate the database schema") == ()
    assert detect_risk_keywords("update author list") == ()
    assert detect_risk_keywords("securityfix for payments") == ()
    assert detect_risk_keywords("rotate auth tokens stored in db") == ("auth", "db")


def test_risk_keywords_follow_table_order():
    message = "db payment auth pii security migration breaking"
    assert detect_risk_keywords(message) == RISK_KEYWORDS


def test_risk_keywords_are_case_insensitive_and_unique():
    assert detect_risk_keywords("BREAKING: breaking Breaking") == ("breaking",)


def test_breaking_auth_fix_is_highlighted(commit_factory):
    commit = commit_factory("fix: breaking change in auth flow, requires migration")

    classified = classify_commit(commit)

    assert classified.category == ChangeCategory.FIXES
    assert classified.risk_keywords == ("breaking", "migration", "auth")
    assert classified.is_highlight is True
    assert classified.sha == commit.sha
    assert classified.message == commit.message


@pytest.mark.parametrize(
    "message, expected",
    [
        ("feat: add login", True),
        ("feat: add db backed sessions", True),
        ("fix: null pointer", False),
        ("fix: payment rounding", True),
        ("chore: security audit", False),
        ("docs: breaking changes guide", False),
    ],
)
def test_highlight_rule(commit_factory, message, expected):
    assert classify_commit(commit_factory(message)).is_highlight is expected


def test_classifier_node_preserves_order(commit_factory):
    commits = [
        commit_factory("chore: one", sha="1" * 40),
        commit_factory("feat: two", sha="2" * 40),
        commit_factory("fix: three", sha="3" * 40),
    ]

    result = classifier_node({"commits": commits})

    assert [c.sha for c in result["classified_commits"]] == [c.sha for c in commits]
    assert result["commits"] is commits
