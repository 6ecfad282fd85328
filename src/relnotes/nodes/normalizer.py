"""Rewrites raw commit messages into short release note sentences."""

import re
from types import MappingProxyType
from typing import Mapping

from relnotes.models.base import ChangeCategory

PREFIX_RE = re.compile(
    r"^(feat|fix|chore|docs|refactor|test|style|perf|ci|build)(?:\([^)]*\)\s*:?|:)\s*", re.IGNORECASE
)

_LEADING_WORD_RE = re.compile(r"^(\w+)\s+")

ADDED = "Added"
FIXED = "Fixed"
UPDATED = "Updated"
IMPROVED = "Improved"
REMOVED = "Removed"

# Leading action verb (lowercase) -> canonical past-tense verb
VERB_MAP: Mapping[str, str] = MappingProxyType(
    {
        "add": ADDED,
        "implement": ADDED,
        "create": ADDED,
        "introduce": ADDED,
        "fix": FIXED,
        "resolve": FIXED,
        "correct": FIXED,
        "patch": FIXED,
        "update": UPDATED,
        "upgrade": UPDATED,
        "bump": UPDATED,
        "improve": IMPROVED,
        "refactor": IMPROVED,
        "clean": IMPROVED,
        "remove": REMOVED,
        "delete": REMOVED,
    }
)

CATEGORY_VERBS: Mapping[ChangeCategory, str] = MappingProxyType(
    {
        ChangeCategory.FEATURES: ADDED,
        ChangeCategory.FIXES: FIXED,
        ChangeCategory.CHORES: UPDATED,
    }
)


def strip_prefix(message: str) -> str:
    """Remove a conventional commit prefix, keeping the message if nothing would remain."""
    return PREFIX_RE.sub("", message, count=1) or message


def _is_acronym(word: str) -> bool:
    return len(word) > 1 and word == word.upper()


def normalize_message(message: str, category: ChangeCategory) -> str:
    """Turn a commit message into a ``<Verb> <remainder>`` sentence.

    The conventional prefix is dropped, and a leading action verb such as
    "add" or "bump" is swapped for its canonical form. Without one, the
    category's default verb is used.
    """
    clean = PREFIX_RE.sub("", message, count=1)

    verb = CATEGORY_VERBS[category]
    match = _LEADING_WORD_RE.match(clean)
    if match:
        mapped = VERB_MAP.get(match.group(1).lower())
        if mapped:
            verb = mapped
            clean = clean[match.end():]

    if not clean.strip():
        clean = PREFIX_RE.sub("", message, count=1)
        if not clean.strip():
            clean = message

    first_word = re.split(r"\s", clean, maxsplit=1)[0]
    if not _is_acronym(first_word):
        clean = clean[:1].lower() + clean[1:]

    return f"{verb} {clean}"
