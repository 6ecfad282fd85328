"""Commit classification node: category, risk keywords and highlight flag."""

import re
from types import MappingProxyType
from typing import List, Mapping, Tuple

from loguru import logger

from relnotes.models.base import ChangeCategory, ClassifiedCommit, Commit
from relnotes.models.state import PipelineState

# Conventional commit type -> release notes category
CATEGORY_PREFIXES: Mapping[str, ChangeCategory] = MappingProxyType(
    {
        "feat": ChangeCategory.FEATURES,
        "fix": ChangeCategory.FIXES,
        "chore": ChangeCategory.CHORES,
        "docs": ChangeCategory.CHORES,
        "refactor": ChangeCategory.CHORES,
        "test": ChangeCategory.CHORES,
        "style": ChangeCategory.CHORES,
        "perf": ChangeCategory.FEATURES,
        "ci": ChangeCategory.CHORES,
        "build": ChangeCategory.CHORES,
    }
)

# Scan order is significant: keywords are reported in this order.
RISK_KEYWORDS: Tuple[str, ...] = ("breaking", "migration", "security", "pii", "auth", "db", "payment")

_RISK_PATTERNS = tuple((kw, re.compile(rf"\b{re.escape(kw)}\b")) for kw in RISK_KEYWORDS)


def categorize_message(message: str) -> ChangeCategory:
    """Map a commit message to a category using its conventional prefix."""
    message_lower = message.lower()
    for prefix, category in CATEGORY_PREFIXES.items():
        if message_lower.startswith(f"{prefix}:") or message_lower.startswith(f"{prefix}("):
            return category
    return ChangeCategory.CHORES


def detect_risk_keywords(message: str) -> Tuple[str, ...]:
    """Return the risk keywords present as whole words in the message."""
    message_lower = message.lower()
    return tuple(kw for kw, pattern in _RISK_PATTERNS if pattern.search(message_lower))


def classify_commit(commit: Commit) -> ClassifiedCommit:
    """Classify a single commit."""
    category = categorize_message(commit.message)
    risk_keywords = detect_risk_keywords(commit.message)

    # Every feature is notable; a fix only when it touches something risky
    is_highlight = category is ChangeCategory.FEATURES or (
        category is ChangeCategory.FIXES and bool(risk_keywords)
    )

    return ClassifiedCommit(
        sha=commit.sha,
        message=commit.message,
        author=commit.author,
        url=commit.url,
        category=category,
        is_highlight=is_highlight,
        risk_keywords=risk_keywords,
    )


def classifier_node(state: PipelineState) -> PipelineState:
    """Classify every commit in the state, preserving input order."""
    logger.info("Executing Classifier Node")

    classified: List[ClassifiedCommit] = [classify_commit(commit) for commit in state.get("commits", [])]

    flagged = sum(1 for c in classified if c.risk_keywords)
    logger.info(f"Classified {len(classified)} commits ({flagged} with risk keywords)")

    return {**state, "classified_commits": classified}
