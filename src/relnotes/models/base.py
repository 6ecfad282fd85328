"""Base types used across the relnotes pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class ChangeCategory(str, Enum):
    """Release note bucket a commit is filed under."""

    FEATURES = "features"
    FIXES = "fixes"
    CHORES = "chores"


@dataclass(frozen=True)
class Commit:
    """A single commit as supplied by the caller."""

    sha: str
    message: str
    author: str
    url: str

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


@dataclass(frozen=True)
class ClassifiedCommit(Commit):
    """Commit annotated with its category and risk signals."""

    category: ChangeCategory = ChangeCategory.CHORES
    is_highlight: bool = False
    risk_keywords: Tuple[str, ...] = field(default_factory=tuple)
