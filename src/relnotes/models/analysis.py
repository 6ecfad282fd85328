"""Types related to the aggregate analysis of a commit range."""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import ClassifiedCommit


@dataclass
class ChangeSet:
    """Classified commits partitioned by category, in original order."""

    features: List[ClassifiedCommit] = field(default_factory=list)
    fixes: List[ClassifiedCommit] = field(default_factory=list)
    chores: List[ClassifiedCommit] = field(default_factory=list)

    def all_commits(self) -> List[ClassifiedCommit]:
        """Features, then fixes, then chores."""
        return [*self.features, *self.fixes, *self.chores]

    def is_empty(self) -> bool:
        return not (self.features or self.fixes or self.chores)


@dataclass
class AggregateAnalysis:
    """Everything derived from a classified commit set."""

    highlights: List[str]
    changes: ChangeSet
    risk_notes: List[str]
    executive_summary: str
    impact: List[str]
    maintenance: List[str]
    rollback: Optional[str] = None
