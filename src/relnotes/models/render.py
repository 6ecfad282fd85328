"""Types for the rendered release notes and the pipeline result."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .analysis import AggregateAnalysis, ChangeSet


@dataclass
class Artifact:
    """A generated document handed back to the caller for storage."""

    kind: str
    content: str
    format_type: str = "markdown"
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ReleaseNotesOutput:
    """Structured release notes: the aggregate analysis plus title and date."""

    title: str
    date: str
    highlights: List[str]
    changes: ChangeSet
    risk_notes: List[str]
    executive_summary: str
    impact: List[str]
    maintenance: List[str]
    rollback: Optional[str] = None

    @classmethod
    def from_analysis(cls, analysis: AggregateAnalysis, title: str, date: str) -> "ReleaseNotesOutput":
        return cls(
            title=title,
            date=date,
            highlights=list(analysis.highlights),
            changes=analysis.changes,
            risk_notes=list(analysis.risk_notes),
            executive_summary=analysis.executive_summary,
            impact=list(analysis.impact),
            maintenance=list(analysis.maintenance),
            rollback=analysis.rollback,
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (categories as plain strings)."""
        data = asdict(self)
        for commits in data["changes"].values():
            for commit in commits:
                commit["category"] = commit["category"].value
                commit["risk_keywords"] = list(commit["risk_keywords"])
        return data


@dataclass
class PipelineResult:
    """Successful pipeline run: one structured output and its artifacts."""

    output: ReleaseNotesOutput
    artifacts: List[Artifact]
