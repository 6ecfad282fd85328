"""State passed between the nodes of the release notes graph."""

from datetime import date
from typing import List, TypedDict

from .analysis import AggregateAnalysis
from .base import ClassifiedCommit, Commit


class PipelineState(TypedDict, total=False):
    """State container for the release notes workflow.

    Using TypedDict for LangGraph compatibility. Each node adds its own key.
    """

    # Input
    repository: str
    range_label: str
    commits: List[Commit]
    generation_date: date

    # Classifier Node Output
    classified_commits: List[ClassifiedCommit]

    # Analysis Node Output
    analysis: AggregateAnalysis

    # Renderer Node Output
    title: str
    markdown: str
