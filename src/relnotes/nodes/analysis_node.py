"""Analysis Node for turning classified commits into release note content."""

from typing import Iterable, List, Optional, Sequence

from loguru import logger

from relnotes.models.analysis import AggregateAnalysis, ChangeSet
from relnotes.models.base import ChangeCategory, ClassifiedCommit
from relnotes.models.state import PipelineState
from relnotes.nodes.normalizer import normalize_message, strip_prefix

MAX_HIGHLIGHTS = 3
MAX_IMPACT_LINES = 3

NO_CHANGES_SUMMARY = "No changes in this release."
FIXES_IMPACT = "Resolved issues improve stability and reliability"
RISK_IMPACT = "Risky changes require extra attention during rollout"

ROLLBACK_REVERT_RELEASE = "Revert the release"
ROLLBACK_DISABLE_FLAG = "Disable the feature flag"
ROLLBACK_AFFECTED_COMMITS = "Roll back the affected commits"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def partition_changes(commits: Iterable[ClassifiedCommit]) -> ChangeSet:
    """Split commits into features, fixes and chores, keeping their order."""
    changes = ChangeSet()
    buckets = {
        ChangeCategory.FEATURES: changes.features,
        ChangeCategory.FIXES: changes.fixes,
        ChangeCategory.CHORES: changes.chores,
    }
    for commit in commits:
        buckets[commit.category].append(commit)
    return changes


def generate_highlights(commits: Sequence[ClassifiedCommit]) -> List[str]:
    """First highlight-worthy commits, normalized."""
    eligible = [c for c in commits if c.is_highlight][:MAX_HIGHLIGHTS]
    return [normalize_message(c.message, c.category) for c in eligible]


def generate_risk_notes(commits: Sequence[ClassifiedCommit]) -> List[str]:
    """One note per commit carrying risk keywords."""
    notes = []
    for commit in commits:
        if commit.risk_keywords:
            keywords = ", ".join(commit.risk_keywords)
            notes.append(f"⚠️ {strip_prefix(commit.message)} (keywords: {keywords})")
    return notes


def generate_executive_summary(changes: ChangeSet) -> str:
    """Generate a one sentence summary of the change counts."""
    parts = []
    if changes.features:
        parts.append(_plural(len(changes.features), "new feature", "new features"))
    if changes.fixes:
        parts.append(_plural(len(changes.fixes), "resolved issue", "resolved issues"))
    if changes.chores:
        parts.append(_plural(len(changes.chores), "maintenance change", "maintenance changes"))

    if not parts:
        return NO_CHANGES_SUMMARY
    if len(parts) == 1:
        return f"This release contains {parts[0]}."
    return f"This release contains {', '.join(parts[:-1])} and {parts[-1]}."


def generate_impact(changes: ChangeSet, has_risks: bool) -> List[str]:
    """Short statements about who or what the release affects."""
    impact = []
    if changes.features:
        count = len(changes.features)
        if count == 1:
            impact.append("1 new feature affects the user experience")
        else:
            impact.append(f"{count} new features affect the user experience")
    if changes.fixes:
        impact.append(FIXES_IMPACT)
    if has_risks:
        impact.append(RISK_IMPACT)
    return impact[:MAX_IMPACT_LINES]


def select_rollback(risk_keywords: Iterable[str]) -> Optional[str]:
    """Pick the mitigation strategy for the collected risk keywords."""
    found = set(risk_keywords)
    if not found:
        return None
    if found & {"breaking", "migration"}:
        return ROLLBACK_REVERT_RELEASE
    if found & {"security", "auth", "payment"}:
        return ROLLBACK_DISABLE_FLAG
    return ROLLBACK_AFFECTED_COMMITS


def analyze_commits(commits: Sequence[ClassifiedCommit]) -> AggregateAnalysis:
    """Derive the full aggregate analysis from classified commits."""
    changes = partition_changes(commits)
    risk_notes = generate_risk_notes(commits)
    all_keywords = [kw for commit in commits for kw in commit.risk_keywords]

    return AggregateAnalysis(
        highlights=generate_highlights(commits),
        changes=changes,
        risk_notes=risk_notes,
        executive_summary=generate_executive_summary(changes),
        impact=generate_impact(changes, has_risks=bool(risk_notes)),
        maintenance=[normalize_message(c.message, ChangeCategory.CHORES) for c in changes.chores],
        rollback=select_rollback(all_keywords),
    )


def analysis_node(state: PipelineState) -> PipelineState:
    """Build the aggregate analysis from the classified commits."""
    logger.info("Executing Analysis Node")

    analysis = analyze_commits(state.get("classified_commits", []))

    logger.info(
        f"Found {len(analysis.changes.features)} features, {len(analysis.changes.fixes)} fixes, "
        f"{len(analysis.changes.chores)} chores"
    )
    if analysis.rollback:
        logger.warning(f"{len(analysis.risk_notes)} risky commits, rollback strategy: {analysis.rollback}")

    return {**state, "analysis": analysis}
