"""Release Notes Renderer Node for converting the analysis into Markdown."""

from datetime import date
from typing import List, Sequence

from loguru import logger

from relnotes.models.analysis import AggregateAnalysis
from relnotes.models.base import ChangeCategory, ClassifiedCommit
from relnotes.models.state import PipelineState
from relnotes.nodes.normalizer import normalize_message, strip_prefix


def make_title(range_label: str) -> str:
    return f"Release notes — {range_label}"


def format_date(generation_date: date) -> str:
    return generation_date.isoformat()


def _section(title: str, body: Sequence[str]) -> List[str]:
    return [title, "", *body, ""]


def _bullets(items: Sequence[str]) -> List[str]:
    return [f"- {item}" for item in items]


def _change_lines(commits: Sequence[ClassifiedCommit], texts: Sequence[str]) -> List[str]:
    return [f"- {text} ([{c.short_sha}]({c.url})) - @{c.author}" for c, text in zip(commits, texts)]


def _normalized(commits: Sequence[ClassifiedCommit], category: ChangeCategory) -> List[str]:
    return [normalize_message(c.message, category) for c in commits]


def _format_changes(analysis: AggregateAnalysis) -> List[str]:
    """Format the Changes section with one subsection per non-empty category."""
    changes = analysis.changes
    if changes.is_empty():
        return []

    content = ["## Changes", ""]
    if changes.features:
        features = _normalized(changes.features, ChangeCategory.FEATURES)
        content += _section("### Features", _change_lines(changes.features, features))
    if changes.fixes:
        fixes = _normalized(changes.fixes, ChangeCategory.FIXES)
        content += _section("### Fixes", _change_lines(changes.fixes, fixes))
    # Chores reuse the maintenance list so both stay in step
    if changes.chores:
        content += _section("### Maintenance", _change_lines(changes.chores, analysis.maintenance))
    return content


def _format_links(analysis: AggregateAnalysis) -> List[str]:
    commits = analysis.changes.all_commits()
    if not commits:
        return []
    return _section("## Links", [f"- [{c.short_sha}]({c.url}) — {strip_prefix(c.message)}" for c in commits])


def render_markdown(analysis: AggregateAnalysis, title: str, date_str: str) -> str:
    """Render the release notes document.

    Sections appear in a fixed order and are skipped when they have
    nothing to show. The output depends only on the arguments.
    """
    lines = [f"# {title}", "", f"**Date:** {date_str}", ""]

    lines += _section("## Executive summary", [analysis.executive_summary])

    if analysis.highlights:
        lines += _section("## Highlights", _bullets(analysis.highlights))

    lines += _format_changes(analysis)

    if analysis.impact:
        lines += _section("## Impact", _bullets(analysis.impact))

    if analysis.risk_notes:
        lines += _section("## Risk & Notes", _bullets(analysis.risk_notes))

    if analysis.rollback:
        lines += _section("## Rollback / Mitigation", [analysis.rollback])

    lines += _format_links(analysis)

    return "\n".join(lines)


def release_notes_renderer_node(state: PipelineState) -> PipelineState:
    """Render the analysis held in the state into a Markdown document."""
    logger.info("Executing Release Notes Renderer Node")

    title = make_title(state["range_label"])
    markdown = render_markdown(state["analysis"], title, format_date(state["generation_date"]))

    logger.debug(f"Rendered {len(markdown)} characters of release notes")

    return {**state, "title": title, "markdown": markdown}
