"""relnotes workflow integration using LangGraph for orchestration."""

import argparse
import json
import os
import re
import sys
from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Union

from langgraph.graph import END, StateGraph
from loguru import logger

from relnotes.config import Settings
from relnotes.errors import ReleaseNotesError, UnsupportedModeError
from relnotes.models.render import Artifact, PipelineResult, ReleaseNotesOutput
from relnotes.models.request import FixtureRequest, RemoteRequest, parse_request
from relnotes.models.state import PipelineState
from relnotes.nodes.analysis_node import analysis_node
from relnotes.nodes.classifier import classifier_node
from relnotes.nodes.release_notes_renderer_node import format_date, release_notes_renderer_node

DOCUMENT_ARTIFACT = "document"


def create_workflow():
    """Create the compiled release notes graph."""
    workflow = StateGraph(PipelineState)

    # Add nodes
    workflow.add_node("classifier_node", classifier_node)
    workflow.add_node("analysis_node", analysis_node)
    workflow.add_node("release_notes_renderer_node", release_notes_renderer_node)

    workflow.set_entry_point("classifier_node")

    # Define edges
    workflow.add_edge("classifier_node", "analysis_node")
    workflow.add_edge("analysis_node", "release_notes_renderer_node")
    workflow.add_edge("release_notes_renderer_node", END)

    return workflow.compile()


def run_pipeline(
    request: Union[FixtureRequest, RemoteRequest, Mapping[str, Any]],
    generation_date: Optional[date] = None,
) -> PipelineResult:
    """Run the release notes pipeline for one request.

    Raw mappings are validated first. Remote requests are rejected with
    ``UnsupportedModeError`` before anything runs. ``generation_date`` is
    fixed for the whole run and defaults to today.
    """
    if not isinstance(request, (FixtureRequest, RemoteRequest)):
        request = parse_request(request)

    if isinstance(request, RemoteRequest):
        logger.warning(f"Rejected {request.mode} request for {request.repository}")
        raise UnsupportedModeError(request.mode)

    generation_date = generation_date or date.today()
    logger.info(f"Generating release notes for {request.repository} ({request.range_label})")

    initial_state: PipelineState = {
        "repository": request.repository,
        "range_label": request.range_label,
        "commits": request.to_commits(),
        "generation_date": generation_date,
    }
    final_state = create_workflow().invoke(initial_state)

    output = ReleaseNotesOutput.from_analysis(
        final_state["analysis"], title=final_state["title"], date=format_date(generation_date)
    )
    artifact = Artifact(
        kind=DOCUMENT_ARTIFACT,
        content=final_state["markdown"],
        metadata={"repository": request.repository, "rangeLabel": request.range_label},
    )
    return PipelineResult(output=output, artifacts=[artifact])


def _slug(label: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", label).strip("_") or "release"


def write_result(result: PipelineResult, output_dir: str, generation_date: date) -> List[str]:
    """Write the document and structured output, returning the written paths."""
    os.makedirs(output_dir, exist_ok=True)
    artifact = result.artifacts[0]
    stem = f"release_notes_{_slug(artifact.metadata['rangeLabel'])}_{generation_date.strftime('%Y%m%d')}"

    markdown_path = os.path.join(output_dir, f"{stem}.md")
    with open(markdown_path, "w", encoding="utf-8") as f:
        f.write(artifact.content)

    json_path = os.path.join(output_dir, f"{stem}.json")
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(result.output.to_dict(), f, indent=2, ensure_ascii=False)

    return [markdown_path, json_path]


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Generate release notes from a commit list")
    parser.add_argument("request", type=str, help="Path to a JSON release notes request")
    parser.add_argument("--output-dir", type=str, help="Output directory for release notes", default=settings.output_dir)
    parser.add_argument("--date", type=str, help="Generation date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--dry-run", action="store_true", help="Print the document instead of writing files")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else settings.log_level)

    try:
        generation_date = datetime.strptime(args.date, "%Y-%m-%d").date() if args.date else date.today()
    except ValueError:
        logger.error(f"Invalid --date value: {args.date}")
        return 1

    try:
        with open(args.request, "r", encoding="utf-8") as f:
            raw_request = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read request {args.request}: {str(e)}")
        return 1

    try:
        result = run_pipeline(raw_request, generation_date=generation_date)
    except ReleaseNotesError as e:
        logger.error(str(e))
        return 1

    logger.info("Workflow completed!")
    logger.info(f"Executive summary: {result.output.executive_summary}")

    if args.dry_run or settings.dry_run:
        print(result.artifacts[0].content)
        return 0

    for path in write_result(result, args.output_dir, generation_date):
        logger.info(f"Release notes saved to: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
