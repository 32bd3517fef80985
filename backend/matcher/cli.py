"""
Command line entry point for team generation.

Reads a project intake and a candidate pool from JSON files, runs the
matching pipeline and prints the resulting team as JSON.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from config import configure_logging, load_config

from .models import STATUS_OK, TeamResult
from .pipeline import MatchingPipeline

logger = logging.getLogger(__name__)


def _load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def result_to_dict(result: TeamResult) -> Dict[str, Any]:
    """Plain dict form of a team result, ready for json.dumps."""
    return {
        "status": result.status,
        "eligible_count": result.eligible_count,
        "total_count": result.total_count,
        "project_signals": result.project_signals.to_dict(),
        "team": [
            {
                "id": member.candidate.id,
                "primary_role": member.candidate.primary_role,
                "score": member.score,
                "breakdown": member.breakdown.to_dict(),
            }
            for member in result.team
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="team-matcher",
        description="Assemble a team of professionals for a project",
    )
    parser.add_argument("project", help="Path to project intake JSON")
    parser.add_argument("candidates", help="Path to JSON list of professional profiles")
    parser.add_argument("--config", help="YAML config file (defaults to the bundled one)")
    parser.add_argument("--team-size", type=int, dest="team_size", help="Number of team members")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Override the log level from the config file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run team generation from the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv)

    Returns:
        0 when a team was assembled, 1 when no candidate was eligible
    """
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    configure_logging(args.log_level or config.log_level, stream=sys.stderr)

    project = _load_json(args.project)
    candidates = _load_json(args.candidates)
    if not isinstance(candidates, list):
        raise ValueError(f"Candidates file {args.candidates} must contain a JSON list")

    logger.info(f"Loaded {len(candidates)} candidates from {args.candidates}")
    result = MatchingPipeline(config).generate_team(project, candidates, args.team_size)

    json.dump(result_to_dict(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0 if result.status == STATUS_OK else 1


if __name__ == "__main__":
    sys.exit(main())
