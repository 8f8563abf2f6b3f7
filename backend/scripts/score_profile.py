#!/usr/bin/env python3
"""
Score Profile Script

Runs admission predictions for one applicant profile against a set of
schools, both read from JSON exports of the storage layer.

Usage:
    python scripts/score_profile.py profile.json schools.json
    python scripts/score_profile.py profile.json schools.json --cases cases.json
    python scripts/score_profile.py profile.json schools.json --school-list
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from admitscope.config.settings import settings
from admitscope.domain.scoring.adapters import build_historical_distribution
from admitscope.infrastructure.exceptions import AdmitScopeError
from admitscope.services.prediction_service import PredictionService
from admitscope.services.school_list_service import SchoolListService

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_json(path: str):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def run(args) -> dict:
    profile = load_json(args.profile)
    schools = load_json(args.schools)

    distribution = None
    if args.cases:
        distribution = build_historical_distribution(load_json(args.cases))
        logger.info(
            f"Historical distribution: {distribution.sample_count} admitted cases, "
            f"{len(distribution.sat_values)} SAT values"
        )

    if args.school_list:
        return SchoolListService().recommend(profile, schools, distribution).to_dict()

    predictions = PredictionService().predict(profile, schools, distribution)
    logger.info(f"Scored {len(predictions)} schools")
    return {"predictions": [p.to_dict() for p in predictions]}


def main() -> int:
    parser = argparse.ArgumentParser(description="Score an applicant profile against schools")
    parser.add_argument("profile", help="Path to the profile JSON file")
    parser.add_argument("schools", help="Path to a JSON list of schools")
    parser.add_argument(
        "--cases",
        help="Path to a JSON list of admission cases for the historical distribution"
    )
    parser.add_argument(
        "--school-list",
        action="store_true",
        help="Print a reach/match/safety school list instead of predictions"
    )
    args = parser.parse_args()

    try:
        output = run(args)
    except AdmitScopeError as e:
        logger.error(f"Scoring failed: {e.message}")
        print(json.dumps(e.to_dict(), indent=2, ensure_ascii=False))
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
