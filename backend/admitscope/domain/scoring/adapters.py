"""
Metric Adapters

Translate persisted applicant, institution and admission-case records into
the engine's strict input structures. This is a pure READ + TRANSFORM layer:
no scoring, no I/O.

All "missing data" fallback chains are resolved here:
- falsy GPA / GPA scale / acceptance rate -> absent
- award linked to a known competition tier -> tier points, else award-level
  points, else the unknown-award default
- test scores with no value are skipped
- negative activity hours count as 0
- activities without category or role are dropped from the detail list
- empty detail / tier lists -> absent, so scorers use the count paths
"""

import math
from typing import Any, Iterable, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from admitscope.domain.records import (
    ActivityRecord,
    AdmissionCaseRecord,
    AwardRecord,
    ProfileRecord,
    SchoolRecord,
)
from admitscope.domain.scoring.constants import SCORING_CONFIG, ScoringConfig
from admitscope.domain.scoring.interfaces import (
    ActivityDetail,
    ApplicantMetrics,
    HistoricalDistribution,
    InstitutionMetrics,
)
from admitscope.domain.scoring.statistics import parse_range
from admitscope.infrastructure.exceptions import RecordValidationError

RecordT = TypeVar("RecordT", bound=BaseModel)


def coerce_record(raw: Any, model: Type[RecordT]) -> RecordT:
    """
    Validate a dict, ORM row or model instance into a record contract.

    Raises:
        RecordValidationError: if a field holds a value of the wrong type
    """
    if isinstance(raw, model):
        return raw
    try:
        if isinstance(raw, dict):
            return model.model_validate(raw)
        return model.model_validate(raw, from_attributes=True)
    except PydanticValidationError as e:
        raise RecordValidationError(
            f"Invalid {model.__name__}",
            record_type=model.__name__,
            errors=[
                {"loc": list(err["loc"]), "msg": err["msg"]}
                for err in e.errors()
            ],
            original_error=e,
        ) from e


def _first_score(record: ProfileRecord, test_type: str) -> Optional[float]:
    for test in record.test_scores:
        if test.type == test_type and test.score is not None:
            return test.score
    return None


def award_tier_score(award: AwardRecord, config: ScoringConfig = SCORING_CONFIG) -> float:
    """Points for one award: competition tier first, then award level."""
    if award.competition is not None and award.competition.tier:
        points = config.tier_points.get(award.competition.tier)
        if points is not None:
            return points
    return config.level_points.get(award.level or "", config.award.unknown_award_points)


def _activity_detail(activity: ActivityRecord) -> ActivityDetail:
    hours = max(0.0, activity.hours_per_week or 0) * max(0.0, activity.weeks_per_year or 0)
    return ActivityDetail(
        category=activity.category,
        role=activity.role or "",
        total_hours=hours,
    )


def extract_applicant_metrics(
    profile: Union[ProfileRecord, Any],
    config: ScoringConfig = SCORING_CONFIG,
) -> ApplicantMetrics:
    """
    Build ApplicantMetrics from a profile record.

    Args:
        profile: ProfileRecord, dict (camelCase or snake_case) or ORM row
            with test scores, activities and awards loaded

    Returns:
        ApplicantMetrics ready for the scorers
    """
    record = coerce_record(profile, ProfileRecord)

    awards = record.awards
    activities = record.activities

    tier_scores = tuple(award_tier_score(a, config) for a in awards)
    details = tuple(
        _activity_detail(a) for a in activities if a.category and a.role
    )

    return ApplicantMetrics(
        gpa=record.gpa or None,
        gpa_scale=record.gpa_scale or None,
        sat_score=_first_score(record, "SAT"),
        act_score=_first_score(record, "ACT"),
        toefl_score=_first_score(record, "TOEFL"),
        activity_count=len(activities),
        award_count=len(awards),
        national_award_count=sum(1 for a in awards if a.level == "NATIONAL"),
        international_award_count=sum(1 for a in awards if a.level == "INTERNATIONAL"),
        award_tier_scores=tier_scores or None,
        activity_details=details or None,
    )


def extract_institution_metrics(school: Union[SchoolRecord, Any]) -> InstitutionMetrics:
    """
    Build InstitutionMetrics from a school record.

    Only the acceptance rate treats 0 as missing; every other statistic is
    kept literally.
    """
    record = coerce_record(school, SchoolRecord)
    return InstitutionMetrics(
        acceptance_rate=record.acceptance_rate or None,
        sat_avg=record.sat_avg,
        sat25=record.sat25,
        sat75=record.sat75,
        act_avg=record.act_avg,
        act25=record.act25,
        act75=record.act75,
        rank=record.us_news_rank,
    )


def _case_value(value: Optional[Union[float, str]]) -> Optional[float]:
    """A single number, or the midpoint of a textual range."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        parsed = parse_range(value)
        if parsed is None:
            try:
                parsed = float(value.strip())
            except ValueError:
                return None
    return parsed if math.isfinite(parsed) else None


def build_historical_distribution(cases: Iterable[Any]) -> HistoricalDistribution:
    """
    Sorted SAT/GPA/TOEFL samples from admitted cases.

    Non-admitted cases and unparseable values are skipped.
    """
    sat: List[float] = []
    gpa: List[float] = []
    toefl: List[float] = []
    sample_count = 0

    for raw in cases:
        case = coerce_record(raw, AdmissionCaseRecord)
        if not case.is_admitted:
            continue
        sample_count += 1
        for value, bucket in (
            (case.sat_range, sat),
            (case.gpa_range, gpa),
            (case.toefl_range, toefl),
        ):
            parsed = _case_value(value)
            if parsed is not None:
                bucket.append(parsed)

    return HistoricalDistribution(
        sample_count=sample_count,
        sat_values=tuple(sorted(sat)),
        gpa_values=tuple(sorted(gpa)),
        toefl_values=tuple(sorted(toefl)),
    )
