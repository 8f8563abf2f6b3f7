# Component scorers
from admitscope.domain.scoring.factors.academic import (
    AcademicFactor,
    calculate_academic_score,
)
from admitscope.domain.scoring.factors.activity import (
    ActivityFactor,
    calculate_activity_score,
)
from admitscope.domain.scoring.factors.award import (
    AwardFactor,
    calculate_award_score,
)

__all__ = [
    "AcademicFactor",
    "ActivityFactor",
    "AwardFactor",
    "calculate_academic_score",
    "calculate_activity_score",
    "calculate_award_score",
]
