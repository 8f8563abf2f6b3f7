# Call-site services built on the scoring engine
from admitscope.services.evaluation import AdmissionEvaluation, AdmissionEvaluator
from admitscope.services.prediction_service import AdmissionPrediction, PredictionService
from admitscope.services.ranking_service import RankingResult, RankingService
from admitscope.services.school_list_service import (
    RecommendedSchool,
    SchoolListRecommendation,
    SchoolListService,
)

__all__ = [
    "AdmissionEvaluation",
    "AdmissionEvaluator",
    "AdmissionPrediction",
    "PredictionService",
    "RankingResult",
    "RankingService",
    "RecommendedSchool",
    "SchoolListRecommendation",
    "SchoolListService",
]
