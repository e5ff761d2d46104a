"""Insights use cases."""

from .analyze_sentiment_usecase import AnalyzeSentimentUseCaseImpl
from .get_coverage_usecase import GetCoverageUseCaseImpl
from .get_speed_test_usecase import GetSpeedTestUseCaseImpl
from .recommend_isp_usecase import RecommendIspUseCaseImpl

__all__ = [
    "AnalyzeSentimentUseCaseImpl",
    "GetCoverageUseCaseImpl",
    "GetSpeedTestUseCaseImpl",
    "RecommendIspUseCaseImpl",
]
