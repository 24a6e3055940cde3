"""Data models for CV scoring and arbitration."""

from cv_arbiter.models.analysis import (
    CVContentAnalysis,
    PMAnalysis,
    StageDropDetail,
    StageScore,
    StageWeights,
)
from cv_arbiter.models.arbiter import ArbiterDecision, BatchArbitrationResult
from cv_arbiter.models.narrative import (
    EvidenceItem,
    NarrativeAnalysisResult,
    NarrativeProfile,
)
from cv_arbiter.models.principles import (
    CoachingContext,
    ExampleFraming,
    PMFramework,
    PMPrinciple,
)
from cv_arbiter.models.tailoring import GapClosure, KeywordMatch, TailoringAnalysis

__all__ = [
    "ArbiterDecision",
    "BatchArbitrationResult",
    "CVContentAnalysis",
    "CoachingContext",
    "EvidenceItem",
    "ExampleFraming",
    "GapClosure",
    "KeywordMatch",
    "NarrativeAnalysisResult",
    "NarrativeProfile",
    "PMAnalysis",
    "PMFramework",
    "PMPrinciple",
    "StageDropDetail",
    "StageScore",
    "StageWeights",
    "TailoringAnalysis",
]
