"""Deterministic, side-effect-free scoring core."""

from cv_arbiter.scoring.arbiter import arbitrate_bullet, score_arbiter
from cv_arbiter.scoring.gaps import (
    GAP_CLOSURE_MIN_HITS,
    analyze_tailoring_pair,
    detect_gap_closures,
)
from cv_arbiter.scoring.keywords import extract_job_keywords, find_keyword_matches
from cv_arbiter.scoring.narrative import analyze_narrative_gap
from cv_arbiter.scoring.principles import (
    PM_CORE_PRINCIPLES,
    PM_FRAMEWORKS,
    analyze_with_pm_principles,
    build_pm_coaching_context,
    get_principles_for_context,
)
from cv_arbiter.scoring.stages import (
    GENERAL_PROFESSIONAL_WEIGHTS,
    PM_SPECIALIST_WEIGHTS,
    STAGE_WEIGHTS,
    analyze_cv_content,
    get_weights_for_role,
    is_product_role,
)

__all__ = [
    "GAP_CLOSURE_MIN_HITS",
    "GENERAL_PROFESSIONAL_WEIGHTS",
    "PM_CORE_PRINCIPLES",
    "PM_FRAMEWORKS",
    "PM_SPECIALIST_WEIGHTS",
    "STAGE_WEIGHTS",
    "analyze_cv_content",
    "analyze_narrative_gap",
    "analyze_tailoring_pair",
    "analyze_with_pm_principles",
    "arbitrate_bullet",
    "build_pm_coaching_context",
    "detect_gap_closures",
    "extract_job_keywords",
    "find_keyword_matches",
    "get_principles_for_context",
    "get_weights_for_role",
    "is_product_role",
    "score_arbiter",
]
