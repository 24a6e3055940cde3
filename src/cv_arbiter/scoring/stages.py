"""Four-stage bullet scorer: indicators, ATS, recruiter UX and PM intelligence."""

from __future__ import annotations

import logging
import math
import re

from cv_arbiter.models.analysis import CVContentAnalysis, StageScore, StageWeights
from cv_arbiter.scoring.keywords import contains_terms
from cv_arbiter.scoring.principles import analyze_with_pm_principles
from cv_arbiter.scoring.vocabulary import (
    ACTION_VERBS,
    DIGIT_PATTERN,
    FORMATTING_HAZARDS,
    GENERIC_PHRASES,
    IMPACT_WORDS,
    INDUSTRY_TERMS,
    JARGON_TERMS,
    METRIC_PATTERN,
    OUTCOME_NUMBER_PATTERN,
    SCOPE_WORDS,
    SO_WHAT_PHRASES,
)

logger = logging.getLogger(__name__)

PM_SPECIALIST_WEIGHTS = StageWeights(indicators=0.20, ats=0.30, recruiter_ux=0.20, pm_intelligence=0.30)
GENERAL_PROFESSIONAL_WEIGHTS = StageWeights(indicators=0.30, ats=0.30, recruiter_ux=0.25, pm_intelligence=0.15)
STAGE_WEIGHTS = PM_SPECIALIST_WEIGHTS

STAGE_NAMES: dict[str, str] = {
    "indicators": "Cold Indicators",
    "ats": "ATS Compatibility",
    "recruiter_ux": "Recruiter UX",
    "pm_intelligence": "PM Intelligence",
}

# Indicators stage
VERB_POINTS, VERB_CAP = 8, 25
METRIC_POINTS, METRIC_CAP = 15, 30
IMPACT_POINTS, IMPACT_CAP = 8, 25
SCOPE_POINTS, SCOPE_CAP = 10, 20

# ATS stage
ATS_VERB_OPENER = 25
ATS_IDEAL_LENGTH = (15, 35)
ATS_ACCEPTABLE_LENGTH = (10, 50)
ATS_IDEAL_LENGTH_POINTS, ATS_ACCEPTABLE_LENGTH_POINTS = 20, 10
ATS_NUMERIC = 25
ATS_CLEAN_FORMAT = 15
ATS_INDUSTRY_MANY, ATS_INDUSTRY_ONE = 15, 8

# Recruiter UX stage
UX_OPENING_WINDOW = 8
UX_STRONG_OPENING, UX_VERB_OPENING = 30, 15
UX_CONCISE_WORDS, UX_ACCEPTABLE_WORDS = 30, 45
UX_CONCISE_POINTS, UX_ACCEPTABLE_POINTS = 20, 10
UX_SO_WHAT_FULL, UX_SO_WHAT_PARTIAL = 25, 12
UX_JARGON_LIGHT, UX_JARGON_SOME = 15, 8
UX_NO_FILLER = 10

_PRODUCT_ROLE = re.compile(
    r"\b(?:product\s+(?:manager|owner|lead|director|management|ops|operations)"
    r"|head\s+of\s+product|vp\s+(?:of\s+)?product|chief\s+product\s+officer"
    r"|cpo|pm|apm|gpm|tpm)\b",
    re.IGNORECASE,
)


def round_half_up(value: float) -> int:
    # Tolerance absorbs float error on exact .5 sums such as 13.5
    return int(math.floor(value + 0.5 + 1e-9))


def is_product_role(job_title: str | None) -> bool:
    return bool(job_title and _PRODUCT_ROLE.search(job_title))


def get_weights_for_role(job_title: str | None) -> StageWeights:
    """Product roles and unknown titles use PM weights; other roles de-emphasise PM intelligence."""
    if not job_title or not job_title.strip() or is_product_role(job_title):
        return PM_SPECIALIST_WEIGHTS
    return GENERAL_PROFESSIONAL_WEIGHTS


def _first_word(words: list[str]) -> str:
    return words[0].strip(".,;:!?()[]\"'").lower() if words else ""


def analyze_indicators(text: str) -> StageScore:
    score = 0.0
    details: list[str] = []

    verbs = contains_terms(text, ACTION_VERBS)
    if verbs:
        score += min(VERB_CAP, VERB_POINTS * len(verbs))
        details.append(f"Action verbs: {', '.join(verbs)}")
    else:
        details.append("Missing strong action verbs")

    metrics = METRIC_PATTERN.findall(text) if text else []
    if metrics:
        score += min(METRIC_CAP, METRIC_POINTS * len(metrics))
        details.append(f"Quantified metrics: {', '.join(m.strip() for m in metrics)}")
    else:
        details.append("Missing quantified metrics (%, $, counts)")

    impact = contains_terms(text, IMPACT_WORDS)
    if impact:
        score += min(IMPACT_CAP, IMPACT_POINTS * len(impact))
        details.append(f"Impact vocabulary: {', '.join(impact)}")
    else:
        details.append("Missing business impact vocabulary")

    scope = contains_terms(text, SCOPE_WORDS)
    if scope:
        score += min(SCOPE_CAP, SCOPE_POINTS * len(scope))
        details.append(f"Scope signals: {', '.join(scope)}")
    else:
        details.append("Missing scope or scale signals")

    return StageScore(score=min(100.0, score), details=details)


def analyze_ats(text: str) -> StageScore:
    score = 0.0
    details: list[str] = []
    words = text.split()
    word_count = len(words)

    if _first_word(words) in ACTION_VERBS:
        score += ATS_VERB_OPENER
        details.append("Opens with an action verb")
    else:
        details.append("Does not open with an action verb")

    if ATS_IDEAL_LENGTH[0] <= word_count <= ATS_IDEAL_LENGTH[1]:
        score += ATS_IDEAL_LENGTH_POINTS
        details.append(f"Ideal length ({word_count} words)")
    elif ATS_ACCEPTABLE_LENGTH[0] <= word_count <= ATS_ACCEPTABLE_LENGTH[1]:
        score += ATS_ACCEPTABLE_LENGTH_POINTS
        details.append(f"Acceptable length ({word_count} words)")
    else:
        details.append(f"Length outside the parseable band ({word_count} words)")

    if DIGIT_PATTERN.search(text):
        score += ATS_NUMERIC
        details.append("Contains numeric data")
    else:
        details.append("No numeric data")

    if FORMATTING_HAZARDS.search(text):
        details.append("Contains characters that break ATS parsing")
    else:
        score += ATS_CLEAN_FORMAT
        details.append("Clean formatting")

    terms = contains_terms(text, INDUSTRY_TERMS)
    if len(terms) >= 2:
        score += ATS_INDUSTRY_MANY
        details.append(f"Industry terms: {', '.join(terms)}")
    elif terms:
        score += ATS_INDUSTRY_ONE
        details.append(f"Industry term: {terms[0]}")
    else:
        details.append("No recognised industry terms")

    return StageScore(score=min(100.0, score), details=details)


def analyze_recruiter_ux(text: str) -> StageScore:
    score = 0.0
    details: list[str] = []
    words = text.split()
    word_count = len(words)

    opening = " ".join(words[:UX_OPENING_WINDOW])
    opening_verb = bool(contains_terms(opening, ACTION_VERBS))
    opening_impact = bool(contains_terms(opening, IMPACT_WORDS) or DIGIT_PATTERN.search(opening))
    if opening_verb and opening_impact:
        score += UX_STRONG_OPENING
        details.append("Strong opening: verb and measurable impact up front")
    elif opening_verb:
        score += UX_VERB_OPENING
        details.append("Opening has a verb but no early impact")
    else:
        details.append("Weak opening")

    if word_count <= UX_CONCISE_WORDS:
        score += UX_CONCISE_POINTS
        details.append("Concise")
    elif word_count <= UX_ACCEPTABLE_WORDS:
        score += UX_ACCEPTABLE_POINTS
        details.append("Slightly long")
    else:
        details.append(f"Too long to skim ({word_count} words)")

    so_what = bool(contains_terms(text, SO_WHAT_PHRASES))
    outcome_number = bool(OUTCOME_NUMBER_PATTERN.search(text))
    if so_what and outcome_number:
        score += UX_SO_WHAT_FULL
        details.append("Clear 'so what' with a measured outcome")
    elif so_what or outcome_number:
        score += UX_SO_WHAT_PARTIAL
        details.append("Partial 'so what' clause")
    else:
        details.append("No 'so what' outcome clause")

    jargon = contains_terms(text, JARGON_TERMS)
    if len(jargon) <= 1:
        score += UX_JARGON_LIGHT
        details.append("Plain language")
    elif len(jargon) <= 2:
        score += UX_JARGON_SOME
        details.append(f"Some jargon: {', '.join(jargon)}")
    else:
        details.append(f"Heavy jargon: {', '.join(jargon)}")

    filler = contains_terms(text, GENERIC_PHRASES)
    if filler:
        details.append(f"Generic phrasing: {', '.join(filler)}")
    else:
        score += UX_NO_FILLER
        details.append("No generic filler")

    return StageScore(score=min(100.0, score), details=details)


def analyze_pm_stage(text: str) -> StageScore:
    pm = analyze_with_pm_principles(text)
    if pm.score >= 80:
        summary = "Excellent PM framing across principles"
    elif pm.score >= 60:
        summary = "Good PM framing"
    elif pm.score >= 40:
        summary = "Partial PM framing"
    else:
        summary = "Weak PM framing"
    details = [summary]
    if pm.missing_principles:
        details.append(f"Missing: {', '.join(p.name for p in pm.missing_principles)}")
    return StageScore(score=pm.score, details=details)


def analyze_cv_content(
    text: str,
    job_title: str | None = None,
    weights: StageWeights | None = None,
) -> CVContentAnalysis:
    """Score a bullet across all four stages and combine with stage weights.

    An explicit ``weights`` argument wins over the role-derived weights.
    The empty string scores 14 rather than 0: it still earns the ATS
    clean-formatting bonus and the recruiter concise/plain-language bonuses.
    """
    text = text or ""
    w = weights or get_weights_for_role(job_title)

    indicators = analyze_indicators(text)
    ats = analyze_ats(text)
    recruiter_ux = analyze_recruiter_ux(text)
    pm_intelligence = analyze_pm_stage(text)

    weighted = (
        indicators.score * w.indicators
        + ats.score * w.ats
        + recruiter_ux.score * w.recruiter_ux
        + pm_intelligence.score * w.pm_intelligence
    )
    total = max(0, min(100, round_half_up(weighted)))
    return CVContentAnalysis(
        indicators=indicators,
        ats=ats,
        recruiter_ux=recruiter_ux,
        pm_intelligence=pm_intelligence,
        total_score=total,
    )
