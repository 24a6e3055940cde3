"""Detect which principle gaps a rewrite closes relative to its original."""

from __future__ import annotations

import logging

from cv_arbiter.models.analysis import StageWeights
from cv_arbiter.models.tailoring import GapClosure, TailoringAnalysis
from cv_arbiter.scoring.keywords import find_keyword_matches
from cv_arbiter.scoring.principles import PRINCIPLE_SIGNALS, principle_hits
from cv_arbiter.scoring.stages import analyze_cv_content

logger = logging.getLogger(__name__)

GAP_CLOSURE_MIN_HITS = 2


def detect_gap_closures(
    original: str,
    suggested: str,
    min_hits: int = GAP_CLOSURE_MIN_HITS,
) -> list[GapClosure]:
    """Principles the suggestion satisfies that the original did not.

    A principle is satisfied once ``min_hits`` distinct signals appear, so a
    single incidental keyword never counts as closing a gap.
    """
    if not suggested or original == suggested:
        return []

    closures: list[GapClosure] = []
    for principle_id, signals in PRINCIPLE_SIGNALS.items():
        if len(principle_hits(suggested, principle_id)) < min_hits:
            continue
        if len(principle_hits(original, principle_id)) >= min_hits:
            continue
        closures.append(GapClosure(gap_name=signals.gap_name, principle_id=principle_id))
    return closures


def analyze_tailoring_pair(
    original: str,
    suggested: str,
    keywords: list[str],
    job_title: str | None = None,
    *,
    weights: StageWeights | None = None,
    min_hits: int = GAP_CLOSURE_MIN_HITS,
) -> TailoringAnalysis:
    """Keyword matches, closed gaps and score movement for one rewrite."""
    original_score = analyze_cv_content(original, job_title, weights).total_score
    suggested_score = analyze_cv_content(suggested, job_title, weights).total_score
    return TailoringAnalysis(
        matched_keywords=find_keyword_matches(suggested, keywords),
        gaps_closing=detect_gap_closures(original, suggested, min_hits),
        original_score=original_score,
        suggested_score=suggested_score,
        score_delta=suggested_score - original_score,
    )
