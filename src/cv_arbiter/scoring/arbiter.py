"""Score arbiter: keep a rewrite only when it does not score below its original."""

from __future__ import annotations

import logging

from cv_arbiter.models.analysis import CVContentAnalysis, StageDropDetail, StageWeights
from cv_arbiter.models.arbiter import ArbiterDecision, BatchArbitrationResult
from cv_arbiter.scoring.stages import STAGE_NAMES, analyze_cv_content

logger = logging.getLogger(__name__)


def _stage_drops(original: CVContentAnalysis, tailored: CVContentAnalysis) -> list[StageDropDetail]:
    drops = []
    for stage, name in STAGE_NAMES.items():
        before = getattr(original, stage).score
        after = getattr(tailored, stage).score
        if after < before:
            drops.append(
                StageDropDetail(
                    stage=stage,
                    stage_name=name,
                    original_score=before,
                    tailored_score=after,
                    drop=before - after,
                )
            )
    return drops


def arbitrate_bullet(
    original: str,
    tailored: str,
    job_title: str | None = None,
    weights: StageWeights | None = None,
) -> ArbiterDecision:
    """Pick the higher-scoring of two bullets; ties go to the rewrite."""
    original_analysis = analyze_cv_content(original, job_title, weights)
    tailored_analysis = analyze_cv_content(tailored, job_title, weights)
    delta = tailored_analysis.total_score - original_analysis.total_score
    winner = "tailored" if delta >= 0 else "original"
    drops = _stage_drops(original_analysis, tailored_analysis)

    if winner == "original":
        logger.info(
            "Reverted rewrite (%d -> %d): %s",
            original_analysis.total_score,
            tailored_analysis.total_score,
            ", ".join(d.stage_name for d in drops) or "total score dropped",
        )

    return ArbiterDecision(
        bullet=tailored if winner == "tailored" else original,
        winner=winner,
        score_delta=delta,
        original_analysis=original_analysis,
        tailored_analysis=tailored_analysis,
        rejection_reasons=drops,
    )


def score_arbiter(
    originals: list[str],
    tailored: list[str],
    job_title: str | None = None,
    weights: StageWeights | None = None,
) -> BatchArbitrationResult:
    """Arbitrate bullets position by position and aggregate the totals.

    Every index present in either list is decided. A missing rewrite keeps
    the original; a rewrite with no original is weighed against an empty
    baseline.
    """
    count = max(len(originals), len(tailored))

    decisions = [
        arbitrate_bullet(
            originals[i] if i < len(originals) else "",
            tailored[i] if i < len(tailored) else originals[i],
            job_title,
            weights,
        )
        for i in range(count)
    ]

    original_total = sum(d.original_analysis.total_score for d in decisions)
    optimised_total = sum(
        d.tailored_analysis.total_score if d.winner == "tailored" else d.original_analysis.total_score
        for d in decisions
    )
    logger.debug(
        "Arbitrated %d bullets: original=%d optimised=%d", count, original_total, optimised_total
    )
    return BatchArbitrationResult(
        decisions=decisions,
        optimised_bullets=[d.bullet for d in decisions],
        original_total_score=original_total,
        optimised_total_score=optimised_total,
        methodology_preserved=optimised_total >= original_total,
    )
