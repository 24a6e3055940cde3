"""Tailoring pipeline: keywords -> rewrite -> arbitration -> narrative check."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from cv_arbiter.config import AppConfig
from cv_arbiter.models.arbiter import BatchArbitrationResult
from cv_arbiter.models.narrative import NarrativeAnalysisResult, NarrativeProfile
from cv_arbiter.models.tailoring import TailoringAnalysis
from cv_arbiter.pipeline.bullet_rewriter import BulletRewriter
from cv_arbiter.scoring.arbiter import score_arbiter
from cv_arbiter.scoring.gaps import analyze_tailoring_pair
from cv_arbiter.scoring.keywords import extract_job_keywords
from cv_arbiter.scoring.narrative import analyze_narrative_gap

logger = logging.getLogger(__name__)


@dataclass
class TailoringResult:
    """Complete result from the tailoring pipeline."""

    keywords: list[str]
    rewrites: list[str]
    arbitration: BatchArbitrationResult
    pairs: list[TailoringAnalysis] = field(default_factory=list)
    narrative: NarrativeAnalysisResult | None = None
    rewrite_failed: bool = False
    elapsed_seconds: float = 0.0


class TailoringOrchestrator:
    """Run the rewrite collaborator and guard its output with the arbiter."""

    def __init__(self, rewriter: BulletRewriter, config: AppConfig | None = None):
        self.rewriter = rewriter
        self.config = config or AppConfig()

    async def run(
        self,
        bullets: list[str],
        jd_text: str,
        *,
        job_title: str | None = None,
        profile: NarrativeProfile | None = None,
        on_phase: callable | None = None,
    ) -> TailoringResult:
        """Tailor bullets to a job description without ever lowering their score.

        Args:
            bullets: Original CV bullets.
            jd_text: Job description text.
            job_title: Optional title used to pick stage weights.
            profile: Narrative profile; when given, the optimised bullets are
                checked for narrative alignment.
            on_phase: Optional callback(phase_name, detail) for progress.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        scoring = self.config.scoring
        # A job title picks role weights; otherwise the configured weights apply
        weights = None if job_title else scoring.stage_weights
        bullets = [b for b in bullets if b and b.strip()][: self.config.pipeline.max_bullets]

        _notify("keywords", "Extracting job description keywords")
        keywords = extract_job_keywords(jd_text)

        _notify("rewrite", f"Rewriting {len(bullets)} bullets")
        rewrites = await self.rewriter.rewrite(bullets, keywords, job_title)
        rewrite_failed = not rewrites
        if rewrite_failed:
            logger.warning("Rewrite step returned nothing; keeping original bullets")
        # Unusable rewrites fall back to the original text
        candidates = [
            rewrites[i] if i < len(rewrites) and rewrites[i] else original
            for i, original in enumerate(bullets)
        ]

        _notify("arbitrate", "Arbitrating rewrites against originals")
        arbitration = score_arbiter(bullets, candidates, job_title, weights)
        pairs = [
            analyze_tailoring_pair(
                original,
                candidate,
                keywords,
                job_title,
                weights=weights,
                min_hits=scoring.gap_closure_min_hits,
            )
            for original, candidate in zip(bullets, candidates)
        ]

        narrative = None
        if profile is not None and self.config.pipeline.narrative_enabled:
            _notify("narrative", "Checking narrative alignment")
            narrative = analyze_narrative_gap(arbitration.optimised_bullets, profile)

        elapsed = time.monotonic() - start
        logger.info(
            "Tailored %d bullets in %.1fs (score %d -> %d)",
            len(bullets),
            elapsed,
            arbitration.original_total_score,
            arbitration.optimised_total_score,
        )
        return TailoringResult(
            keywords=keywords,
            rewrites=candidates,
            arbitration=arbitration,
            pairs=pairs,
            narrative=narrative,
            rewrite_failed=rewrite_failed,
            elapsed_seconds=elapsed,
        )
