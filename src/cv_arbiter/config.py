"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from cv_arbiter.models.analysis import StageWeights


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    max_retries: int = 3
    timeout: int = 60

    def __post_init__(self) -> None:
        if self.timeout < 1:
            raise ValueError(f"llm.timeout must be >= 1, got {self.timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"llm.max_retries must be between 1 and 10, got {self.max_retries}")


@dataclass(frozen=True)
class ScoringConfig:
    indicators_weight: float = 0.20
    ats_weight: float = 0.30
    recruiter_ux_weight: float = 0.20
    pm_intelligence_weight: float = 0.30
    gap_closure_min_hits: int = 2

    def __post_init__(self) -> None:
        weights = {
            "indicators_weight": self.indicators_weight,
            "ats_weight": self.ats_weight,
            "recruiter_ux_weight": self.recruiter_ux_weight,
            "pm_intelligence_weight": self.pm_intelligence_weight,
        }
        for key, value in weights.items():
            if value < 0:
                raise ValueError(f"scoring.{key} must be >= 0, got {value}")
        total = sum(weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"scoring stage weights (indicators_weight, ats_weight, ...) must sum to 1.0, got {total}")
        if self.gap_closure_min_hits < 1:
            raise ValueError(f"scoring.gap_closure_min_hits must be >= 1, got {self.gap_closure_min_hits}")

    @property
    def stage_weights(self) -> StageWeights:
        return StageWeights(
            indicators=self.indicators_weight,
            ats=self.ats_weight,
            recruiter_ux=self.recruiter_ux_weight,
            pm_intelligence=self.pm_intelligence_weight,
        )


@dataclass(frozen=True)
class PipelineConfig:
    rewrite_temperature: float = 0.3
    max_bullets: int = 40
    narrative_enabled: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.rewrite_temperature <= 1.0:
            raise ValueError(
                f"pipeline.rewrite_temperature must be between 0 and 1, got {self.rewrite_temperature}"
            )
        if self.max_bullets < 1:
            raise ValueError(f"pipeline.max_bullets must be >= 1, got {self.max_bullets}")


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        scoring=ScoringConfig(**raw.get("scoring", {})),
        pipeline=PipelineConfig(**raw.get("pipeline", {})),
    )
