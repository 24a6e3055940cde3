"""Pydantic models for the multi-stage bullet scorer."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, model_validator

from cv_arbiter.models.principles import PMPrinciple


class StageWeights(BaseModel):
    indicators: float = Field(ge=0)
    ats: float = Field(ge=0)
    recruiter_ux: float = Field(ge=0)
    pm_intelligence: float = Field(ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_sum(self) -> StageWeights:
        total = self.indicators + self.ats + self.recruiter_ux + self.pm_intelligence
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"stage weights must sum to 1.0, got {total}")
        return self


class StageScore(BaseModel):
    score: float  # 0-100
    details: list[str] = []


class CVContentAnalysis(BaseModel):
    indicators: StageScore
    ats: StageScore
    recruiter_ux: StageScore
    pm_intelligence: StageScore
    total_score: int  # 0-100, weighted and rounded half-up


class StageDropDetail(BaseModel):
    """One stage where a rewrite scored lower than its original."""

    stage: str              # "indicators" | "ats" | "recruiter_ux" | "pm_intelligence"
    stage_name: str         # display name, e.g. "ATS Compatibility"
    original_score: float
    tailored_score: float
    drop: float


class PMAnalysis(BaseModel):
    score: float  # 0-100, sum of detected principle weights
    missing_principles: list[PMPrinciple] = []
    suggestions: list[str] = []
