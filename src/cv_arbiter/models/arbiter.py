"""Pydantic models for score arbitration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from cv_arbiter.models.analysis import CVContentAnalysis, StageDropDetail


class ArbiterDecision(BaseModel):
    bullet: str  # winning text
    winner: Literal["original", "tailored"]
    score_delta: int  # tailored.total_score - original.total_score
    original_analysis: CVContentAnalysis
    tailored_analysis: CVContentAnalysis
    rejection_reasons: list[StageDropDetail] = []


class BatchArbitrationResult(BaseModel):
    decisions: list[ArbiterDecision] = []
    optimised_bullets: list[str] = []
    original_total_score: int = 0
    optimised_total_score: int = 0
    methodology_preserved: bool = True
