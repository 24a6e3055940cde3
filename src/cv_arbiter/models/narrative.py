"""Pydantic models for narrative alignment analysis."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

SeniorityLevel = Literal["junior", "mid", "senior", "executive"]
CoreStrength = Literal[
    "strategic-leadership",
    "technical-mastery",
    "operational-excellence",
    "business-innovation",
]


class NarrativeProfile(BaseModel):
    target_role: str
    seniority_level: SeniorityLevel
    core_strength: CoreStrength
    pain_point: str = ""
    desired_brand: str = ""

    model_config = {"frozen": True}


class EvidenceItem(BaseModel):
    dimension: str
    desired: str
    actual: str
    contribution: float = Field(ge=0)
    max_contribution: float = Field(gt=0)

    @model_validator(mode="after")
    def _check_cap(self) -> EvidenceItem:
        if self.contribution > self.max_contribution:
            raise ValueError(
                f"contribution {self.contribution} exceeds max_contribution {self.max_contribution}"
            )
        return self


class NarrativeAnalysisResult(BaseModel):
    detected_archetype: str
    archetype_description: str = ""
    narrative_match_percent: float = 0.0  # 0-100
    evidence: list[EvidenceItem] = []
    aligned_keywords: list[str] = []   # <= 15
    missing_keywords: list[str] = []   # <= 10, each >= 4 chars
    cv_score: float = 0.0
