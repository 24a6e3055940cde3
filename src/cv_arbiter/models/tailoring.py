"""Pydantic models for keyword matching and gap closure."""

from __future__ import annotations

from pydantic import BaseModel


class KeywordMatch(BaseModel):
    keyword: str      # matched text in its original casing
    start_index: int
    end_index: int    # exclusive


class GapClosure(BaseModel):
    gap_name: str
    principle_id: str


class TailoringAnalysis(BaseModel):
    matched_keywords: list[KeywordMatch] = []
    gaps_closing: list[GapClosure] = []
    original_score: int = 0
    suggested_score: int = 0
    score_delta: int = 0
