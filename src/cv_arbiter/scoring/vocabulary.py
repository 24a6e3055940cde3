"""Shared scoring vocabularies and patterns."""

from __future__ import annotations

import re

ACTION_VERBS: tuple[str, ...] = (
    "led",
    "drove",
    "launched",
    "increased",
    "reduced",
    "improved",
    "delivered",
    "built",
    "created",
    "designed",
    "managed",
    "developed",
    "established",
    "implemented",
    "optimized",
    "spearheaded",
    "orchestrated",
    "transformed",
    "pioneered",
    "accelerated",
    "negotiated",
    "scaled",
    "directed",
    "championed",
    "shipped",
    "deployed",
    "generated",
    "partnered",
)

IMPACT_WORDS: tuple[str, ...] = (
    "revenue",
    "growth",
    "retention",
    "conversion",
    "efficiency",
    "adoption",
    "engagement",
    "satisfaction",
    "churn",
    "savings",
    "profit",
    "roi",
    "kpi",
    "nps",
    "csat",
    "arr",
    "mrr",
)

SCOPE_WORDS: tuple[str, ...] = (
    "cross-functional",
    "enterprise",
    "global",
    "company-wide",
    "organization",
    "department",
    "team",
    "stakeholder",
    "c-suite",
    "executive",
    "board",
)

INDUSTRY_TERMS: tuple[str, ...] = (
    "product",
    "roadmap",
    "strategy",
    "analytics",
    "platform",
    "feature",
    "release",
    "sprint",
    "agile",
    "scrum",
    "api",
    "infrastructure",
    "pipeline",
    "deployment",
    "integration",
    "stakeholder",
    "requirement",
    "specification",
    "backlog",
)

JARGON_TERMS: tuple[str, ...] = (
    "api",
    "sdk",
    "cicd",
    "ci/cd",
    "kubernetes",
    "docker",
    "terraform",
    "graphql",
    "microservices",
    "monorepo",
)

GENERIC_PHRASES: tuple[str, ...] = (
    "responsible for",
    "worked on",
    "helped with",
    "involved in",
    "participated in",
    "assisted with",
)

SO_WHAT_PHRASES: tuple[str, ...] = (
    "resulting in",
    "resulted in",
    "leading to",
    "which led",
    "which drove",
    "which enabled",
    "which resulted",
    "thereby",
    "achieving",
    "generating",
    "saving",
    "improving",
    "increasing",
    "reducing",
)

# Numbers start only at a token boundary and have bounded length, so long
# digit or comma runs are scanned in linear time
_NUMBER = r"(?<![\d.,])(?:\d{1,3}(?:,\d{3}){1,4}|\d{1,12})(?:\.\d{1,4})?"

# Percentages, currency, multipliers and headcount/scale counts
METRIC_PATTERN = re.compile(
    rf"{_NUMBER}\s?%"
    rf"|\$(?:\d{{1,3}}(?:,\d{{3}}){{1,4}}|\d{{1,12}})(?:\.\d{{1,4}})?\s?[KMB]?\b"
    rf"|\b{_NUMBER}x\b"
    rf"|\b{_NUMBER}\s?[KMB]?\+?[\s-]{{0,3}}"
    r"(?:users|customers|clients|people|teams|stakeholders|engineers|members)\b",
    re.IGNORECASE,
)

OUTCOME_NUMBER_PATTERN = re.compile(rf"{_NUMBER}\s?%|\$\d")

FORMATTING_HAZARDS = re.compile(r"[{}<>|\\~`]")

DIGIT_PATTERN = re.compile(r"\d")
