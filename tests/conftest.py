"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from cv_arbiter.clients.llm_client import LLMClient, LLMResponse
from cv_arbiter.models.narrative import NarrativeProfile


@pytest.fixture
def strategic_bullets() -> list[str]:
    return [
        "Led product roadmap strategy for enterprise platform, aligning 5 cross-functional teams around quarterly vision",
        "Championed strategic initiative to expand into 3 new markets, securing executive buy-in from C-suite stakeholders",
        "Directed team of 15 engineers and designers, spearheading prioritization using RICE framework",
        "Influenced board-level decisions on $10M infrastructure investment through data-driven business case",
        "Orchestrated company-wide alignment on product vision, resulting in 40% improvement in delivery speed",
    ]


@pytest.fixture
def execution_bullets() -> list[str]:
    return [
        "Built REST API endpoints and maintained deployment pipeline using Docker and CI/CD",
        "Shipped 12 features in Q3 through sprint-based agile methodology",
        "Deployed microservices architecture reducing deployment time from 4 hours to 15 minutes",
        "Implemented automated testing pipeline achieving 95% code coverage",
        "Launched monitoring dashboard for real-time system health tracking",
    ]


@pytest.fixture
def weak_bullets() -> list[str]:
    return [
        "Worked on various projects",
        "Helped the team with things",
        "Participated in meetings regularly",
    ]


@pytest.fixture
def strategic_profile() -> NarrativeProfile:
    return NarrativeProfile(
        target_role="VP of Product",
        seniority_level="executive",
        core_strength="strategic-leadership",
        pain_point="Not getting noticed for leadership roles despite strategic contributions",
        desired_brand="A transformational product leader who sets vision and aligns organizations around strategic growth.",
    )


@pytest.fixture
def technical_profile() -> NarrativeProfile:
    return NarrativeProfile(
        target_role="Staff Engineer",
        seniority_level="senior",
        core_strength="technical-mastery",
        pain_point="CV reads too much like a task list",
        desired_brand="A systems architect who designs scalable platforms and makes critical technical trade-offs.",
    )


@pytest.fixture
def business_profile() -> NarrativeProfile:
    return NarrativeProfile(
        target_role="Growth Product Manager",
        seniority_level="mid",
        core_strength="business-innovation",
        pain_point="Struggling to show commercial impact",
        desired_brand="A growth-minded product manager who drives revenue through data-driven experimentation.",
    )


@pytest.fixture
def sample_jd_text() -> str:
    return (
        "We are looking for a Product Manager with experience in project management, "
        "stakeholder management, and agile methodology. Proficiency in Python, SQL, and React "
        "required. Must know Jira. Experience with Amplitude and Tableau dashboards."
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="[]", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value=[])
    return client
