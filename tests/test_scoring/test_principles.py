"""Tests for the PM principle catalogue and principle-coverage scoring."""

import pytest

from cv_arbiter.scoring.principles import (
    PM_COACHING_CONTEXTS,
    PM_CORE_PRINCIPLES,
    PM_FRAMEWORKS,
    PRINCIPLE_SIGNALS,
    analyze_with_pm_principles,
    build_pm_coaching_context,
    get_principles_for_context,
    principle_hits,
)

STRONG = "Led cross-functional team to solve customer churn, increasing retention 40% via data-driven decisions"


class TestCatalogue:
    def test_ten_principles_in_order(self):
        assert [p.id for p in PM_CORE_PRINCIPLES] == [
            "outcome-over-output",
            "data-driven-decisions",
            "user-centricity",
            "strategic-thinking",
            "cross-functional-leadership",
            "problem-solving",
            "iterative-development",
            "communication-storytelling",
            "technical-aptitude",
            "business-acumen",
        ]

    def test_principles_are_complete(self):
        for principle in PM_CORE_PRINCIPLES:
            assert len(principle.key_questions) >= 2
            assert len(principle.application_tips) >= 2
            assert len(principle.example_framing.strong) > len(principle.example_framing.weak)

    def test_six_frameworks(self):
        names = [f.name for f in PM_FRAMEWORKS]
        assert len(names) == 6
        assert "RICE Prioritization" in names
        assert "Kano Model" in names
        assert all(len(f.components) >= 2 for f in PM_FRAMEWORKS)

    def test_every_principle_has_signals(self):
        assert set(PRINCIPLE_SIGNALS) == {p.id for p in PM_CORE_PRINCIPLES}

    def test_signal_weights_sum_to_hundred(self):
        assert sum(s.weight for s in PRINCIPLE_SIGNALS.values()) == 100


class TestAnalyzeWithPMPrinciples:
    def test_weak_bullet_scores_low(self):
        assert analyze_with_pm_principles("Built a dashboard").score < 40

    def test_strong_bullet_scores_high(self):
        assert analyze_with_pm_principles(STRONG).score > 60

    def test_strong_bullet_detected_principles(self):
        result = analyze_with_pm_principles(STRONG)
        missing = {p.id for p in result.missing_principles}
        assert "outcome-over-output" not in missing
        assert "data-driven-decisions" not in missing
        assert "problem-solving" not in missing
        assert "strategic-thinking" in missing

    def test_single_principle_scores_its_weight(self):
        result = analyze_with_pm_principles("Solved the problem")
        assert result.score == 12
        assert len(result.missing_principles) == 9

    def test_empty_text(self):
        result = analyze_with_pm_principles("")
        assert result.score == 0
        assert len(result.missing_principles) == 10
        assert len(result.suggestions) == 10

    def test_weak_bullet_gets_many_suggestions(self):
        result = analyze_with_pm_principles("Managed the product roadmap")
        assert result.score < 50
        assert len(result.suggestions) > 2

    def test_suggestions_are_actionable(self):
        result = analyze_with_pm_principles("Did some work")
        assert len(result.suggestions) == len(result.missing_principles)
        for suggestion in result.suggestions:
            assert len(suggestion) > 10
            assert not suggestion.lower().startswith("missing")

    def test_matches_inflections(self):
        assert principle_hits("increasing retention", "outcome-over-output") == ["increasing"]
        assert principle_hits("helped solve outages", "problem-solving") == ["solve"]

    def test_quantified_metric_counts_as_data_signal(self):
        assert principle_hits("Cut latency 35%", "data-driven-decisions") == ["quantified metric"]


class TestCoachingContexts:
    def test_cv_tailor_principles(self):
        ids = [p.id for p in get_principles_for_context("cv_tailor")]
        assert ids == [
            "outcome-over-output",
            "data-driven-decisions",
            "user-centricity",
            "business-acumen",
        ]

    def test_interview_coach_principles(self):
        ids = {p.id for p in get_principles_for_context("interview_coach")}
        assert ids == set(PM_COACHING_CONTEXTS["interview_coach"].primary_principles)

    def test_unknown_context_raises(self):
        with pytest.raises(ValueError, match="Unknown coaching context"):
            get_principles_for_context("sales_coach")

    def test_cv_tailor_prompt(self):
        text = build_pm_coaching_context("cv_tailor")
        assert "Outcome Over Output" in text
        assert "### Red Flags to Watch For:" in text
        assert "STAR" not in text

    def test_interview_prompt(self):
        text = build_pm_coaching_context("interview_coach")
        assert "### STAR Method Template:" in text
        assert "- **Situation**:" in text
