"""Tests for narrative gap analysis and archetype detection."""

from cv_arbiter.scoring.narrative import (
    analyze_narrative_gap,
    brand_terms,
    desired_verbs,
    detect_archetype,
    inflections,
)


class TestArchetypeDetection:
    def test_strategic_leader(self, strategic_bullets):
        name, description = detect_archetype(strategic_bullets)
        assert name == "Strategic Leader"
        assert description

    def test_execution_specialist(self, execution_bullets):
        name, _ = detect_archetype(execution_bullets)
        assert name == "Execution-Oriented Specialist"

    def test_no_family_verbs_falls_back(self):
        name, _ = detect_archetype(["Did tasks"])
        assert name == "Versatile Contributor"

    def test_archetype_independent_of_profile(self, strategic_bullets, strategic_profile, technical_profile):
        a = analyze_narrative_gap(strategic_bullets, strategic_profile)
        b = analyze_narrative_gap(strategic_bullets, technical_profile)
        assert a.detected_archetype == b.detected_archetype


class TestNarrativeGap:
    def test_strategic_bullets_match_strategic_profile(self, strategic_bullets, strategic_profile):
        result = analyze_narrative_gap(strategic_bullets, strategic_profile)
        assert result.detected_archetype == "Strategic Leader"
        assert result.narrative_match_percent >= 70
        assert len(result.aligned_keywords) > 0

    def test_execution_bullets_miss_strategic_profile(
        self, strategic_bullets, execution_bullets, strategic_profile
    ):
        strategic = analyze_narrative_gap(strategic_bullets, strategic_profile)
        execution = analyze_narrative_gap(execution_bullets, strategic_profile)
        assert execution.narrative_match_percent < strategic.narrative_match_percent
        assert execution.narrative_match_percent < 50
        assert len(execution.missing_keywords) > 0

    def test_weak_bullets_score_low(self, weak_bullets, strategic_profile):
        result = analyze_narrative_gap(weak_bullets, strategic_profile)
        assert result.narrative_match_percent < 40

    def test_seniority_changes_result(self, strategic_bullets, strategic_profile):
        scores = set()
        for level in ("junior", "senior", "executive"):
            profile = strategic_profile.model_copy(update={"seniority_level": level})
            scores.add(analyze_narrative_gap(strategic_bullets, profile).narrative_match_percent)
        assert len(scores) >= 2

    def test_core_strength_changes_desired_language(self, strategic_profile, technical_profile):
        assert desired_verbs(strategic_profile) != desired_verbs(technical_profile)

    def test_evidence_dimensions(self, strategic_bullets, business_profile):
        result = analyze_narrative_gap(strategic_bullets, business_profile)
        assert len(result.evidence) == 4
        assert [e.max_contribution for e in result.evidence] == [30, 25, 25, 20]
        for item in result.evidence:
            assert 0 <= item.contribution <= item.max_contribution

    def test_keyword_caps(self, strategic_bullets, execution_bullets, business_profile):
        result = analyze_narrative_gap(strategic_bullets + execution_bullets, business_profile)
        assert len(result.aligned_keywords) <= 15
        assert len(result.missing_keywords) <= 10
        assert all(len(k) >= 4 for k in result.missing_keywords)

    def test_percent_bounded(self, strategic_bullets, strategic_profile):
        result = analyze_narrative_gap(strategic_bullets * 5, strategic_profile)
        assert 0 <= result.narrative_match_percent <= 100

    def test_cv_score_is_whole_number(self, strategic_bullets, strategic_profile):
        result = analyze_narrative_gap(strategic_bullets, strategic_profile)
        assert 0 < result.cv_score <= 100
        assert result.cv_score == int(result.cv_score)

    def test_many_bullets(self, strategic_profile):
        bullets = [
            f"Led strategic initiative #{i} resulting in {i * 10}% improvement" for i in range(1, 51)
        ]
        result = analyze_narrative_gap(bullets, strategic_profile)
        assert result.narrative_match_percent > 0

    def test_empty_bullets(self, strategic_profile):
        result = analyze_narrative_gap([], strategic_profile)
        assert result.detected_archetype == "Unknown"
        assert result.narrative_match_percent == 0
        assert result.evidence == []
        assert result.aligned_keywords == []
        assert result.missing_keywords == []

    def test_blank_bullets_count_as_empty(self, strategic_profile):
        result = analyze_narrative_gap(["", "   "], strategic_profile)
        assert result.detected_archetype == "Unknown"

    def test_deterministic(self, strategic_bullets, strategic_profile):
        first = analyze_narrative_gap(strategic_bullets, strategic_profile)
        second = analyze_narrative_gap(strategic_bullets, strategic_profile)
        assert first.model_dump() == second.model_dump()


class TestHelpers:
    def test_inflections(self):
        assert inflections("aligned") == ("aligned", "aligning")
        assert inflections("led") == ("led",)

    def test_brand_terms_skip_stopwords_and_short_tokens(self, strategic_profile):
        terms = brand_terms(strategic_profile)
        assert "transformational" in terms
        assert "who" not in terms
        assert len(terms) == len(set(terms))
