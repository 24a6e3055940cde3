"""Tests for gap-closure detection and tailoring pair analysis."""

from cv_arbiter.scoring.gaps import analyze_tailoring_pair, detect_gap_closures


def _names(closures):
    return [c.gap_name for c in closures]


class TestDetectGapClosures:
    def test_outcome_gap_closed(self):
        closures = detect_gap_closures(
            "Managed the project timeline",
            "Achieved 30% improvement in delivery speed, resulting in increased customer retention",
        )
        assert "Outcomes" in _names(closures)

    def test_data_gap_closed(self):
        closures = detect_gap_closures(
            "Built a new feature",
            "Used data and metrics to drive a 40% increase in adoption",
        )
        assert "data-driven-decisions" in [c.principle_id for c in closures]

    def test_leadership_gap_closed(self):
        closures = detect_gap_closures(
            "Managed team tasks efficiently",
            "Led cross-functional team and aligned stakeholders on launch",
        )
        assert "Leadership" in _names(closures)

    def test_gap_already_covered_is_not_closed(self):
        closures = detect_gap_closures(
            "Led team of stakeholders aligned on strategy",
            "Led cross-functional team and aligned stakeholders on launch",
        )
        assert "Leadership" not in _names(closures)

    def test_single_signal_is_not_enough(self):
        assert detect_gap_closures("Did work", "Worked with the team") == []

    def test_threshold_is_configurable(self):
        closures = detect_gap_closures("Did work", "Worked with the team", min_hits=1)
        assert _names(closures) == ["Leadership"]

    def test_identical_texts(self):
        text = "Led cross-functional team and aligned stakeholders on launch"
        assert detect_gap_closures(text, text) == []

    def test_empty_suggestion(self):
        assert detect_gap_closures("Managed team tasks", "") == []


class TestAnalyzeTailoringPair:
    ORIGINAL = "Managed the roadmap"
    SUGGESTED = "Led agile roadmap planning with Jira for 4 teams, increasing release velocity 30%"
    KEYWORDS = ["agile", "jira", "roadmap planning", "roadmap"]

    def test_matched_keywords_do_not_overlap(self):
        result = analyze_tailoring_pair(self.ORIGINAL, self.SUGGESTED, self.KEYWORDS)
        assert [m.keyword for m in result.matched_keywords] == ["agile", "roadmap planning", "Jira"]

    def test_match_positions(self):
        result = analyze_tailoring_pair(self.ORIGINAL, self.SUGGESTED, self.KEYWORDS)
        for match in result.matched_keywords:
            assert self.SUGGESTED[match.start_index : match.end_index] == match.keyword

    def test_score_delta(self):
        result = analyze_tailoring_pair(self.ORIGINAL, self.SUGGESTED, self.KEYWORDS)
        assert result.score_delta == result.suggested_score - result.original_score
        assert result.score_delta > 0

    def test_gaps_reported(self):
        result = analyze_tailoring_pair(self.ORIGINAL, self.SUGGESTED, self.KEYWORDS)
        assert "Outcomes" not in _names(result.gaps_closing)  # only one outcome signal
        assert all(g.principle_id for g in result.gaps_closing)

    def test_no_keywords(self):
        result = analyze_tailoring_pair(self.ORIGINAL, self.SUGGESTED, [])
        assert result.matched_keywords == []
