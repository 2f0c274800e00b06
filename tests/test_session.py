"""
Tests for the interactive score session.
"""
import pytest

from resume_optimizer.config import ScoringConfig
from resume_optimizer.scoring import (
    ScoreSession, Suggestion, Keyword, InvalidIndexError, ImpactLevel
)
from resume_optimizer.scoring import aggregator


@pytest.fixture
def session(critical_skills_suggestion):
    return ScoreSession(
        65,
        "Data engineer",
        suggestions=[critical_skills_suggestion],
        keywords=[Keyword(id="python", text="Python"), Keyword(id="cook", text="Cooking")],
    )


class TestToggle:

    def test_apply_suggestion(self, session):
        breakdown = session.apply_suggestion(0)

        assert session.suggestions[0].is_applied is True
        assert breakdown.suggestion_points == 1
        assert breakdown.total == 66
        assert session.current_score == 66

    def test_toggle_twice_restores_breakdown(self, session):
        original = session.breakdown

        session.apply_suggestion(0)
        restored = session.apply_suggestion(0)

        assert session.suggestions[0].is_applied is False
        assert restored == original

    def test_toggle_keyword_twice(self, session):
        original = session.breakdown
        session.apply_keyword(1)
        assert session.keywords[1].is_applied is True
        assert session.apply_keyword(1) == original

    @pytest.mark.parametrize("index", [-1, 1, 99])
    def test_invalid_suggestion_index(self, session, index):
        before = session.breakdown
        with pytest.raises(InvalidIndexError) as exc_info:
            session.apply_suggestion(index)

        assert exc_info.value.kind == 'suggestion'
        assert session.breakdown == before

    def test_invalid_keyword_index_is_index_error(self, session):
        with pytest.raises(IndexError):
            session.apply_keyword(2)


class TestBulkOperations:

    def test_apply_all_and_reset(self, session):
        applied = session.apply_all()
        assert all(s.is_applied for s in session.suggestions)
        assert all(k.is_applied for k in session.keywords)
        assert applied.total > 65
        assert applied.potential == applied.total

        reset = session.reset_all()
        assert reset.total == 65
        assert reset.suggestion_points == reset.keyword_points == 0
        assert session.applied_suggestions() == []
        assert session.applied_keywords() == []

    def test_apply_all_beats_any_subset(self, session):
        session.apply_keyword(0)
        partial = session.current_score
        assert session.apply_all().total >= partial

    def test_apply_all_suggestions_only(self, session):
        session.apply_all_suggestions()
        assert session.applied_suggestions() == session.suggestions
        assert session.applied_keywords() == []

    def test_apply_all_keywords_only(self, session):
        session.apply_all_keywords()
        assert session.applied_suggestions() == []
        assert len(session.applied_keywords()) == 2

    def test_potential_score(self, session):
        assert session.potential_score >= session.current_score


class TestContentUpdates:

    def test_keyword_reweighted_on_content_change(self):
        session = ScoreSession(0, "", keywords=[Keyword(text="Python", is_applied=True)])
        assert session.breakdown.keyword_points == 2

        breakdown = session.update_resume_content("Built services in Python")
        assert breakdown.keyword_points == 1
        assert breakdown.total == 1

    def test_suggestions_not_reclassified(self, session, monkeypatch):
        calls = []
        monkeypatch.setattr(
            aggregator, 'analyze_suggestion', lambda s: calls.append(s) or None
        )
        session.update_resume_content("Python developer")
        assert calls == []

    def test_same_content_is_noop(self, session):
        before = session.breakdown
        assert session.update_resume_content("Data engineer") is before

    def test_section_scores_follow_content(self, session):
        breakdown = session.update_resume_content('<div id="resume-skills">Python</div>')
        assert breakdown.section_scores['resume-skills'] == 70


class TestBaseScore:

    def test_update_base_score(self, session):
        assert session.update_base_score(80).total == 80
        assert session.base_score == 80

    @pytest.mark.parametrize("value", [-1, 101, float('nan'), float('inf'), "70", True])
    def test_invalid_base_score_rejected(self, session, value):
        before = session.breakdown
        assert session.update_base_score(value) is before
        assert session.base_score == 65


class TestSimulation:

    def test_simulate_suggestion(self, session):
        before = session.breakdown
        simulated = session.simulate_suggestion_impact(0)

        assert simulated.new_score == 66
        assert simulated.point_impact == pytest.approx(2.7)
        assert simulated.description == "Critical improvement (+2.7 points)"
        assert session.suggestions[0].is_applied is False
        assert session.breakdown == before

    def test_simulate_applied_suggestion(self, session):
        session.apply_suggestion(0)
        simulated = session.simulate_suggestion_impact(0)
        assert simulated.new_score == session.current_score
        assert simulated.point_impact == 0
        assert simulated.description == "Already applied"

    def test_simulate_keyword(self, session):
        simulated = session.simulate_keyword_impact(0)
        # 1.8 * (1 - 65/120) = 0.825
        assert simulated.new_score == 66
        assert simulated.description == "Essential keyword (+1.8 points)"
        assert session.keywords[0].is_applied is False

    def test_simulate_invalid_index(self, session):
        with pytest.raises(InvalidIndexError):
            session.simulate_keyword_impact(5)


class TestDetails:

    def test_suggestion_details(self, session):
        details = session.suggestion_details(0)
        assert details.severity_score == 10
        assert details.level == ImpactLevel.CRITICAL
        assert details.category == "skills"

    def test_keyword_details(self, session):
        details = session.keyword_details(1)
        assert details.category == "general"
        assert details.impact_weight == pytest.approx(0.4)
        assert details.level == ImpactLevel.MEDIUM
        assert details.to_dict()['level'] == "medium"

    def test_with_impact_lists(self, session):
        assert len(session.suggestions_with_impact()) == 1
        assert [d.category for d in session.keywords_with_impact()] == ["technical", "general"]


class TestLifecycle:

    def test_on_score_change_callback(self, critical_skills_suggestion):
        scores = []
        session = ScoreSession(
            65, "", [critical_skills_suggestion], on_score_change=scores.append
        )
        session.apply_suggestion(0)
        assert scores == [65, 66]

    def test_replace_items(self, session):
        breakdown = session.replace_items(
            [Suggestion(category="formatting", is_applied=True)], []
        )
        assert len(session.suggestions) == 1
        assert session.keywords == []
        assert breakdown.keyword_points == 0

    def test_round_trip(self, session):
        session.apply_suggestion(0)
        session.apply_keyword(1)

        restored = ScoreSession.from_dict(session.to_dict())

        assert restored.breakdown == session.breakdown
        assert [s.id for s in restored.suggestions] == [s.id for s in session.suggestions]
        assert restored.keywords[1].is_applied is True

    def test_config_section_ids(self):
        config = ScoringConfig(section_ids=['resume-skills'])
        session = ScoreSession(50, "", config=config)
        assert list(session.breakdown.section_scores) == ['resume-skills']

    def test_sessions_are_independent(self):
        first = ScoreSession(50, "", keywords=[Keyword(id="same", text="Python")])
        second = ScoreSession(50, "Python", keywords=[Keyword(id="same", text="Python")])

        first.apply_keyword(0)
        second.apply_keyword(0)

        assert first.keyword_details(0).point_impact == pytest.approx(1.8)
        assert second.keyword_details(0).point_impact == pytest.approx(1.2)
