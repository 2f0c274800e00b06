"""
Tests for suggestion severity and keyword classification.
"""
import pytest

from resume_optimizer.content import ResumeContent
from resume_optimizer.scoring import (
    Suggestion, KeywordCategory, classify_suggestion_severity, classify_keyword
)
from resume_optimizer.scoring.classifier import round_half_up, keyword_present
from resume_optimizer.scoring.patterns import SEVERITY_WORDS, KEYWORD_PATTERNS


def severity(category, impact):
    return classify_suggestion_severity(
        Suggestion(category=category, impact_description=impact)
    )


class TestSuggestionSeverity:

    def test_critical_skills_suggestion(self, critical_skills_suggestion):
        assert classify_suggestion_severity(critical_skills_suggestion) == 10

    def test_unknown_category_uses_default_weight(self):
        assert severity("achievement", "") == 6
        assert severity("general", "") == 6

    def test_severity_word_nudges_halfway(self):
        # 5 + (3 - 5) * 0.5
        assert severity("formatting", "A minor cleanup") == 4

    def test_half_values_round_up(self):
        # 4 + (1 - 4) * 0.5 = 2.5
        assert severity("language", "slight wording change") == 3

    def test_first_severity_word_wins(self):
        # critical is listed before minor
        assert severity("structure", "minor now, critical later") == 9

    def test_severity_words_match_substrings(self):
        assert severity("formatting", "smaller margins") == 4

    def test_severity_words_case_insensitive(self):
        assert severity("skills", "CRITICAL") == 10

    def test_quantifiable_impact_bonus(self):
        assert severity("language", "Lifts response rate by 30%") == 5
        assert severity("language", "doubles callbacks") == 5
        assert severity("language", "increases by 12 the matches") == 5

    def test_ats_terms_bonus(self):
        assert severity("content", "Lets the applicant tracking software read it") == 8

    def test_clamped_to_ten(self):
        assert severity("ats", "critical: 50% better ATS scan") == 10

    def test_missing_impact_gives_category_base(self):
        suggestion = Suggestion(category="skills", impact_description=None)
        assert classify_suggestion_severity(suggestion) == 9

    def test_deterministic(self, mixed_suggestions):
        first = [classify_suggestion_severity(s) for s in mixed_suggestions]
        second = [classify_suggestion_severity(s) for s in mixed_suggestions]
        assert first == second == [9, 4, 7]

    def test_severity_table_order_is_preserved(self):
        words = [word for word, _ in SEVERITY_WORDS]
        assert words[:3] == ['critical', 'crucial', 'essential']
        assert words[-2:] == ['slight', 'minimal']


class TestKeywordClassification:

    def test_technical_keyword_not_in_resume(self):
        result = classify_keyword("Python", "Experienced data engineer")
        assert result.category == KeywordCategory.TECHNICAL
        assert result.impact_weight == pytest.approx(0.9)

    def test_keyword_already_present(self):
        result = classify_keyword("Python", "Built services in python and Go")
        assert result.impact_weight == pytest.approx(0.6)

    def test_presence_requires_whole_word(self):
        result = classify_keyword("Python", "Writes Pythonic code")
        assert result.impact_weight == pytest.approx(0.9)

    @pytest.mark.parametrize("text,category", [
        ("Leadership", KeywordCategory.SOFT_SKILL),
        ("Project management", KeywordCategory.SOFT_SKILL),
        ("Delivered", KeywordCategory.ACTION_VERB),
        ("Compliance", KeywordCategory.INDUSTRY_SPECIFIC),
        ("Cooking", KeywordCategory.GENERAL),
        ("Process design", KeywordCategory.TECHNICAL),
    ])
    def test_categories(self, text, category):
        assert classify_keyword(text, "").category == category

    def test_cascade_priority(self):
        # "framework" is in both the technical and industry patterns
        assert classify_keyword("Framework", "").category == KeywordCategory.TECHNICAL
        assert [c for c, _ in KEYWORD_PATTERNS] == [
            KeywordCategory.TECHNICAL,
            KeywordCategory.SOFT_SKILL,
            KeywordCategory.ACTION_VERB,
            KeywordCategory.INDUSTRY_SPECIFIC,
        ]

    def test_weight_floor(self):
        result = classify_keyword("Cooking", "I enjoy cooking")
        assert result.impact_weight == pytest.approx(0.1)

    def test_accepts_structured_content(self):
        content = ResumeContent.from_sections({'resume-skills': "Python, SQL"})
        assert classify_keyword("SQL", content).impact_weight == pytest.approx(0.6)

    def test_blank_keyword_is_never_present(self):
        assert keyword_present("  ", "anything") is False
        assert classify_keyword("", "anything").category == KeywordCategory.GENERAL

    def test_special_characters_are_escaped(self):
        assert keyword_present("Node.js", "Shipped Node.js APIs")
        assert not keyword_present("Node.js", "Shipped Nodexjs APIs")

    def test_punctuated_keywords_match(self):
        assert keyword_present("C++", "Senior C++ developer")
        assert keyword_present("C#", "Built services in C#.")
        assert keyword_present(".NET", "Migrated to .NET 8")
        assert not keyword_present("C++", "Senior C++11developer")

    def test_punctuated_keyword_present_takes_penalty(self):
        absent = classify_keyword("C++", "Senior Java developer")
        present = classify_keyword("C++", "Senior C++ developer")
        assert present.impact_weight == pytest.approx(absent.impact_weight - 0.3)


@pytest.mark.parametrize("value,expected", [
    (2.5, 3), (9.5, 10), (8.5, 9), (2.4, 2), (-2.5, -2), (0.0, 0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
