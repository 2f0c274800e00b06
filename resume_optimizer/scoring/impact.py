# resume_optimizer/scoring/impact.py
import logging
from typing import Optional, Union

from resume_optimizer.content import ResumeContent
from resume_optimizer.scoring.models import (
    Suggestion, Keyword, ImpactLevel, SuggestionImpact, KeywordImpact
)
from resume_optimizer.scoring.classifier import (
    classify_suggestion_severity, classify_keyword,
    suggestion_category_weight, round_half_up
)

logger = logging.getLogger(__name__)


def suggestion_point_impact(
    suggestion: Suggestion,
    severity_score: Optional[int] = None
) -> float:
    """
    Points a suggestion adds to the ATS score when applied (0.1 to 3.0)

    The classifier only runs when no severity is passed in or persisted on
    the suggestion.
    """
    if severity_score is None:
        severity_score = suggestion.severity_score
    if severity_score is None:
        severity_score = classify_suggestion_severity(suggestion)

    base_points = (severity_score / 10) * 3
    weight = suggestion_category_weight(suggestion.category)

    return round_half_up(base_points * weight * 10) / 10


def keyword_points_from_weight(impact_weight: float) -> float:
    return round_half_up(impact_weight * 2 * 10) / 10


def keyword_point_impact(
    keyword: Union[Keyword, str],
    resume_content: Union[ResumeContent, str, None]
) -> float:
    """Points a keyword adds to the ATS score when applied (0.1 to 2.0)"""
    text = keyword if isinstance(keyword, str) else keyword.text
    classification = classify_keyword(text, resume_content)
    return keyword_points_from_weight(classification.impact_weight)


def analyze_suggestion(suggestion: Suggestion) -> SuggestionImpact:
    """Classify a suggestion and compute its point impact in one go"""
    severity = suggestion.severity_score
    if severity is None:
        severity = classify_suggestion_severity(suggestion)
    return SuggestionImpact(
        severity_score=severity,
        point_impact=suggestion_point_impact(suggestion, severity)
    )


def analyze_keyword(
    keyword: Union[Keyword, str],
    resume_content: Union[ResumeContent, str, None]
) -> KeywordImpact:
    """Classify a keyword and compute its point impact in one go"""
    text = keyword if isinstance(keyword, str) else keyword.text
    classification = classify_keyword(text, resume_content)
    return KeywordImpact(
        category=classification.category,
        impact_weight=classification.impact_weight,
        point_impact=keyword_points_from_weight(classification.impact_weight)
    )


def get_impact_level(impact: float) -> ImpactLevel:
    """Map a normalized impact (0.0-1.0) to a descriptive level"""
    if impact >= 0.8:
        return ImpactLevel.CRITICAL
    elif impact >= 0.6:
        return ImpactLevel.HIGH
    elif impact >= 0.4:
        return ImpactLevel.MEDIUM
    return ImpactLevel.LOW


def format_points(points: float) -> str:
    return f"+{points:g} points"


def suggestion_impact_description(impact: SuggestionImpact) -> str:
    points = format_points(impact.point_impact)

    if impact.severity_score >= 8:
        return f"Critical improvement ({points})"
    elif impact.severity_score >= 6:
        return f"Major improvement ({points})"
    elif impact.severity_score >= 4:
        return f"Good improvement ({points})"
    return f"Minor improvement ({points})"


KEYWORD_LEVEL_LABELS = {
    ImpactLevel.CRITICAL: "Essential keyword",
    ImpactLevel.HIGH: "High-impact keyword",
    ImpactLevel.MEDIUM: "Helpful keyword",
    ImpactLevel.LOW: "Minor keyword",
}


def keyword_impact_description(impact: KeywordImpact) -> str:
    label = KEYWORD_LEVEL_LABELS[get_impact_level(impact.impact_weight)]
    return f"{label} ({format_points(impact.point_impact)})"
