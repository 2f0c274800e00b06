# resume_optimizer/scoring/aggregator.py
import math
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from resume_optimizer.content import ResumeContent, coerce_content
from resume_optimizer.scoring.models import (
    Suggestion, Keyword, SuggestionImpact, KeywordImpact, ScoreBreakdown
)
from resume_optimizer.scoring.impact import analyze_suggestion, analyze_keyword
from resume_optimizer.scoring.classifier import round_half_up, clamp
from resume_optimizer.scoring.sections import evaluate_sections

logger = logging.getLogger(__name__)


class ImpactCache:
    """
    Memo table of derived item values, keyed by item id

    Each entry remembers the inputs it was computed from and is recomputed
    when they differ. Keyword entries depend on the resume text, suggestion
    entries do not.
    """

    def __init__(self):
        self._suggestions: Dict[str, Tuple[tuple, SuggestionImpact]] = {}
        self._keywords: Dict[str, Tuple[tuple, KeywordImpact]] = {}

    def suggestion(self, suggestion: Suggestion) -> SuggestionImpact:
        key = (suggestion.category, suggestion.impact_description, suggestion.severity_score)
        cached = self._suggestions.get(suggestion.id)
        if cached is not None and cached[0] == key:
            return cached[1]

        impact = analyze_suggestion(suggestion)
        self._suggestions[suggestion.id] = (key, impact)
        return impact

    def keyword(self, keyword: Keyword, content: ResumeContent) -> KeywordImpact:
        key = (keyword.text, content.text)
        cached = self._keywords.get(keyword.id)
        if cached is not None and cached[0] == key:
            return cached[1]

        impact = analyze_keyword(keyword, content)
        self._keywords[keyword.id] = (key, impact)
        return impact

    def invalidate_keywords(self):
        """Drop keyword entries, e.g. after the resume content changed"""
        self._keywords.clear()

    def clear(self):
        self._suggestions.clear()
        self._keywords.clear()

    def __len__(self):
        return len(self._suggestions) + len(self._keywords)


def sanitize_base_score(base_score: float) -> float:
    """Replace non-finite base scores so arithmetic stays finite"""
    try:
        value = float(base_score)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return 100.0 if value > 0 else 0.0
    return value


def diminishing_factor(base_score: float) -> float:
    """The closer the base is to 100, the less each improvement is worth"""
    return max(0.1, 1 - (base_score / 120))


def calculate_potential(
    unapplied_suggestions: Sequence[Suggestion],
    unapplied_keywords: Sequence[Keyword],
    resume_content: Union[ResumeContent, str, None],
    cache: Optional[ImpactCache] = None
) -> int:
    """
    Points obtainable if every remaining item were applied

    Diminishing returns depend on the number of remaining items, not on
    the base score.
    """
    total_items = len(unapplied_suggestions) + len(unapplied_keywords)
    if total_items == 0:
        return 0

    cache = cache if cache is not None else ImpactCache()
    content = coerce_content(resume_content)

    raw_points = sum(cache.suggestion(s).point_impact for s in unapplied_suggestions)
    raw_points += sum(cache.keyword(k, content).point_impact for k in unapplied_keywords)

    factor = 1 / (1 + (total_items / 20))
    return round_half_up(raw_points * factor)


def _split_applied(items: Iterable) -> Tuple[List, List]:
    applied, unapplied = [], []
    for item in items:
        (applied if item.is_applied else unapplied).append(item)
    return applied, unapplied


def calculate_detailed_score(
    base_score: float,
    suggestions: Sequence[Suggestion],
    keywords: Sequence[Keyword],
    resume_content: Union[ResumeContent, str, None],
    cache: Optional[ImpactCache] = None,
    section_ids: Optional[Iterable[str]] = None
) -> ScoreBreakdown:
    """
    Combine base score and applied items into a score breakdown

    Args:
        base_score: Initial ATS score from the AI assessment (0-100)
        suggestions: All suggestions, applied and unapplied
        keywords: All keywords, applied and unapplied
        resume_content: Current resume content
        cache: Memo table to reuse between calls (a fresh one otherwise)
        section_ids: Sections to evaluate (defaults to all known sections)

    Returns:
        ScoreBreakdown with total and potential clamped to 0-100
    """
    cache = cache if cache is not None else ImpactCache()
    content = coerce_content(resume_content)
    base = sanitize_base_score(base_score)

    applied_suggestions, unapplied_suggestions = _split_applied(suggestions)
    applied_keywords, unapplied_keywords = _split_applied(keywords)

    suggestion_raw = sum(cache.suggestion(s).point_impact for s in applied_suggestions)
    keyword_raw = sum(cache.keyword(k, content).point_impact for k in applied_keywords)

    factor = diminishing_factor(base)
    scaled_suggestions = suggestion_raw * factor
    scaled_keywords = keyword_raw * factor

    # Total uses the unrounded sums; per-source points are for display
    total = int(clamp(round_half_up(base + scaled_suggestions + scaled_keywords), 0, 100))

    potential_points = calculate_potential(
        unapplied_suggestions, unapplied_keywords, content, cache
    )
    potential = int(clamp(total + potential_points, 0, 100))

    breakdown = ScoreBreakdown(
        base=base,
        suggestion_points=round_half_up(scaled_suggestions),
        keyword_points=round_half_up(scaled_keywords),
        total=total,
        potential=potential,
        section_scores=evaluate_sections(content, section_ids)
    )

    logger.debug(
        f"Score {breakdown.total}/100 (base {base:g}, "
        f"+{breakdown.suggestion_points} suggestions, +{breakdown.keyword_points} keywords, "
        f"potential {breakdown.potential})"
    )
    return breakdown
