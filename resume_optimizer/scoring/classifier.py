# resume_optimizer/scoring/classifier.py
import re
import math
import logging
from typing import Union

from resume_optimizer.content import ResumeContent, coerce_content
from resume_optimizer.scoring.models import (
    Suggestion, KeywordCategory, KeywordClassification
)
from resume_optimizer.scoring.patterns import (
    SUGGESTION_CATEGORY_WEIGHTS, DEFAULT_SUGGESTION_WEIGHT, SEVERITY_WORDS,
    QUANTIFIABLE_IMPACT_PATTERN, ATS_TERMS_PATTERN,
    KEYWORD_CATEGORY_WEIGHTS, KEYWORD_PATTERNS, ALREADY_PRESENT_PENALTY
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round with halves going up (2.5 -> 3, -2.5 -> -2)"""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def suggestion_category_weight(category: str) -> float:
    return SUGGESTION_CATEGORY_WEIGHTS.get(category, DEFAULT_SUGGESTION_WEIGHT)


def classify_suggestion_severity(suggestion: Suggestion) -> int:
    """
    Score a suggestion's severity from its category and impact description

    Scoring:
    - Base from category weight (0.6 for unknown categories)
    - First severity word found pulls the base halfway towards its value
    - +1 for quantifiable impact (percentages, "doubles", ...)
    - +1 for ATS-specific terms

    Returns:
        Severity from 1 to 10
    """
    score = float(round_half_up(suggestion_category_weight(suggestion.category) * 10))
    impact_text = (suggestion.impact_description or "").lower()

    for word, value in SEVERITY_WORDS:
        if word in impact_text:
            score += (value - score) * 0.5
            break

    if QUANTIFIABLE_IMPACT_PATTERN.search(impact_text):
        score += 1

    if ATS_TERMS_PATTERN.search(impact_text):
        score += 1

    return int(clamp(round_half_up(score), 1, 10))


def categorize_keyword(text: str) -> KeywordCategory:
    """Run the keyword pattern cascade, first match wins"""
    for category, pattern in KEYWORD_PATTERNS:
        if pattern.search(text):
            return category
    return KeywordCategory.GENERAL


def keyword_present(text: str, resume_text: str) -> bool:
    """
    Case-insensitive whole-word search for the keyword in resume text

    Word boundaries are lookarounds on word characters, so keywords that
    start or end with punctuation (C++, .NET) still match.
    """
    if not text or not text.strip():
        return False
    return re.search(r'(?<!\w)' + re.escape(text) + r'(?!\w)', resume_text, re.IGNORECASE) is not None


def classify_keyword(
    text: str,
    resume_content: Union[ResumeContent, str, None]
) -> KeywordClassification:
    """
    Categorize a keyword and weigh its impact

    Keywords already present in the resume are worth 0.3 less.

    Args:
        text: Keyword text
        resume_content: Current resume content

    Returns:
        KeywordClassification with category and impact weight (0.1-1.0)
    """
    text = text if isinstance(text, str) else ""
    content = coerce_content(resume_content)

    category = categorize_keyword(text)
    penalty = ALREADY_PRESENT_PENALTY if keyword_present(text, content.text) else 0.0
    weight = clamp(KEYWORD_CATEGORY_WEIGHTS[category] - penalty, 0.1, 1.0)

    return KeywordClassification(category=category, impact_weight=weight)
