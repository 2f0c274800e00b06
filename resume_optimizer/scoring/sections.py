# resume_optimizer/scoring/sections.py
import logging
from typing import Dict, Iterable, Optional, Union

from resume_optimizer.content import (
    ResumeContent, SectionContent, SECTION_WEIGHTS, coerce_content
)
from resume_optimizer.scoring.patterns import SECTION_METRIC_PATTERN

logger = logging.getLogger(__name__)

# Score for a section detected only by its marker in unstructured content
MARKER_ONLY_SCORE = 70


def score_section(section: SectionContent) -> int:
    """
    Quality score for a single present section (0-100)

    Scoring:
    - 50 for being present
    - +15 / +10 / +5 for more than 500 / 200 / 100 characters
    - +10 for at least one list item
    - +15 for quantifiable metrics (percentages, currency, "N times")
    """
    score = 50

    length = len(section.text)
    if length > 500:
        score += 15
    elif length > 200:
        score += 10
    elif length > 100:
        score += 5

    if section.list_items > 0:
        score += 10

    if SECTION_METRIC_PATTERN.search(section.text):
        score += 15

    return min(100, score)


def evaluate_sections(
    resume_content: Union[ResumeContent, str, None],
    section_ids: Optional[Iterable[str]] = None
) -> Dict[str, int]:
    """
    Score every known resume section independently

    Args:
        resume_content: Structured content, or a bare string
        section_ids: Sections to evaluate (defaults to all known sections)

    Returns:
        Mapping of section id to score; absent sections score 0
    """
    content = coerce_content(resume_content)
    if section_ids is None:
        section_ids = SECTION_WEIGHTS

    scores = {}
    for section_id in section_ids:
        if not content.is_structured:
            scores[section_id] = MARKER_ONLY_SCORE if content.has_marker(section_id) else 0
            continue

        section = content.sections.get(section_id)
        scores[section_id] = score_section(section) if section is not None else 0

    return scores


def weighted_section_score(section_scores: Dict[str, int]) -> float:
    """Importance-weighted mean of the section scores (0-100)"""
    total_weight = 0.0
    weighted = 0.0

    for section_id, score in section_scores.items():
        weight = SECTION_WEIGHTS.get(section_id, 0.0)
        weighted += score * weight
        total_weight += weight

    if total_weight == 0:
        return 0.0
    return weighted / total_weight
