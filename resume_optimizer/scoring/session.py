# resume_optimizer/scoring/session.py
import math
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from resume_optimizer.config import ScoringConfig
from resume_optimizer.content import ResumeContent, coerce_content
from resume_optimizer.scoring.models import (
    Suggestion, Keyword, ScoreBreakdown, SimulatedImpact, ImpactDetails
)
from resume_optimizer.scoring.aggregator import ImpactCache, calculate_detailed_score
from resume_optimizer.scoring.impact import (
    get_impact_level, suggestion_impact_description, keyword_impact_description
)
from resume_optimizer.scoring.exceptions import InvalidIndexError

logger = logging.getLogger(__name__)


class ScoreSession:
    """
    Interactive ATS score state for one optimization pass

    Holds the suggestions and keywords of a single AI response and keeps the
    score breakdown in sync as the user toggles items. Each user needs their
    own session; nothing is shared between instances.
    """

    def __init__(
        self,
        base_score: float,
        resume_content: Union[ResumeContent, str, None],
        suggestions: Optional[Sequence[Suggestion]] = None,
        keywords: Optional[Sequence[Keyword]] = None,
        config: Optional[ScoringConfig] = None,
        on_score_change: Optional[Callable[[int], None]] = None
    ):
        self.config = config or ScoringConfig()
        self.on_score_change = on_score_change

        self._base_score = base_score
        self._content = coerce_content(resume_content)
        self.suggestions: List[Suggestion] = list(suggestions or [])
        self.keywords: List[Keyword] = list(keywords or [])
        self._cache = ImpactCache()
        self._breakdown: Optional[ScoreBreakdown] = None

        self._recalculate()

        logger.info(
            f"Score session started: base {base_score}, "
            f"{len(self.suggestions)} suggestions, {len(self.keywords)} keywords"
        )

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def breakdown(self) -> ScoreBreakdown:
        return self._breakdown

    @property
    def current_score(self) -> int:
        return self._breakdown.total

    @property
    def potential_score(self) -> int:
        return self._breakdown.potential

    @property
    def base_score(self) -> float:
        return self._base_score

    @property
    def resume_content(self) -> ResumeContent:
        return self._content

    def applied_suggestions(self) -> List[Suggestion]:
        return [s for s in self.suggestions if s.is_applied]

    def applied_keywords(self) -> List[Keyword]:
        return [k for k in self.keywords if k.is_applied]

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def apply_suggestion(self, index: int) -> ScoreBreakdown:
        """Toggle a suggestion on or off"""
        suggestion = self._suggestion_at(index)
        suggestion.is_applied = not suggestion.is_applied
        return self._recalculate()

    def apply_keyword(self, index: int) -> ScoreBreakdown:
        """Toggle a keyword on or off"""
        keyword = self._keyword_at(index)
        keyword.is_applied = not keyword.is_applied
        return self._recalculate()

    def apply_all_suggestions(self) -> ScoreBreakdown:
        for suggestion in self.suggestions:
            suggestion.is_applied = True
        return self._recalculate()

    def apply_all_keywords(self) -> ScoreBreakdown:
        for keyword in self.keywords:
            keyword.is_applied = True
        return self._recalculate()

    def apply_all(self) -> ScoreBreakdown:
        """Mark every suggestion and keyword as applied"""
        for item in self.suggestions + self.keywords:
            item.is_applied = True
        return self._recalculate()

    def reset_all(self) -> ScoreBreakdown:
        """Unapply everything; the total falls back to the base score"""
        for item in self.suggestions + self.keywords:
            item.is_applied = False
        return self._recalculate()

    def update_resume_content(self, content: Union[ResumeContent, str, None]) -> ScoreBreakdown:
        """
        Rescore against new resume content

        Keyword presence and section scores depend on the content, so keyword
        entries are dropped from the cache. Suggestion severities are kept.
        """
        content = coerce_content(content)
        if content == self._content:
            return self._breakdown

        self._content = content
        self._cache.invalidate_keywords()
        return self._recalculate()

    def update_base_score(self, base_score: float) -> ScoreBreakdown:
        """Replace the base score, e.g. after the AI re-assessed the resume"""
        if (
            not isinstance(base_score, (int, float)) or
            isinstance(base_score, bool) or
            math.isnan(base_score) or
            not 0 <= base_score <= 100
        ):
            logger.warning(f"Invalid base score value: {base_score!r}")
            return self._breakdown

        logger.info(f"Updating base score from {self._base_score} to {base_score}")
        self._base_score = base_score
        return self._recalculate()

    def replace_items(
        self,
        suggestions: Sequence[Suggestion],
        keywords: Sequence[Keyword]
    ) -> ScoreBreakdown:
        """Swap in the items of a new optimization pass"""
        self.suggestions = list(suggestions)
        self.keywords = list(keywords)
        self._cache.clear()
        return self._recalculate()

    # ------------------------------------------------------------------
    # Simulation and per-item details
    # ------------------------------------------------------------------

    def simulate_suggestion_impact(self, index: int) -> SimulatedImpact:
        """Project the score if a suggestion were applied, without applying it"""
        suggestion = self._suggestion_at(index)
        if suggestion.is_applied:
            return SimulatedImpact(self.current_score, 0, "Already applied")

        impact = self._cache.suggestion(suggestion)
        suggestion.is_applied = True
        try:
            simulated = self._score()
        finally:
            suggestion.is_applied = False

        return SimulatedImpact(
            new_score=simulated.total,
            point_impact=impact.point_impact,
            description=suggestion_impact_description(impact)
        )

    def simulate_keyword_impact(self, index: int) -> SimulatedImpact:
        """Project the score if a keyword were applied, without applying it"""
        keyword = self._keyword_at(index)
        if keyword.is_applied:
            return SimulatedImpact(self.current_score, 0, "Already applied")

        impact = self._cache.keyword(keyword, self._content)
        keyword.is_applied = True
        try:
            simulated = self._score()
        finally:
            keyword.is_applied = False

        return SimulatedImpact(
            new_score=simulated.total,
            point_impact=impact.point_impact,
            description=keyword_impact_description(impact)
        )

    def suggestion_details(self, index: int) -> ImpactDetails:
        suggestion = self._suggestion_at(index)
        impact = self._cache.suggestion(suggestion)
        return ImpactDetails(
            point_impact=impact.point_impact,
            level=get_impact_level(impact.severity_score / 10),
            description=suggestion_impact_description(impact),
            severity_score=impact.severity_score,
            category=suggestion.category
        )

    def keyword_details(self, index: int) -> ImpactDetails:
        keyword = self._keyword_at(index)
        impact = self._cache.keyword(keyword, self._content)
        return ImpactDetails(
            point_impact=impact.point_impact,
            level=get_impact_level(impact.impact_weight),
            description=keyword_impact_description(impact),
            impact_weight=impact.impact_weight,
            category=impact.category.value
        )

    def suggestions_with_impact(self) -> List[ImpactDetails]:
        return [self.suggestion_details(i) for i in range(len(self.suggestions))]

    def keywords_with_impact(self) -> List[ImpactDetails]:
        return [self.keyword_details(i) for i in range(len(self.keywords))]

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            'base_score': self._base_score,
            'resume_text': self._content.text,
            'suggestions': [s.to_dict() for s in self.suggestions],
            'keywords': [k.to_dict() for k in self.keywords],
            'breakdown': self._breakdown.to_dict(),
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        resume_content: Union[ResumeContent, str, None] = None,
        config: Optional[ScoringConfig] = None
    ) -> 'ScoreSession':
        """
        Restore a session from ``to_dict`` output

        Section structure is not serialized; pass ``resume_content`` to
        restore it, otherwise the stored plain text is used.
        """
        if resume_content is None:
            resume_content = data.get('resume_text', "")

        return cls(
            base_score=data.get('base_score', 0),
            resume_content=resume_content,
            suggestions=[Suggestion.from_dict(s) for s in data.get('suggestions', [])],
            keywords=[Keyword.from_dict(k) for k in data.get('keywords', [])],
            config=config
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _suggestion_at(self, index: int) -> Suggestion:
        if not 0 <= index < len(self.suggestions):
            raise InvalidIndexError('suggestion', index, len(self.suggestions))
        return self.suggestions[index]

    def _keyword_at(self, index: int) -> Keyword:
        if not 0 <= index < len(self.keywords):
            raise InvalidIndexError('keyword', index, len(self.keywords))
        return self.keywords[index]

    def _score(self) -> ScoreBreakdown:
        return calculate_detailed_score(
            self._base_score,
            self.suggestions,
            self.keywords,
            self._content,
            cache=self._cache,
            section_ids=self.config.section_ids
        )

    def _recalculate(self) -> ScoreBreakdown:
        self._breakdown = self._score()

        log = logger.info if self.config.debug else logger.debug
        log(
            f"Score recalculated: base {self._base_score}, total {self._breakdown.total}, "
            f"suggestions +{self._breakdown.suggestion_points}, "
            f"keywords +{self._breakdown.keyword_points}, "
            f"potential {self._breakdown.potential}"
        )

        if self.on_score_change:
            self.on_score_change(self._breakdown.total)

        return self._breakdown
