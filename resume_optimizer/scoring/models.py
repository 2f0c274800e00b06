# resume_optimizer/scoring/models.py
import math
import uuid
from dataclasses import dataclass, field, asdict
from typing import Dict, Optional, Any, Union
from enum import Enum


class KeywordCategory(Enum):
    """Keyword categories, derived from the keyword text"""
    TECHNICAL = "technical"
    SOFT_SKILL = "soft-skill"
    ACTION_VERB = "action-verb"
    INDUSTRY_SPECIFIC = "industry-specific"
    GENERAL = "general"


class ImpactLevel(Enum):
    """Descriptive impact levels for suggestions and keywords"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


DEFAULT_SUGGESTION_CATEGORY = "general"

TRUE_STRINGS = {"true", "1", "yes", "y", "on"}


def _new_id() -> str:
    return uuid.uuid4().hex


def _normalize_category(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_SUGGESTION_CATEGORY
    return value.strip().lower()


def _normalize_severity(value: Any) -> Optional[int]:
    """Severity must be a number from 1 to 10; anything else is dropped"""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    if not 1 <= value <= 10:
        return None
    return int(math.floor(value + 0.5))


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    if isinstance(value, (bool, int, float)):
        return bool(value)
    return False


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    """Value of the first key that is present and not None"""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass
class Suggestion:
    """A resume-wide improvement suggestion from the AI"""
    text: str = ""
    category: str = DEFAULT_SUGGESTION_CATEGORY
    impact_description: str = ""
    is_applied: bool = False
    section: Optional[str] = None          # Target section, if any
    severity_score: Optional[int] = None   # Persisted severity (1-10)
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        self.category = _normalize_category(self.category)
        if not isinstance(self.impact_description, str):
            self.impact_description = ""
        if not isinstance(self.text, str):
            self.text = ""
        self.severity_score = _normalize_severity(self.severity_score)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Suggestion':
        """
        Build a suggestion from an AI or database payload

        Accepts ``type``/``impact`` (AI response), ``impactDescription``
        (client state) and ``category``/``impact_description`` keys. A null
        value falls through to the next alias. Missing fields degrade to
        defaults instead of raising.
        """
        data = data if isinstance(data, dict) else {}

        kwargs = dict(
            text=data.get('text') or "",
            category=_first_present(data, 'type', 'category'),
            impact_description=_first_present(
                data, 'impact', 'impactDescription', 'impact_description'
            ) or "",
            is_applied=_parse_flag(_first_present(data, 'isApplied', 'is_applied')),
            section=data.get('section'),
            severity_score=_first_present(data, 'score', 'severity_score'),
        )
        if data.get('id'):
            kwargs['id'] = str(data['id'])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Keyword:
    """A single recommended keyword"""
    text: str = ""
    is_applied: bool = False
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        if not isinstance(self.text, str):
            self.text = ""

    @classmethod
    def from_dict(cls, data: Union[str, Dict[str, Any]]) -> 'Keyword':
        """Build a keyword from a bare string or a keyword payload"""
        if isinstance(data, str):
            return cls(text=data)
        data = data if isinstance(data, dict) else {}

        kwargs = dict(
            text=data.get('text') or "",
            is_applied=_parse_flag(_first_present(data, 'applied', 'isApplied', 'is_applied')),
        )
        if data.get('id'):
            kwargs['id'] = str(data['id'])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class KeywordClassification:
    """Result of keyword classification"""
    category: KeywordCategory
    impact_weight: float           # 0.1 to 1.0


@dataclass(frozen=True)
class SuggestionImpact:
    """Cached derived values for a suggestion"""
    severity_score: int            # 1 to 10
    point_impact: float            # 0.1 to 3.0


@dataclass(frozen=True)
class KeywordImpact:
    """Cached derived values for a keyword"""
    category: KeywordCategory
    impact_weight: float           # 0.1 to 1.0
    point_impact: float            # 0.1 to 2.0


@dataclass(frozen=True)
class ScoreBreakdown:
    """Aggregate ATS score result"""
    base: float
    suggestion_points: int         # Display only
    keyword_points: int            # Display only
    total: int                     # 0-100
    potential: int                 # total to 100
    section_scores: Dict[str, int] = field(default_factory=dict)

    @property
    def remaining(self) -> int:
        """Points still obtainable from unapplied items"""
        return self.potential - self.total

    def to_dict(self) -> Dict[str, Any]:
        return {
            'base': self.base,
            'suggestion_points': self.suggestion_points,
            'keyword_points': self.keyword_points,
            'total': self.total,
            'potential': self.potential,
            'section_scores': dict(self.section_scores),
        }


@dataclass(frozen=True)
class SimulatedImpact:
    """Projected effect of applying one item"""
    new_score: int
    point_impact: float
    description: str


@dataclass(frozen=True)
class ImpactDetails:
    """Per-item impact badge data for the UI"""
    point_impact: float
    level: ImpactLevel
    description: str
    severity_score: Optional[int] = None       # Suggestions only
    impact_weight: Optional[float] = None      # Keywords only
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['level'] = self.level.value
        return data
