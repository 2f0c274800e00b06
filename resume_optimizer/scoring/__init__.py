# resume_optimizer/scoring/__init__.py
"""
Incremental ATS score simulation
"""

from resume_optimizer.scoring.models import (
    Suggestion, Keyword, ScoreBreakdown, KeywordClassification,
    SuggestionImpact, KeywordImpact, SimulatedImpact, ImpactDetails,
    KeywordCategory, ImpactLevel
)
from resume_optimizer.scoring.exceptions import ScoringError, InvalidIndexError
from resume_optimizer.scoring.classifier import (
    classify_suggestion_severity, classify_keyword, categorize_keyword
)
from resume_optimizer.scoring.impact import (
    suggestion_point_impact, keyword_point_impact, get_impact_level,
    suggestion_impact_description, keyword_impact_description
)
from resume_optimizer.scoring.sections import evaluate_sections, weighted_section_score
from resume_optimizer.scoring.aggregator import (
    ImpactCache, calculate_detailed_score, calculate_potential
)
from resume_optimizer.scoring.session import ScoreSession
from resume_optimizer.scoring.loader import load_items
from resume_optimizer.scoring.metrics import (
    OptimizationMetrics, generate_metrics, export_metrics, save_state, load_state
)

__all__ = [
    'Suggestion',
    'Keyword',
    'ScoreBreakdown',
    'KeywordClassification',
    'SuggestionImpact',
    'KeywordImpact',
    'SimulatedImpact',
    'ImpactDetails',
    'KeywordCategory',
    'ImpactLevel',
    'ScoringError',
    'InvalidIndexError',
    'classify_suggestion_severity',
    'classify_keyword',
    'categorize_keyword',
    'suggestion_point_impact',
    'keyword_point_impact',
    'get_impact_level',
    'suggestion_impact_description',
    'keyword_impact_description',
    'evaluate_sections',
    'weighted_section_score',
    'ImpactCache',
    'calculate_detailed_score',
    'calculate_potential',
    'ScoreSession',
    'load_items',
    'OptimizationMetrics',
    'generate_metrics',
    'export_metrics',
    'save_state',
    'load_state',
]
