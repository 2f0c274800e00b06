# resume_optimizer/scoring/metrics.py
import csv
import io
import json
import logging
from collections import Counter
from dataclasses import dataclass, field, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from resume_optimizer.scoring.models import Suggestion, Keyword
from resume_optimizer.scoring.classifier import categorize_keyword

logger = logging.getLogger(__name__)


@dataclass
class OptimizationMetrics:
    """Summary of what the user did during one optimization session"""
    initial_score: float
    final_score: int
    improvement: float
    applied_suggestion_count: int
    applied_keyword_count: int
    suggestion_categories: Dict[str, int] = field(default_factory=dict)
    keyword_categories: Dict[str, int] = field(default_factory=dict)
    seconds_to_optimize: int = 0
    sections_improved: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def generate_metrics(
    initial_score: float,
    current_score: int,
    applied_suggestions: Sequence[Suggestion],
    applied_keywords: Sequence[Keyword],
    started_at: datetime,
    finished_at: Optional[datetime] = None
) -> OptimizationMetrics:
    """
    Build optimization metrics for a session

    Args:
        initial_score: Score before any item was applied
        current_score: Score after the user's changes
        applied_suggestions: Suggestions the user applied
        applied_keywords: Keywords the user applied
        started_at: When the session started
        finished_at: When it ended (now if omitted)

    Returns:
        OptimizationMetrics
    """
    finished_at = finished_at or datetime.now()

    suggestion_categories = Counter(s.category for s in applied_suggestions)
    keyword_categories = Counter(categorize_keyword(k.text).value for k in applied_keywords)

    # Keep first-seen order
    sections_improved = list(dict.fromkeys(
        s.section for s in applied_suggestions if s.section
    ))

    return OptimizationMetrics(
        initial_score=initial_score,
        final_score=current_score,
        improvement=current_score - initial_score,
        applied_suggestion_count=len(applied_suggestions),
        applied_keyword_count=len(applied_keywords),
        suggestion_categories=dict(suggestion_categories),
        keyword_categories=dict(keyword_categories),
        seconds_to_optimize=round((finished_at - started_at).total_seconds()),
        sections_improved=sections_improved
    )


def metrics_to_json(metrics: OptimizationMetrics) -> str:
    return json.dumps(metrics.to_dict(), indent=2)


def metrics_to_csv(metrics: OptimizationMetrics) -> str:
    rows = [
        ('Metric', 'Value'),
        ('Initial Score', metrics.initial_score),
        ('Final Score', metrics.final_score),
        ('Improvement', metrics.improvement),
        ('Applied Suggestions', metrics.applied_suggestion_count),
        ('Applied Keywords', metrics.applied_keyword_count),
        ('Time to Optimize (seconds)', metrics.seconds_to_optimize),
    ]
    for category, count in metrics.suggestion_categories.items():
        rows.append((f"Suggestion Type: {category}", count))
    for category, count in metrics.keyword_categories.items():
        rows.append((f"Keyword Category: {category}", count))

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerows(rows)
    return buffer.getvalue()


def metrics_to_markdown(metrics: OptimizationMetrics) -> str:
    lines = [
        "# Resume Optimization Report",
        "",
        "## Overall Results",
        "",
        f"- **Initial Score**: {metrics.initial_score}",
        f"- **Final Score**: {metrics.final_score}",
        f"- **Improvement**: +{metrics.improvement} points",
        f"- **Applied Suggestions**: {metrics.applied_suggestion_count}",
        f"- **Applied Keywords**: {metrics.applied_keyword_count}",
        f"- **Time to Optimize**: {metrics.seconds_to_optimize} seconds",
        "",
        "## Top Suggestion Types",
        "",
    ]
    lines.extend(f"- **{c}**: {n}" for c, n in metrics.suggestion_categories.items())

    lines.extend(["", "## Top Keyword Categories", ""])
    lines.extend(f"- **{c}**: {n}" for c, n in metrics.keyword_categories.items())

    if metrics.sections_improved:
        lines.extend(["", "## Sections Improved", ""])
        lines.extend(f"- {section}" for section in metrics.sections_improved)

    return '\n'.join(lines) + '\n'


EXPORT_FORMATS = {
    'json': metrics_to_json,
    'csv': metrics_to_csv,
    'markdown': metrics_to_markdown,
}


def export_metrics(metrics: OptimizationMetrics, fmt: str = 'json') -> str:
    """Render metrics as json, csv or markdown"""
    try:
        exporter = EXPORT_FORMATS[fmt]
    except KeyError:
        raise ValueError(
            f"Unknown export format: {fmt} (expected one of {', '.join(EXPORT_FORMATS)})"
        )
    return exporter(metrics)


def save_state(session, path: str, resume_id: Optional[str] = None) -> Path:
    """Persist a session snapshot as JSON"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    state = session.to_dict()
    state['resume_id'] = resume_id
    state['last_updated'] = datetime.now().isoformat()

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(state, f, indent=2)

    logger.info(f"Saved optimization state to {path}")
    return path


def load_state(path: str) -> Optional[Dict[str, Any]]:
    """Load a snapshot written by save_state; None if there is none"""
    path = Path(path)
    if not path.exists():
        return None

    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
