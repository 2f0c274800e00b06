#!/usr/bin/env python3
"""
Simulate the ATS score of an AI optimization response

Usage:
    python scripts/score_session.py --input data/optimization.json --resume data/resume.html --html
    python scripts/score_session.py --input data/optimization.yaml --apply-suggestion 0 2 --apply-keyword 1
    python scripts/score_session.py --input data/optimization.json --apply-all --report markdown --output reports/run.md
"""

import argparse
import json
import logging
import sys
import yaml
from datetime import datetime
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_optimizer.config import get_config
from resume_optimizer.content import ResumeContent
from resume_optimizer.scoring import (
    ScoreSession, InvalidIndexError, load_items, generate_metrics, export_metrics
)
from resume_optimizer.scoring.sections import weighted_section_score

logger = logging.getLogger(__name__)


def load_payload(path: str) -> dict:
    """Load an optimization response from JSON or YAML"""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Payload file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ('.yaml', '.yml'):
            payload = yaml.safe_load(f) or {}
        else:
            payload = json.load(f)

    if not isinstance(payload, dict):
        raise ValueError(f"Payload must be an object, got {type(payload).__name__}")

    return payload


def load_resume(path: str, is_html: bool) -> ResumeContent:
    with open(path, 'r', encoding='utf-8') as f:
        raw = f.read()
    return ResumeContent.from_html(raw) if is_html else ResumeContent.from_text(raw)


def print_breakdown(session: ScoreSession):
    """Print formatted score summary"""
    breakdown = session.breakdown

    print("\n" + "=" * 70)
    print(f"{'ATS SCORE SIMULATION':^70}")
    print("=" * 70)
    print()
    print(f"Base Score:     {breakdown.base:g}")
    print(f"Suggestions:    +{breakdown.suggestion_points}")
    print(f"Keywords:       +{breakdown.keyword_points}")
    print(f"Current Score:  {breakdown.total}/100  {'█' * (breakdown.total // 10)}")
    print(f"Potential:      {breakdown.potential}/100")
    print()

    present = {k: v for k, v in breakdown.section_scores.items() if v > 0}
    if present:
        print("Section Scores:")
        for section_id, score in present.items():
            print(f"  {section_id:<24} {score:3}/100")
        print(f"  {'weighted':<24} {weighted_section_score(breakdown.section_scores):5.1f}")
        print()


def print_items(session: ScoreSession, simulate: bool):
    """Print suggestions and keywords with their impact"""
    print("=" * 70)
    print("SUGGESTIONS")
    print("=" * 70)
    for i, suggestion in enumerate(session.suggestions):
        details = session.suggestion_details(i)
        mark = "✓" if suggestion.is_applied else " "
        print(f"{i:2}. [{mark}] ({suggestion.category}) {details.description}")
        print(f"       {suggestion.text[:80]}")
        if simulate and not suggestion.is_applied:
            print(f"       -> {session.simulate_suggestion_impact(i).new_score}/100 if applied")
    print()

    print("=" * 70)
    print("KEYWORDS")
    print("=" * 70)
    for i, keyword in enumerate(session.keywords):
        details = session.keyword_details(i)
        mark = "✓" if keyword.is_applied else " "
        line = f"{i:2}. [{mark}] {keyword.text} ({details.category}) {details.description}"
        if simulate and not keyword.is_applied:
            line += f" -> {session.simulate_keyword_impact(i).new_score}/100"
        print(line)
    print()


def main():
    parser = argparse.ArgumentParser(description='Simulate ATS score for an optimization response')
    parser.add_argument(
        '--input',
        required=True,
        help='Optimization response (.json or .yaml) with atsScore, suggestions and keywords'
    )
    parser.add_argument(
        '--resume',
        help='Resume content file'
    )
    parser.add_argument(
        '--html',
        action='store_true',
        help='Treat the resume file as editor HTML'
    )
    parser.add_argument(
        '--base-score',
        type=float,
        help='Override the base ATS score from the payload'
    )
    parser.add_argument(
        '--apply-suggestion',
        type=int,
        nargs='*',
        default=[],
        help='Suggestion indexes to toggle'
    )
    parser.add_argument(
        '--apply-keyword',
        type=int,
        nargs='*',
        default=[],
        help='Keyword indexes to toggle'
    )
    parser.add_argument(
        '--apply-all',
        action='store_true',
        help='Apply every suggestion and keyword'
    )
    parser.add_argument(
        '--simulate',
        action='store_true',
        help='Show the projected score for each unapplied item'
    )
    parser.add_argument(
        '--report',
        choices=['json', 'csv', 'markdown'],
        help='Export optimization metrics in this format'
    )
    parser.add_argument(
        '--output',
        help='Write the report to this file instead of stdout'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log every recalculation'
    )

    args = parser.parse_args()
    config = get_config()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level.upper(), logging.WARNING),
        format='%(message)s'
    )

    started_at = datetime.now()

    try:
        payload = load_payload(args.input)
        content = load_resume(args.resume, args.html) if args.resume else ResumeContent.from_text(
            payload.get('optimizedText') or payload.get('resumeText') or ""
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: Failed to load input: {e}")
        return 1

    suggestions, keywords = load_items(payload)
    base_score = args.base_score if args.base_score is not None else payload.get('atsScore', 0)

    session = ScoreSession(base_score, content, suggestions, keywords, config=config)
    initial_score = session.current_score

    try:
        if args.apply_all:
            session.apply_all()
        for index in args.apply_suggestion:
            session.apply_suggestion(index)
        for index in args.apply_keyword:
            session.apply_keyword(index)
    except InvalidIndexError as e:
        print(f"ERROR: {e}")
        return 1

    print_breakdown(session)
    print_items(session, args.simulate)

    if args.report:
        metrics = generate_metrics(
            initial_score,
            session.current_score,
            session.applied_suggestions(),
            session.applied_keywords(),
            started_at
        )
        report = export_metrics(metrics, args.report)

        if args.output:
            output = Path(args.output)
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(report, encoding='utf-8')
            print(f"✓ Report saved to: {output}")
        else:
            print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
