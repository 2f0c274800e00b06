# resume_optimizer/scoring/loader.py
import logging
from typing import Any, Dict, List, Tuple

from resume_optimizer.scoring.models import Suggestion, Keyword

logger = logging.getLogger(__name__)


def load_items(payload: Dict[str, Any]) -> Tuple[List[Suggestion], List[Keyword]]:
    """
    Build suggestions and keywords from an AI optimization response

    Malformed entries are kept with defaults rather than rejected, so the
    indexes the UI shows stay aligned with the payload.

    Args:
        payload: Dict with ``suggestions`` and ``keywords`` lists

    Returns:
        (suggestions, keywords)
    """
    payload = payload if isinstance(payload, dict) else {}

    raw_suggestions = payload.get('suggestions') or []
    raw_keywords = payload.get('keywords') or []

    suggestions = [Suggestion.from_dict(raw) for raw in raw_suggestions]
    keywords = [Keyword.from_dict(raw) for raw in raw_keywords]

    logger.info(f"Loaded {len(suggestions)} suggestions and {len(keywords)} keywords")
    return suggestions, keywords
