# resume_optimizer/config.py
import os
from dataclasses import dataclass, field
from typing import List

import yaml

from resume_optimizer.content import SECTION_WEIGHTS


@dataclass
class ScoringConfig:
    """Configuration for the ATS score simulation"""

    # Sections evaluated for per-section quality scores
    section_ids: List[str] = field(default_factory=lambda: list(SECTION_WEIGHTS))

    # Log every recalculation at INFO instead of DEBUG
    debug: bool = False

    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, path: str):
        """Load configuration from YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data.get('scoring', {}))


def get_config() -> ScoringConfig:
    """Get scoring configuration"""
    config_path = os.getenv('RESUME_SCORING_CONFIG', 'config/scoring.yaml')

    if os.path.exists(config_path):
        return ScoringConfig.from_yaml(config_path)
    return ScoringConfig()
