# resume_optimizer/__init__.py
"""
Resume optimizer: ATS score simulation for AI-suggested resume improvements
"""

from resume_optimizer.config import ScoringConfig, get_config
from resume_optimizer.content import (
    ResumeContent, SectionContent, SECTION_WEIGHTS, coerce_content
)

__all__ = [
    'ScoringConfig',
    'get_config',
    'ResumeContent',
    'SectionContent',
    'SECTION_WEIGHTS',
    'coerce_content',
]
