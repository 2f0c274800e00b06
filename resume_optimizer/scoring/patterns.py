# resume_optimizer/scoring/patterns.py
"""
Weight and pattern tables used by the classifiers

Order matters in every list below: the first matching entry wins.
"""

import re

from resume_optimizer.scoring.models import KeywordCategory


# Weight per suggestion category
SUGGESTION_CATEGORY_WEIGHTS = {
    'structure': 0.8,
    'content': 0.7,
    'skills': 0.9,
    'formatting': 0.5,
    'language': 0.4,
    'keywords': 0.8,
    'ats': 0.9,
}
DEFAULT_SUGGESTION_WEIGHT = 0.6

# Severity words checked as substrings of the impact description
SEVERITY_WORDS = [
    ('critical', 10),
    ('crucial', 9),
    ('essential', 9),
    ('significant', 8),
    ('substantial', 8),
    ('major', 7),
    ('important', 7),
    ('considerable', 6),
    ('notable', 6),
    ('moderate', 5),
    ('helpful', 4),
    ('useful', 4),
    ('minor', 3),
    ('small', 3),
    ('slight', 1),
    ('minimal', 1),
]

QUANTIFIABLE_IMPACT_PATTERN = re.compile(
    r'\d+%|\d+ percent|doubles|triples|increases by \d+',
    re.IGNORECASE
)

ATS_TERMS_PATTERN = re.compile(
    r'ats|applicant tracking|parser|algorithm|scan',
    re.IGNORECASE
)

# Weight per keyword category
KEYWORD_CATEGORY_WEIGHTS = {
    KeywordCategory.TECHNICAL: 0.9,
    KeywordCategory.INDUSTRY_SPECIFIC: 0.8,
    KeywordCategory.SOFT_SKILL: 0.6,
    KeywordCategory.ACTION_VERB: 0.5,
    KeywordCategory.GENERAL: 0.4,
}

ALREADY_PRESENT_PENALTY = 0.3

# Keyword category cascade
KEYWORD_PATTERNS = [
    (KeywordCategory.TECHNICAL, re.compile(
        r'\b(?:api|sdk|framework|language|programming|software|hardware|tool|'
        r'platform|database|system|algorithm|analysis|design|development|'
        r'engineering|implementation|integration|interface|methodology|'
        r'application|architecture|automation|'
        r'python|java|javascript|typescript|sql|nosql|html|css|react|angular|'
        r'node\.?js|django|flask|spring|docker|kubernetes|k8s|aws|azure|gcp|'
        r'terraform|ansible|jenkins|git|linux|kafka|spark|hadoop|tensorflow|'
        r'pytorch|excel|tableau|salesforce)\b',
        re.IGNORECASE
    )),
    (KeywordCategory.SOFT_SKILL, re.compile(
        r'\b(?:communication|leadership|teamwork|collaboration|problem.solving|'
        r'adaptability|creativity|critical.thinking|time.management|flexibility|'
        r'organization|attention.to.detail|interpersonal|management|'
        r'coordination|facilitation)\b',
        re.IGNORECASE
    )),
    (KeywordCategory.ACTION_VERB, re.compile(
        r'\b(?:managed|developed|created|implemented|designed|led|coordinated|'
        r'achieved|improved|increased|decreased|reduced|launched|delivered|'
        r'established|generated|negotiated|resolved|transformed)\b',
        re.IGNORECASE
    )),
    (KeywordCategory.INDUSTRY_SPECIFIC, re.compile(
        r'\b(?:compliance|regulation|protocol|industry.standard|certification|'
        r'methodology|framework|best.practice)\b',
        re.IGNORECASE
    )),
]

# Quantifiable achievements inside a resume section
SECTION_METRIC_PATTERN = re.compile(
    r'\d+%|\$\d+|\d+ percent|\d+ times',
    re.IGNORECASE
)
