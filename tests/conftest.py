import pytest

from resume_optimizer.content import ResumeContent, SectionContent
from resume_optimizer.scoring import Suggestion, Keyword


@pytest.fixture
def critical_skills_suggestion():
    """Skills suggestion worth severity 10 / 2.7 points"""
    return Suggestion(
        id="s-critical",
        category="skills",
        text="Group your technical skills by domain",
        impact_description="This is a critical improvement",
    )


@pytest.fixture
def mixed_suggestions():
    return [
        Suggestion(id="s1", category="structure", text="Add a summary",
                   impact_description="Significant boost for ATS parsing", section="resume-summary"),
        Suggestion(id="s2", category="formatting", text="Use one font",
                   impact_description="Minor visual cleanup"),
        Suggestion(id="s3", category="achievement", text="Quantify results",
                   impact_description="Recruiters respond 40% more often", section="resume-experience"),
    ]


@pytest.fixture
def mixed_keywords():
    return [
        Keyword(id="k1", text="Python"),
        Keyword(id="k2", text="Leadership"),
        Keyword(id="k3", text="Delivered"),
        Keyword(id="k4", text="Compliance"),
    ]


@pytest.fixture
def structured_content():
    return ResumeContent.from_sections({
        'resume-summary': SectionContent(text="Backend engineer focused on data platforms."),
        'resume-experience': SectionContent(
            text="Built ingestion services in Python. Cut processing time by 35%. " * 10,
            list_items=4
        ),
        'resume-skills': "Python, SQL, Docker",
    })
