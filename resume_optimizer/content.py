# resume_optimizer/content.py
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


# Section ids with their importance weight for ATS scoring
SECTION_WEIGHTS = {
    'resume-experience': 0.30,
    'resume-skills': 0.25,
    'resume-education': 0.15,
    'resume-summary': 0.10,
    'resume-projects': 0.07,
    'resume-certifications': 0.05,
    'resume-languages': 0.03,
    'resume-awards': 0.02,
    'resume-publications': 0.01,
    'resume-volunteering': 0.01,
    'resume-additional': 0.005,
    'resume-interests': 0.005,
}


@dataclass(frozen=True)
class SectionContent:
    """Plain text of one resume section"""
    text: str
    list_items: int = 0


@dataclass(frozen=True)
class ResumeContent:
    """
    Resume content as the scoring engine sees it

    ``text`` is used for keyword presence detection. ``sections`` is the
    section-addressable view used by the section evaluator; ``None`` means
    the content is unstructured and only section markers can be detected.
    """
    text: str
    sections: Optional[Dict[str, SectionContent]] = None

    @property
    def is_structured(self) -> bool:
        return self.sections is not None

    def has_marker(self, section_id: str) -> bool:
        """Check for an id/data-section marker in unstructured content"""
        return (
            f'id="{section_id}"' in self.text or
            f'data-section="{section_id}"' in self.text
        )

    @classmethod
    def from_text(cls, text: Optional[str]) -> 'ResumeContent':
        return cls(text=text or "")

    @classmethod
    def from_sections(cls, sections: Dict[str, Union[str, SectionContent]]) -> 'ResumeContent':
        """Build content from a mapping of section id to text"""
        normalized = {}
        for section_id, section in sections.items():
            if isinstance(section, SectionContent):
                normalized[section_id] = section
            else:
                normalized[section_id] = SectionContent(text=section or "")

        text = '\n'.join(s.text for s in normalized.values())
        return cls(text=text, sections=normalized)

    @classmethod
    def from_html(cls, html: Optional[str]) -> 'ResumeContent':
        """
        Extract per-section plain text from editor HTML

        Only elements whose ``id`` is a known section id become sections.
        List items are counted from ``<li>`` descendants.

        Args:
            html: Resume HTML as produced by the editor

        Returns:
            Structured ResumeContent
        """
        soup = BeautifulSoup(html or "", 'html.parser')

        sections = {}
        for section_id in SECTION_WEIGHTS:
            element = soup.find(id=section_id)
            if element is None:
                continue

            sections[section_id] = SectionContent(
                text=element.get_text(),
                list_items=len(element.find_all('li'))
            )

        logger.debug(f"Extracted {len(sections)} sections from HTML")
        return cls(text=soup.get_text(' '), sections=sections)


def coerce_content(content: Union[ResumeContent, str, None]) -> ResumeContent:
    """Accept either a ResumeContent or a bare string"""
    if isinstance(content, ResumeContent):
        return content
    return ResumeContent.from_text(content)
