"""
Structured records converger

Rows written by the AI extraction pipeline (contact and summary sections,
experience, education, skill and certification rows) are folded into the
same canonical shape the text parser produces. When records are present and
meaningful they supersede parsing the raw text.
"""
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

import structlog

from resume_engine.core.exceptions import ProcessingError
from resume_engine.resumes.defaults import PLACEHOLDER_NAME
from resume_engine.resumes.parser import parse_resume_content
from resume_engine.resumes.schemas import (
    Certification,
    Education,
    Experience,
    SkillGroup,
    StructuredRecords,
    StructuredResumeDocument,
)

logger = structlog.get_logger()

DEFAULT_EXPORT_SKILL_LIMIT = 6

SOURCE_STRUCTURED = "structured"
SOURCE_PARSED = "parsed"


def _ordered(rows: Sequence[Any]) -> List[Any]:
    # Rows without an explicit order keep their relative position at the end
    return sorted(
        rows,
        key=lambda row: (row.display_order is None, row.display_order or 0),
    )


def _section_content(records: StructuredRecords, section_type: str) -> Dict[str, Any]:
    for section in records.sections:
        if section.section_type == section_type:
            return section.content if isinstance(section.content, dict) else {}
    return {}


def _string(value: Any) -> str:
    return str(value) if value else ""


def _string_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    return [str(item) for item in value if item is not None]


def _bullets(value: Any) -> List[str]:
    bullets = _string_list(value)
    return ["Job responsibility"] if bullets is None else bullets


def limit_skills_for_export(
    skills: List[SkillGroup],
    limit: int = DEFAULT_EXPORT_SKILL_LIMIT,
) -> List[SkillGroup]:
    """
    Cap the total number of skills for compact exports.

    All items are flattened and the first ``limit`` kept. More than three
    kept items are split evenly into technical and professional groups;
    fewer go into a single key-skills group.
    """
    flattened = [item for group in skills for item in group.items]
    if len(flattened) <= limit:
        return skills

    kept = flattened[:limit]
    if len(kept) > 3:
        middle = math.ceil(len(kept) / 2)
        return [
            SkillGroup(category="Technical Skills", items=kept[:middle]),
            SkillGroup(category="Professional Skills", items=kept[middle:]),
        ]
    return [SkillGroup(category="Key Skills", items=kept)]


def has_meaningful_data(document: StructuredResumeDocument) -> bool:
    return (
        document.name != PLACEHOLDER_NAME
        or bool(document.experience)
        or bool(document.skills)
        or bool(document.education)
    )


def build_structured_resume(
    records: StructuredRecords,
    limit_skills: bool = False,
    skill_limit: int = DEFAULT_EXPORT_SKILL_LIMIT,
) -> StructuredResumeDocument:
    """
    Build a resume from storage records.

    Raises:
        ProcessingError: the records carry no usable resume data
    """
    contact = _section_content(records, "contact")
    summary = _section_content(records, "summary")

    skills = [
        SkillGroup(
            category=row.category or "Skills",
            items=_string_list(row.items) or [],
        )
        for row in _ordered(records.skills)
    ]
    if limit_skills:
        skills = limit_skills_for_export(skills, skill_limit)

    document = StructuredResumeDocument(
        name=_string(contact.get("name")) or PLACEHOLDER_NAME,
        email=_string(contact.get("email")),
        phone=_string(contact.get("phone")),
        location=_string(contact.get("location")),
        summary=_string(summary.get("summary")),
        experience=[
            Experience(
                title=row.title or "Job Title",
                company=row.company or "Company Name",
                duration=row.duration or "2023 - 2024",
                bullets=_bullets(row.bullets),
            )
            for row in _ordered(records.experiences)
        ],
        education=[
            Education(
                degree=row.degree or "Degree",
                school=row.school or "University Name",
                year=row.year or "2020",
            )
            for row in _ordered(records.education)
        ],
        skills=skills,
        certifications=[
            Certification(
                name=row.name or "Certification Name",
                issuer=row.issuer or "Issuing Organization",
                year=row.year or "2023",
            )
            for row in _ordered(records.certifications)
        ],
    )

    if not has_meaningful_data(document):
        raise ProcessingError(
            "No structured resume data available",
            details={"sections": len(records.sections)},
        )
    return document


def resolve_resume(
    records: Optional[StructuredRecords],
    text: str,
    limit_skills: bool = False,
    skill_limit: int = DEFAULT_EXPORT_SKILL_LIMIT,
) -> Tuple[str, StructuredResumeDocument]:
    """
    Prefer structured records; fall back to parsing ``text``.

    Returns the source used ("structured" or "parsed") and the resume.
    """
    if records is not None:
        try:
            return SOURCE_STRUCTURED, build_structured_resume(records, limit_skills, skill_limit)
        except ProcessingError as e:
            logger.warning("structured_records_unusable", reason=e.message, **e.details)

    parsed = parse_resume_content(text)
    document = StructuredResumeDocument(**parsed.model_dump())
    if limit_skills:
        document.skills = limit_skills_for_export(document.skills, skill_limit)
    return SOURCE_PARSED, document
