"""
Structured short-circuit

When the incoming text is already a serialized resume object (JSON), its
fields are mapped straight onto ResumeDocument and none of the text
heuristics run.
"""
import json
import re
from typing import Any, Dict, List, Optional, Sequence

from resume_engine.resumes.defaults import PLACEHOLDER_NAME, IMPLICIT_SKILL_CATEGORY
from resume_engine.resumes.schemas import ResumeDocument, Experience, Education, SkillGroup
from resume_engine.resumes.sections import non_blank_lines, strip_bullet

FIELD_ALIASES = {
    "name": ("name", "fullName"),
    "email": ("email",),
    "phone": ("phone", "phoneNumber"),
    "location": ("location", "address"),
    "summary": ("summary", "professionalSummary", "objective"),
    "experience": ("experience", "workExperience"),
    "education": ("education",),
    "skills": ("skills",),
}

EXPERIENCE_ALIASES = {
    "title": ("title", "position", "role"),
    "company": ("company", "employer", "organization"),
    "duration": ("duration", "dates", "period"),
    "start": ("startDate", "start_date", "start"),
    "end": ("endDate", "end_date", "end"),
    "bullets": ("bullets", "achievements", "responsibilities", "description"),
}

EDUCATION_ALIASES = {
    "degree": ("degree",),
    "school": ("school", "institution", "university"),
    "year": ("year", "graduationYear", "dates"),
}

_ITEM_SPLIT = re.compile(r"[,;]")


def load_structured(text: str) -> Optional[Dict[str, Any]]:
    """Return the decoded object, or None if ``text`` is not a JSON object"""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def _first(data: Dict[str, Any], aliases: Sequence[str]) -> Any:
    for alias in aliases:
        value = data.get(alias)
        if value:
            return value
    return None


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value)


def _text_list(value: Any) -> List[str]:
    """Coerce a list or a multi-line string into clean, non-empty strings"""
    if isinstance(value, list):
        items = [_text(item) for item in value]
    elif isinstance(value, str):
        items = [strip_bullet(line) for line in non_blank_lines(value)]
    else:
        items = []
    return [item for item in items if item]


def _skill_items(value: Any) -> List[str]:
    if isinstance(value, str):
        return [item.strip() for item in _ITEM_SPLIT.split(value) if item.strip()]
    return _text_list(value)


def _experience(item: Dict[str, Any]) -> Experience:
    duration = _text(_first(item, EXPERIENCE_ALIASES["duration"]))
    if not duration:
        start = _text(_first(item, EXPERIENCE_ALIASES["start"]))
        end = _text(_first(item, EXPERIENCE_ALIASES["end"]))
        duration = " - ".join(part for part in (start, end) if part)

    return Experience(
        title=_text(_first(item, EXPERIENCE_ALIASES["title"])),
        company=_text(_first(item, EXPERIENCE_ALIASES["company"])),
        duration=duration,
        bullets=_text_list(_first(item, EXPERIENCE_ALIASES["bullets"])),
    )


def _education(item: Dict[str, Any]) -> Education:
    return Education(
        degree=_text(_first(item, EDUCATION_ALIASES["degree"])),
        school=_text(_first(item, EDUCATION_ALIASES["school"])),
        year=_text(_first(item, EDUCATION_ALIASES["year"])),
    )


def _skills(value: Any) -> List[SkillGroup]:
    """
    Accepts ``[{category, items}]``, a flat list of skill names, or a
    ``{category: items}`` mapping. Flat names are gathered into one implicit
    group placed where the first of them appeared.
    """
    if isinstance(value, dict):
        return [
            SkillGroup(category=_text(category), items=_skill_items(items))
            for category, items in value.items()
            if _text(category)
        ]
    if not isinstance(value, list):
        return []

    groups: List[SkillGroup] = []
    implicit: Optional[SkillGroup] = None
    for item in value:
        if isinstance(item, dict):
            groups.append(SkillGroup(
                category=_text(_first(item, ("category", "name"))),
                items=_skill_items(_first(item, ("items", "skills"))),
            ))
            continue
        skill = _text(item)
        if not skill:
            continue
        if implicit is None:
            implicit = SkillGroup(category=IMPLICIT_SKILL_CATEGORY)
            groups.append(implicit)
        implicit.items.append(skill)
    return groups


def _dict_items(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def map_structured(data: Dict[str, Any]) -> ResumeDocument:
    """Map a decoded resume object onto ResumeDocument using field aliases"""
    return ResumeDocument(
        name=_text(_first(data, FIELD_ALIASES["name"])) or PLACEHOLDER_NAME,
        email=_text(_first(data, FIELD_ALIASES["email"])),
        phone=_text(_first(data, FIELD_ALIASES["phone"])),
        location=_text(_first(data, FIELD_ALIASES["location"])),
        summary=_text(_first(data, FIELD_ALIASES["summary"])),
        experience=[_experience(item) for item in _dict_items(_first(data, FIELD_ALIASES["experience"]))],
        education=[_education(item) for item in _dict_items(_first(data, FIELD_ALIASES["education"]))],
        skills=_skills(_first(data, FIELD_ALIASES["skills"])),
    )


def parse_structured(text: str) -> Optional[ResumeDocument]:
    """Short-circuit attempt; None means fall through to text heuristics"""
    data = load_structured(text)
    if data is None:
        return None
    return map_structured(data)
