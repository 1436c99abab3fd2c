"""
Resume structuring engine

Turns free-form resume text into a ResumeDocument through a fixed chain of
pattern-based extractors. Every extractor returns an empty result instead of
raising, so a missing section never blocks the others. The parser keeps no
state between calls.
"""
import re
from typing import List, Optional, Tuple

from resume_engine.resumes import sections
from resume_engine.resumes.defaults import (
    PLACEHOLDER_DURATION,
    IMPLICIT_SKILL_CATEGORY,
    MISSING_YEAR,
    apply_defaults,
)
from resume_engine.resumes.schemas import ResumeDocument, Experience, Education, SkillGroup
from resume_engine.resumes.structured import parse_structured

NAME_SCAN_LINES = 10
UNMARKED_BULLET_MIN_LENGTH = 10

SUMMARY_TERMINATORS = (
    sections.EXPERIENCE_HEADINGS
    + sections.EDUCATION_HEADINGS
    + sections.SKILLS_HEADINGS
    + sections.CERTIFICATION_HEADINGS
)
EXPERIENCE_TERMINATORS = (
    sections.EDUCATION_HEADINGS
    + sections.SKILLS_HEADINGS
    + sections.CERTIFICATION_HEADINGS
    + sections.SUMMARY_HEADINGS
)
EDUCATION_TERMINATORS = (
    sections.SKILLS_HEADINGS
    + sections.CERTIFICATION_HEADINGS
    + sections.EXPERIENCE_HEADINGS
)
SKILLS_TERMINATORS = (
    sections.EDUCATION_HEADINGS
    + sections.CERTIFICATION_HEADINGS
    + sections.EXPERIENCE_HEADINGS
)

_CAPITALIZED_WORD = r"[A-Z][a-zA-Z'\-]*\.?"
_YEAR = r"(?:[A-Za-z]+\.?[ \t]+)?(?:19|20)\d{2}(?:[ \t]*[-–][ \t]*(?:(?:[A-Za-z]+\.?[ \t]+)?(?:19|20)\d{2}|Present|Current))?"

EducationMatch = Tuple[str, str, str]


class ResumeParser:
    """Structure plain resume text into a ResumeDocument"""

    EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
    PHONE_PATTERN = re.compile(
        r"(?<!\d)(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)"
    )
    # "City, ST[ ZIP]", "City City, ST", "Number Street, City, ST"
    LOCATION_PATTERNS = (
        re.compile(r"\b[A-Z][a-zA-Z]+,[ \t]*[A-Z]{2}\b(?:[ \t]+\d{5}(?:-\d{4})?)?"),
        re.compile(r"\b[A-Z][a-zA-Z]+[ \t]+[A-Z][a-zA-Z]+,[ \t]*[A-Z]{2}\b"),
        re.compile(
            r"\b\d+[ \t]+[A-Za-z0-9. \t]+?,[ \t]*[A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+)*,[ \t]*[A-Z]{2}\b"
        ),
    )
    CAPITALIZED_LEAD = re.compile(r"[A-Z][a-zA-Z]+[ \t]+$")
    NAME_PATTERNS = (
        re.compile(rf"^{_CAPITALIZED_WORD}(?:[ \t]+{_CAPITALIZED_WORD}){{1,3}}$"),
        re.compile(r"^[A-Z][A-Z'\-.]*(?:[ \t]+[A-Z][A-Z'\-.]*)+$"),
    )
    NAME_EXCLUDED = re.compile(r"[@|\d]")

    EDUCATION_COMMA = re.compile(
        rf"^([^,|]+?)[ \t]*,[ \t]*([^,|]+?)(?:[ \t]*,[ \t]*({_YEAR}))?[ \t]*$",
        re.IGNORECASE,
    )
    EDUCATION_PIPE = re.compile(r"^([^|]+?)[ \t]*\|[ \t]*([^|]+?)[ \t]*\|[ \t]*([^|]+?)$")
    EDUCATION_DASH_SPLIT = re.compile(r"[ \t]+[-–—][ \t]+")
    YEAR_ONLY = re.compile(rf"^{_YEAR}$", re.IGNORECASE)
    SCHOOL_WORDS = re.compile(r"university|college", re.IGNORECASE)

    SKILL_SPLIT = re.compile(r"[,;]")

    def parse(self, text: str) -> ResumeDocument:
        """Parse resume text (or a serialized resume object) into a ResumeDocument"""
        text = text or ""

        structured = parse_structured(text)
        if structured is not None:
            return structured

        document = ResumeDocument(
            email=self._extract_email(text),
            phone=self._extract_phone(text),
            location=self._extract_location(text),
            name=self._extract_name(text),
            summary=self._extract_summary(text),
            experience=self._extract_experience(text),
            education=self._extract_education(text),
            skills=self._extract_skills(text),
        )
        return apply_defaults(document, text)

    # Contact

    def _extract_email(self, text: str) -> str:
        match = self.EMAIL_PATTERN.search(text)
        return match.group(0) if match else ""

    def _extract_phone(self, text: str) -> str:
        match = self.PHONE_PATTERN.search(text)
        return match.group(0).strip() if match else ""

    def _extract_location(self, text: str) -> str:
        single_word, *others = self.LOCATION_PATTERNS
        for match in single_word.finditer(text):
            # "San Francisco, CA" is left to the two-word pattern
            line_start = text.rfind("\n", 0, match.start()) + 1
            if not self.CAPITALIZED_LEAD.search(text, line_start, match.start()):
                return match.group(0).strip()

        for pattern in others:
            match = pattern.search(text)
            if match:
                return match.group(0).strip()
        return ""

    def _extract_name(self, text: str) -> str:
        """First name-shaped line among the leading lines of the document"""
        for line in sections.non_blank_lines(text)[:NAME_SCAN_LINES]:
            if self.NAME_EXCLUDED.search(line) or sections.is_heading_line(line):
                continue
            if any(pattern.match(line) for pattern in self.NAME_PATTERNS):
                return line
        return ""

    # Summary

    def _extract_summary(self, text: str) -> str:
        block = sections.find_section(text, sections.SUMMARY_HEADINGS, SUMMARY_TERMINATORS)
        if block is None:
            return ""
        return " ".join(block.split())

    # Experience

    def _extract_experience(self, text: str) -> List[Experience]:
        """
        Experience entries from the experience section.

        Blank-line segmentation is tried first; the line-by-line scan only
        runs when segmentation finds nothing.
        """
        block = sections.find_section(text, sections.EXPERIENCE_HEADINGS, EXPERIENCE_TERMINATORS)
        if block is None:
            return []

        for strategy in (self._experience_from_segments, self._experience_from_lines):
            entries = strategy(block)
            if entries:
                return entries
        return []

    def _experience_from_segments(self, block: str) -> List[Experience]:
        entries = []
        for segment in sections.split_segments(block):
            entry = self._parse_experience_segment(segment)
            if entry is not None:
                entries.append(entry)
        return entries

    def _parse_experience_segment(self, segment: str) -> Optional[Experience]:
        lines = sections.non_blank_lines(segment)
        for index, line in enumerate(lines):
            entry = self._experience_header(line)
            if entry is not None:
                break
        else:
            return None

        for line in lines[index + 1:]:
            if sections.is_bullet(line):
                bullet = sections.strip_bullet(line)
                if bullet:
                    entry.bullets.append(bullet)
            elif len(line) > UNMARKED_BULLET_MIN_LENGTH and "|" not in line:
                entry.bullets.append(line)
        return entry

    def _experience_header(self, line: str) -> Optional[Experience]:
        """Company | Title [| Duration]"""
        if "|" not in line:
            return None
        parts = sections.pipe_parts(sections.strip_bullet(line))
        if len(parts) < 2 or not parts[0] or not parts[1]:
            return None
        return self._experience_from_parts(parts)

    def _experience_from_lines(self, block: str) -> List[Experience]:
        """
        Line-by-line scan with two states: no open entry (current is None)
        and entry open. A pipe line opens a new entry, a bullet line extends
        the open one, and the last entry is flushed at the end of the block.
        """
        entries = []
        current: Optional[Experience] = None

        for line in sections.non_blank_lines(block):
            if "|" in line:
                if current is not None and current.company and current.title:
                    entries.append(current)
                current = self._experience_from_parts(sections.pipe_parts(sections.strip_bullet(line)))
            elif current is not None and sections.is_bullet(line):
                bullet = sections.strip_bullet(line)
                if bullet:
                    current.bullets.append(bullet)

        if current is not None and current.company and current.title:
            entries.append(current)
        return entries

    @staticmethod
    def _experience_from_parts(parts: List[str]) -> Experience:
        return Experience(
            company=parts[0],
            title=parts[1] if len(parts) > 1 else "",
            duration=parts[2] if len(parts) > 2 and parts[2] else PLACEHOLDER_DURATION,
        )

    # Education

    def _extract_education(self, text: str) -> List[Education]:
        """
        Education entries using the first grammar that matches any line:
        "Degree, School[, Year]", then "School | Degree | Year", then
        "Degree [- School] [- Year]".
        """
        block = sections.find_section(text, sections.EDUCATION_HEADINGS, EDUCATION_TERMINATORS)
        if block is None:
            return []

        lines = [sections.strip_bullet(line) for line in sections.non_blank_lines(block)]
        lines = [line for line in lines if line]

        for grammar in (self._education_comma, self._education_pipe, self._education_dash):
            matches = [match for match in map(grammar, lines) if match is not None]
            if matches:
                return [self._education_entry(*match) for match in matches]
        return []

    def _education_comma(self, line: str) -> Optional[EducationMatch]:
        match = self.EDUCATION_COMMA.match(line)
        if not match:
            return None
        return match.group(1), match.group(2), match.group(3) or ""

    def _education_pipe(self, line: str) -> Optional[EducationMatch]:
        match = self.EDUCATION_PIPE.match(line)
        if not match:
            return None
        school, degree, year = match.groups()
        return degree, school, year

    def _education_dash(self, line: str) -> Optional[EducationMatch]:
        if not line[0].isupper():
            return None
        parts = [part.strip() for part in self.EDUCATION_DASH_SPLIT.split(line)]
        degree, school, year = parts[0], "", ""
        if len(parts) == 2 and self.YEAR_ONLY.match(parts[1]):
            year = parts[1]
        elif len(parts) > 1:
            school = parts[1]
            year = " - ".join(parts[2:])
        return degree, school, year

    def _education_entry(self, degree: str, school: str, year: str) -> Education:
        # Institution names that landed in the degree slot
        if self.SCHOOL_WORDS.search(degree):
            degree, school = school, degree
        return Education(
            degree=degree.strip(),
            school=school.strip(),
            year=year.strip() or MISSING_YEAR,
        )

    # Skills

    def _extract_skills(self, text: str) -> List[SkillGroup]:
        block = sections.find_section(text, sections.SKILLS_HEADINGS, SKILLS_TERMINATORS)
        if block is None:
            return []

        groups: List[SkillGroup] = []
        implicit: Optional[SkillGroup] = None

        for line in sections.non_blank_lines(block):
            if ":" in line:
                label, _, rest = line.partition(":")
                category = sections.strip_bullet(label)
                items = [item.strip() for item in self.SKILL_SPLIT.split(rest) if item.strip()]
                if category and items:
                    groups.append(SkillGroup(category=category, items=items))
            elif sections.is_bullet(line):
                item = sections.strip_bullet(line)
                if not item:
                    continue
                if implicit is None:
                    implicit = SkillGroup(category=IMPLICIT_SKILL_CATEGORY)
                    groups.append(implicit)
                implicit.items.append(item)

        return groups


resume_parser = ResumeParser()


def parse_resume_content(text: str) -> ResumeDocument:
    """Structure resume text with the shared stateless parser"""
    return resume_parser.parse(text)
