"""
Section heading vocabulary and block capture helpers
"""
import re
from functools import lru_cache
from typing import List, Optional, Sequence

BULLET_MARKERS = ("•", "-", "*")

# Tried in order; the first heading found in the text wins
SUMMARY_HEADINGS = (
    "PROFESSIONAL SUMMARY",
    "EXECUTIVE SUMMARY",
    "SUMMARY",
    "CAREER OBJECTIVE",
    "OBJECTIVE",
    "PROFESSIONAL PROFILE",
    "PROFILE",
)
EXPERIENCE_HEADINGS = ("PROFESSIONAL EXPERIENCE", "WORK EXPERIENCE", "EXPERIENCE")
EDUCATION_HEADINGS = ("EDUCATION",)
SKILLS_HEADINGS = ("TECHNICAL SKILLS", "SKILLS", "CORE COMPETENCIES")
CERTIFICATION_HEADINGS = ("CERTIFICATIONS", "CERTIFICATION", "CERTIFICATES")

ALL_HEADINGS = (
    SUMMARY_HEADINGS
    + EXPERIENCE_HEADINGS
    + EDUCATION_HEADINGS
    + SKILLS_HEADINGS
    + CERTIFICATION_HEADINGS
)

_SEGMENT_SPLIT = re.compile(r"\n[ \t]*\n")


@lru_cache(maxsize=64)
def heading_pattern(headings: Sequence[str]) -> re.Pattern:
    """
    Line-anchored, case-insensitive pattern for any of ``headings``.

    The heading words must either fill the line or be followed by a colon;
    anything after the colon belongs to the section body.
    """
    alternatives = "|".join(
        r"[ \t]+".join(re.escape(word) for word in heading.split())
        for heading in headings
    )
    return re.compile(
        rf"^[ \t]*(?:{alternatives})[ \t]*(?::|$)",
        re.IGNORECASE | re.MULTILINE,
    )


def find_section(text: str, headings: Sequence[str], terminators: Sequence[str]) -> Optional[str]:
    """
    Capture the body of the first heading in ``headings`` found in ``text``,
    up to the next terminator heading or end of text. Returns None when no
    heading matches.
    """
    match = None
    for heading in headings:
        match = heading_pattern((heading,)).search(text)
        if match:
            break
    if not match:
        return None

    end = heading_pattern(tuple(terminators)).search(text, match.end())
    return text[match.end():end.start() if end else len(text)]


def is_heading_line(line: str) -> bool:
    match = heading_pattern(ALL_HEADINGS).match(line)
    return bool(match) and not line[match.end():].strip()


def is_bullet(line: str) -> bool:
    return line.lstrip().startswith(BULLET_MARKERS)


def strip_bullet(line: str) -> str:
    """Drop a single leading bullet marker and surrounding whitespace"""
    line = line.strip()
    if line.startswith(BULLET_MARKERS):
        return line[1:].strip()
    return line


def split_segments(block: str) -> List[str]:
    """Split a section body on blank lines"""
    return [segment for segment in _SEGMENT_SPLIT.split(block) if segment.strip()]


def non_blank_lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def pipe_parts(line: str) -> List[str]:
    return [part.strip() for part in line.split("|")]
