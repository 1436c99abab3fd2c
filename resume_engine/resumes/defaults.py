"""
Placeholder constants and the final defaulting pass
"""
from resume_engine.resumes.schemas import ResumeDocument, Experience

PLACEHOLDER_NAME = "Professional Name"
PLACEHOLDER_DURATION = "Date Range"
IMPLICIT_SKILL_CATEGORY = "Technical Skills"
MISSING_YEAR = "N/A"

SUMMARY_FALLBACK_MIN_INPUT = 50
SUMMARY_PARAGRAPH_MIN_LENGTH = 50
SUMMARY_MAX_LENGTH = 300
EXPERIENCE_SYNTHESIS_MIN_INPUT = 100


def placeholder_experience() -> Experience:
    return Experience(
        title="Professional Role",
        company="Company Name",
        duration=PLACEHOLDER_DURATION,
        bullets=[
            "Key achievement from your optimized resume",
            "Another important accomplishment",
        ],
    )


def fallback_summary(raw_text: str) -> str:
    """First paragraph long enough to stand in for a summary, or ''"""
    for paragraph in raw_text.split("\n\n"):
        paragraph = paragraph.strip()
        if len(paragraph) <= SUMMARY_PARAGRAPH_MIN_LENGTH:
            continue
        summary = " ".join(line.strip() for line in paragraph.split("\n"))
        if len(summary) > SUMMARY_MAX_LENGTH:
            summary = summary[:SUMMARY_MAX_LENGTH] + "..."
        return summary
    return ""


def apply_defaults(document: ResumeDocument, raw_text: str) -> ResumeDocument:
    """Fill any still-missing required field with a deterministic placeholder"""
    if not document.name:
        document.name = PLACEHOLDER_NAME

    if not document.summary and len(raw_text) > SUMMARY_FALLBACK_MIN_INPUT:
        document.summary = fallback_summary(raw_text)

    # Short inputs keep an empty experience list
    if not document.experience and len(raw_text) > EXPERIENCE_SYNTHESIS_MIN_INPUT:
        document.experience = [placeholder_experience()]

    return document
