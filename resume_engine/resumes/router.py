"""
Resume structuring routes
"""
from fastapi import APIRouter
import structlog

from resume_engine.core.config import settings
from resume_engine.core.exceptions import ValidationError
from resume_engine.resumes.parser import parse_resume_content
from resume_engine.resumes.records import resolve_resume
from resume_engine.resumes.schemas import (
    ErrorResponse,
    ResolveRequest,
    ResolvedResumeResponse,
    ResumeDocument,
    StructureRequest,
)

router = APIRouter(prefix="/api/v1/resumes", tags=["Resumes"])
logger = structlog.get_logger()


def _check_length(text: str) -> None:
    if len(text) > settings.MAX_TEXT_LENGTH:
        raise ValidationError(
            f"Resume text exceeds maximum length of {settings.MAX_TEXT_LENGTH} characters",
            details={"length": len(text), "max_length": settings.MAX_TEXT_LENGTH},
        )


@router.post(
    "/structure",
    response_model=ResumeDocument,
    responses={422: {"model": ErrorResponse}},
)
def structure_resume(request: StructureRequest):
    """Structure raw resume text"""
    _check_length(request.text)

    document = parse_resume_content(request.text)

    logger.info(
        "resume_structured",
        text_length=len(request.text),
        experience_count=len(document.experience),
        education_count=len(document.education),
        skill_group_count=len(document.skills),
    )
    return document


@router.post(
    "/resolve",
    response_model=ResolvedResumeResponse,
    responses={422: {"model": ErrorResponse}},
)
def resolve_structured_resume(request: ResolveRequest):
    """Use stored structured records when usable, otherwise parse the text"""
    _check_length(request.text)

    source, document = resolve_resume(
        request.records,
        request.text,
        limit_skills=request.limit_skills,
        skill_limit=settings.EXPORT_SKILL_LIMIT,
    )

    logger.info(
        "resume_resolved",
        source=source,
        experience_count=len(document.experience),
        certification_count=len(document.certifications),
    )
    return ResolvedResumeResponse(source=source, resume=document)
