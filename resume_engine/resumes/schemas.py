"""
Resume Pydantic schemas
"""
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class Experience(BaseModel):
    """One work experience entry"""
    title: str = ""
    company: str = ""
    duration: str = ""
    bullets: List[str] = Field(default_factory=list)


class Education(BaseModel):
    """One education entry"""
    degree: str = ""
    school: str = ""
    year: str = ""


class SkillGroup(BaseModel):
    """A labeled group of skills"""
    category: str = ""
    items: List[str] = Field(default_factory=list)


class Certification(BaseModel):
    """Certification or license"""
    name: str = ""
    issuer: str = ""
    year: str = ""


class ResumeDocument(BaseModel):
    """Canonical structured resume; every field is always populated"""
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[SkillGroup] = Field(default_factory=list)


class StructuredResumeDocument(ResumeDocument):
    """Resume built from structured storage records"""
    certifications: List[Certification] = Field(default_factory=list)


# Storage records written by the extraction pipeline


class ResumeSectionRecord(BaseModel):
    """Free-form section row (contact, summary)"""
    section_type: Optional[str] = None
    content: Optional[Any] = None


class ExperienceRecord(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None
    bullets: Optional[Any] = None
    display_order: Optional[int] = None


class EducationRecord(BaseModel):
    degree: Optional[str] = None
    school: Optional[str] = None
    year: Optional[str] = None
    display_order: Optional[int] = None


class SkillRecord(BaseModel):
    category: Optional[str] = None
    items: Optional[Any] = None
    display_order: Optional[int] = None


class CertificationRecord(BaseModel):
    name: Optional[str] = None
    issuer: Optional[str] = None
    year: Optional[str] = None
    display_order: Optional[int] = None


class StructuredRecords(BaseModel):
    """All structured rows stored for one optimized resume"""
    sections: List[ResumeSectionRecord] = Field(default_factory=list)
    experiences: List[ExperienceRecord] = Field(default_factory=list)
    education: List[EducationRecord] = Field(default_factory=list)
    skills: List[SkillRecord] = Field(default_factory=list)
    certifications: List[CertificationRecord] = Field(default_factory=list)


# API request/response schemas


class StructureRequest(BaseModel):
    """Raw resume text to structure"""
    text: str = ""


class ResolveRequest(BaseModel):
    """Structured records and/or raw text for one resume"""
    text: str = ""
    records: Optional[StructuredRecords] = None
    limit_skills: bool = False


class ResolvedResumeResponse(BaseModel):
    """Resolved resume along with the path that produced it"""
    source: str
    resume: StructuredResumeDocument


class ErrorResponse(BaseModel):
    """Error envelope"""
    error: Dict[str, Any]
