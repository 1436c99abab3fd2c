"""
Pytest configuration and fixtures for resume structuring tests.
"""
import pytest
from fastapi.testclient import TestClient

from resume_engine.main import app
from resume_engine.resumes.parser import ResumeParser


SAMPLE_RESUME = """JANE DOE
jane.doe@example.com | (555) 123-4567 | Austin, TX 78701

PROFESSIONAL SUMMARY
Backend engineer with eight years of experience
building payment platforms.

PROFESSIONAL EXPERIENCE
Acme Corp | Senior Engineer | 2020-2023
• Led migration of billing services to Kubernetes
• Mentored four junior engineers

Globex | Software Engineer | 2016-2020
- Built the internal reporting API
Reduced nightly batch time by half

EDUCATION
Bachelor of Science, State University, 2016

TECHNICAL SKILLS
Languages: Python, Go; SQL
Cloud: AWS, GCP
• Kubernetes
• Terraform
"""


@pytest.fixture
def parser():
    """Fresh parser instance."""
    return ResumeParser()


@pytest.fixture
def sample_resume_text():
    """A complete, well-formed plain-text resume."""
    return SAMPLE_RESUME


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
