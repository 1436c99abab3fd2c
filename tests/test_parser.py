"""
Tests for the end-to-end parse pipeline, contact, name and summary extraction.
"""
from resume_engine.resumes.parser import ResumeParser, parse_resume_content
from resume_engine.resumes.schemas import ResumeDocument


def test_full_resume(parser, sample_resume_text):
    """All sections of a well-formed resume are extracted."""
    document = parser.parse(sample_resume_text)

    assert document.name == "JANE DOE"
    assert document.email == "jane.doe@example.com"
    assert document.phone == "(555) 123-4567"
    assert document.location == "Austin, TX 78701"
    assert document.summary == (
        "Backend engineer with eight years of experience building payment platforms."
    )
    assert [(e.company, e.title, e.duration) for e in document.experience] == [
        ("Acme Corp", "Senior Engineer", "2020-2023"),
        ("Globex", "Software Engineer", "2016-2020"),
    ]
    assert document.experience[1].bullets == [
        "Built the internal reporting API",
        "Reduced nightly batch time by half",
    ]
    assert [e.model_dump() for e in document.education] == [
        {"degree": "Bachelor of Science", "school": "State University", "year": "2016"},
    ]
    assert [g.model_dump() for g in document.skills] == [
        {"category": "Languages", "items": ["Python", "Go", "SQL"]},
        {"category": "Cloud", "items": ["AWS", "GCP"]},
        {"category": "Technical Skills", "items": ["Kubernetes", "Terraform"]},
    ]


def test_parse_is_idempotent(parser, sample_resume_text):
    first = parser.parse(sample_resume_text)
    second = parser.parse(sample_resume_text)

    assert first == second
    assert first is not second


def test_shared_parser_matches_fresh_instance(sample_resume_text):
    assert parse_resume_content(sample_resume_text) == ResumeParser().parse(sample_resume_text)


def test_empty_input_is_fully_populated(parser):
    document = parser.parse("")

    assert document.model_dump() == {
        "name": "Professional Name",
        "email": "",
        "phone": "",
        "location": "",
        "summary": "",
        "experience": [],
        "education": [],
        "skills": [],
    }


def test_none_input_treated_as_empty(parser):
    assert parser.parse(None) == parser.parse("")


def test_returns_resume_document(parser):
    assert isinstance(parser.parse("Some text"), ResumeDocument)


# Contact


def test_phone_with_country_code(parser):
    assert parser.parse("Call +1 555.123.4567 anytime").phone == "+1 555.123.4567"


def test_phone_with_dashes(parser):
    assert parser.parse("Phone: 555-123-4567").phone == "555-123-4567"


def test_short_digit_runs_are_not_phones(parser):
    assert parser.parse("Employee ID 12345, badge 2020-2023").phone == ""


def test_email_first_match(parser):
    document = parser.parse("primary: a.b@mail.co\nbackup: c@d.org")
    assert document.email == "a.b@mail.co"


def test_location_single_word_city(parser):
    assert parser.parse("Jane Doe\nDenver, CO").location == "Denver, CO"


def test_location_two_word_city(parser):
    assert parser.parse("Jane Doe\nSan Francisco, CA").location == "San Francisco, CA"


def test_location_after_lowercase_lead_in(parser):
    assert parser.parse("Jane Doe\nBased in Austin, TX").location == "Austin, TX"
    assert parser.parse("Remote from Denver, CO").location == "Denver, CO"


def test_location_street_address_pattern():
    match = ResumeParser.LOCATION_PATTERNS[2].search("Office: 42 Elm Road, Boise, ID")
    assert match.group(0) == "42 Elm Road, Boise, ID"


def test_location_first_pattern_wins(parser):
    document = parser.parse("123 Main Street, Springfield, IL")
    assert document.location == "Springfield, IL"


def test_missing_contact_fields_are_empty(parser):
    document = parser.parse("Jane Doe")
    assert (document.email, document.phone, document.location) == ("", "", "")


# Name


def test_name_skips_contact_lines(parser):
    text = "john@x.com\n555-123-4567\nJohn Smith\n"
    assert parser.parse(text).name == "John Smith"


def test_name_all_caps_sequence(parser):
    assert parser.parse("MARY ANN O'NEIL SMITH JONES\n").name == "MARY ANN O'NEIL SMITH JONES"


def test_name_skips_section_headings(parser):
    assert parser.parse("PROFESSIONAL SUMMARY\nJane Roe").name == "Jane Roe"


def test_name_scan_window_is_ten_lines(parser):
    lines = [f"item {i}" for i in range(1, 11)] + ["John Smith"]
    assert parser.parse("\n".join(lines)).name == "Professional Name"


def test_name_ignores_lowercase_lines(parser):
    assert parser.parse("hello there\nsome notes").name == "Professional Name"


# Summary


def test_summary_heading_order_wins_over_document_order(parser):
    text = "OBJECTIVE\nSeeking a backend role.\n\nSUMMARY\nSeasoned engineer.\n"
    assert parser.parse(text).summary == "Seasoned engineer."


def test_summary_inline_after_colon(parser):
    text = "Summary: Builder of reliable systems.\nEXPERIENCE\nAcme | Engineer\n"
    assert parser.parse(text).summary == "Builder of reliable systems."


def test_summary_stops_at_next_heading(parser):
    text = "SUMMARY\nData engineer.\nSKILLS\n• SQL\n"
    assert parser.parse(text).summary == "Data engineer."


def test_summary_fallback_paragraph(parser):
    paragraph = "Operations lead with a record of scaling support teams\nacross three continents."
    text = "Jane Roe\n\n" + paragraph
    assert parser.parse(text).summary == (
        "Operations lead with a record of scaling support teams across three continents."
    )


def test_summary_fallback_truncated(parser):
    paragraph = ("word " * 80).strip()
    document = parser.parse("Jane Roe\n\n" + paragraph)
    assert document.summary == paragraph[:300] + "..."


def test_summary_fallback_requires_long_input(parser):
    assert parser.parse("short resume text here").summary == ""
