"""
Tests for the structured (JSON) short-circuit.
"""
import json

from resume_engine.resumes.structured import load_structured, parse_structured


def test_sparse_object_skips_heuristics(parser):
    document = parser.parse('{"name":"Jane Doe","email":"jane@x.com"}')

    assert document.model_dump() == {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "phone": "",
        "location": "",
        "summary": "",
        "experience": [],
        "education": [],
        "skills": [],
    }


def test_long_sparse_object_gets_no_placeholders(parser):
    text = json.dumps({"email": "a@b.co", "location": "Lisbon " * 30})
    document = parser.parse(text)

    assert len(text) > 100
    assert document.experience == []
    assert document.summary == ""
    assert document.name == "Professional Name"


def test_field_aliases(parser):
    payload = {
        "fullName": "Ann Lee",
        "phoneNumber": "555-0100",
        "address": "Paris",
        "professionalSummary": "Platform engineer.",
        "workExperience": [
            {
                "position": "Developer",
                "company": "Xyz",
                "startDate": "2019",
                "endDate": "2021",
                "description": "• Shipped the API\n• Wrote tests",
            }
        ],
        "education": [{"degree": "BS", "institution": "MIT", "year": 2015}],
        "skills": ["Python", "Go"],
    }
    document = parser.parse(json.dumps(payload))

    assert document.model_dump() == {
        "name": "Ann Lee",
        "email": "",
        "phone": "555-0100",
        "location": "Paris",
        "summary": "Platform engineer.",
        "experience": [
            {
                "title": "Developer",
                "company": "Xyz",
                "duration": "2019 - 2021",
                "bullets": ["Shipped the API", "Wrote tests"],
            }
        ],
        "education": [{"degree": "BS", "school": "MIT", "year": "2015"}],
        "skills": [{"category": "Technical Skills", "items": ["Python", "Go"]}],
    }


def test_first_truthy_alias_wins(parser):
    document = parser.parse(json.dumps({"name": "", "fullName": "B. Ortiz", "summary": "S", "objective": "O"}))

    assert document.name == "B. Ortiz"
    assert document.summary == "S"


def test_skill_groups_and_mapping(parser):
    grouped = parser.parse(json.dumps({"skills": [{"category": "Cloud", "items": ["AWS"]}, "Linux"]}))
    mapped = parser.parse(json.dumps({"skills": {"Languages": ["Python"], "Tools": "Git, Docker"}}))

    assert [g.model_dump() for g in grouped.skills] == [
        {"category": "Cloud", "items": ["AWS"]},
        {"category": "Technical Skills", "items": ["Linux"]},
    ]
    assert [g.model_dump() for g in mapped.skills] == [
        {"category": "Languages", "items": ["Python"]},
        {"category": "Tools", "items": ["Git", "Docker"]},
    ]


def test_non_dict_list_items_skipped(parser):
    document = parser.parse(json.dumps({"experience": ["Acme", {"title": "Dev", "bullets": ["x"]}]}))

    assert [e.model_dump() for e in document.experience] == [
        {"title": "Dev", "company": "", "duration": "", "bullets": ["x"]},
    ]


def test_json_array_falls_through(parser):
    assert load_structured("[1, 2, 3]") is None
    assert parser.parse("[1, 2, 3]").name == "Professional Name"


def test_malformed_json_falls_through():
    assert parse_structured('{"name": "Jane"') is None
    assert parse_structured("") is None
    assert parse_structured("null") is None


def test_malformed_json_uses_heuristics(parser):
    text = '{"name": "Jane"\nEXPERIENCE\nAcme | Engineer\n'
    assert parser.parse(text).experience[0].company == "Acme"
