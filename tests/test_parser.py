import pytest

from fnol.parser import (
    FIELD_LABELS,
    ExtractedFields,
    extract_field,
    extract_fields,
    parse_estimate,
    split_attachments,
)


def test_extract_field_returns_trimmed_value():
    text = "Header\n  - Policy Number:   POL-1   \n"
    assert extract_field(text, "Policy Number") == "POL-1"


def test_extract_field_is_case_insensitive():
    assert extract_field("- CLAIM TYPE: Auto", "Claim Type") == "Auto"
    assert extract_field("- claim type: Auto", "Claim Type") == "Auto"


def test_extract_field_requires_list_marker():
    assert extract_field("Claim Type: Auto", "Claim Type") is None


def test_extract_field_anchored_to_line_start():
    text = "- Incident Date: 01/02/2026\n- Notes: see Date: 02/02/2026\n"
    assert extract_field(text, "Date") is None


def test_extract_field_first_match_wins():
    text = "- Location: First St\n- Location: Second St\n"
    assert extract_field(text, "Location") == "First St"


def test_extract_field_empty_value_is_absent():
    text = "- Claim Type:   \n- Attachments: a.jpg\n"
    assert extract_field(text, "Claim Type") is None


def test_extract_field_does_not_read_next_line():
    text = "- Claim Type:\nInjury\n"
    assert extract_field(text, "Claim Type") is None


def test_extract_field_escapes_label_punctuation():
    assert extract_field("- Asset ID: VIN-9", "Asset ID") == "VIN-9"
    assert extract_field("- Amount (USD): 12", "Amount (USD)") == "12"
    # "." in a label must not match an arbitrary character
    assert extract_field("- VxIxN: 12", "V.I.N") is None


def test_extract_field_handles_crlf():
    assert extract_field("- Claim Type: Auto\r\n- Time: 9 AM\r\n", "Claim Type") == "Auto"


def test_extract_field_handles_cr_only_line_breaks():
    text = "- Claim Type: Auto\r- Attachments: a.jpg\r- Estimated Damage: $1,500\r"

    assert extract_field(text, "Claim Type") == "Auto"
    assert extract_field(text, "Attachments") == "a.jpg"
    fields = extract_fields(text)
    assert fields.attachments == ["a.jpg"]
    assert fields.initial_estimate == 1500.0


def test_split_attachments():
    assert split_attachments("a.jpg, b.pdf ,c.txt") == ["a.jpg", "b.pdf", "c.txt"]
    assert split_attachments("single.pdf") == ["single.pdf"]
    assert split_attachments(None) is None
    assert split_attachments(" , ") is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$1,500", 1500.0),
        ("25,000", 25000.0),
        ("24,999.99", 24999.99),
        ("USD 8500 approx", 8500.0),
        ("1.2.3", 1.2),
        (".5", 0.5),
        ("7.", 7.0),
    ],
)
def test_parse_estimate(raw, expected):
    assert parse_estimate(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "pending", "$", "."])
def test_parse_estimate_absent(raw):
    assert parse_estimate(raw) is None


def test_extract_fields_round_trip(make_document, complete_values):
    fields = extract_fields(make_document())

    for name in FIELD_LABELS:
        if name == "attachments":
            assert fields.attachments == ["a.jpg", "b.pdf"]
        else:
            assert getattr(fields, name) == complete_values[name], name
    assert fields.initial_estimate == 1500.0


def test_extract_fields_from_empty_text():
    fields = extract_fields("")
    assert fields == ExtractedFields()
    assert all(value is None for value in fields.to_dict(include_estimate=True).values())


def test_unparseable_estimate_keeps_raw_string(make_document):
    fields = extract_fields(make_document(estimated_damage="to be assessed"))
    assert fields.estimated_damage == "to be assessed"
    assert fields.initial_estimate is None


def test_to_dict_uses_camel_case_keys(make_document):
    data = extract_fields(make_document()).to_dict()

    assert "initialEstimate" not in data
    assert data["policyNumber"] == "POL-123-XYZ"
    assert data["assetId"] == "1HGCM82633A004352"
    assert data["attachments"] == ["a.jpg", "b.pdf"]
    assert len(data) == len(FIELD_LABELS)
