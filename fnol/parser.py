"""
FNOL Field Parser
Extracts structured fields from "- Label: value" lines of a FNOL document.
"""
import re
from dataclasses import dataclass, fields as dataclass_fields
from typing import List, Optional


# Attribute name -> label as it appears in the document
FIELD_LABELS = {
    "policy_number": "Policy Number",
    "policyholder_name": "Policyholder Name",
    "effective_dates": "Effective Dates",
    "incident_date": "Date",
    "incident_time": "Time",
    "location": "Location",
    "description": "Description",
    "claimant": "Claimant",
    "third_parties": "Third Parties",
    "contact_details": "Contact Details",
    "asset_type": "Asset Type",
    "asset_id": "Asset ID",
    "estimated_damage": "Estimated Damage",
    "claim_type": "Claim Type",
    "attachments": "Attachments",
}

_NUMBER_PREFIX = re.compile(r'\d+(?:\.\d*)?|\.\d+')
_LINE_BREAK = re.compile(r'\r\n?')


@dataclass(frozen=True)
class ExtractedFields:
    """Fields pulled from one FNOL document. None means the field was not found."""

    policy_number: Optional[str] = None
    policyholder_name: Optional[str] = None
    effective_dates: Optional[str] = None
    incident_date: Optional[str] = None
    incident_time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    claimant: Optional[str] = None
    third_parties: Optional[str] = None
    contact_details: Optional[str] = None
    asset_type: Optional[str] = None
    asset_id: Optional[str] = None
    estimated_damage: Optional[str] = None
    claim_type: Optional[str] = None
    attachments: Optional[List[str]] = None
    # Derived from estimated_damage, never read from the document
    initial_estimate: Optional[float] = None

    def to_dict(self, include_estimate: bool = False) -> dict:
        """Serialize with camelCase keys, e.g. policy_number -> policyNumber."""
        result = {}
        for f in dataclass_fields(self):
            if f.name == "initial_estimate" and not include_estimate:
                continue
            value = getattr(self, f.name)
            if isinstance(value, list):
                value = list(value)
            result[to_camel_case(f.name)] = value
        return result


def to_camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def extract_field(text: str, label: str) -> Optional[str]:
    """
    Return the value of the first "- <label>: <value>" line in text.

    Matching is case-insensitive and anchored to the start of a line
    (leading spaces allowed). The value is stripped; an empty value
    counts as not found.
    """
    # CR and CRLF line breaks count as line boundaries too
    text = _LINE_BREAK.sub("\n", text)
    pattern = re.compile(
        r'^[ \t]*-[ \t]*' + re.escape(label) + r':[ \t]*([^\r\n]*)',
        re.IGNORECASE | re.MULTILINE,
    )
    m = pattern.search(text)
    if not m:
        return None
    value = m.group(1).strip()
    return value or None


def split_attachments(raw: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated attachment list. Returns None rather than []."""
    if raw is None:
        return None
    names = [part.strip() for part in raw.split(',')]
    names = [name for name in names if name]
    return names or None


def parse_estimate(raw: Optional[str]) -> Optional[float]:
    """
    Convert a damage string such as "$1,500" or "25000 USD" to a float.

    Everything except digits and '.' is dropped, then the longest leading
    number is parsed ("1.2.3" -> 1.2). Returns None when nothing parses.
    """
    if raw is None:
        return None
    numeric = re.sub(r'[^0-9.]', '', raw)
    m = _NUMBER_PREFIX.match(numeric)
    if not m:
        return None
    return float(m.group(0))


def extract_fields(text: str) -> ExtractedFields:
    """Extract every known field from a FNOL document."""
    values = {name: extract_field(text, label) for name, label in FIELD_LABELS.items()}
    values["attachments"] = split_attachments(values["attachments"])
    values["initial_estimate"] = parse_estimate(values["estimated_damage"])
    return ExtractedFields(**values)
