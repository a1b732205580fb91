"""
Field Validator
Checks an extracted FNOL record for missing mandatory fields.
"""
from typing import List

from fnol.parser import ExtractedFields


# Checked in this order; the names are shown to users as-is
MANDATORY_FIELDS = [
    ("claim_type", "Claim Type"),
    ("attachments", "Attachments"),
    ("initial_estimate", "Initial Estimate (derived from Estimated Damage)"),
]


def find_missing_fields(fields: ExtractedFields) -> List[str]:
    """Return the display names of absent mandatory fields, in check order."""
    return [name for attr, name in MANDATORY_FIELDS if getattr(fields, attr) is None]
