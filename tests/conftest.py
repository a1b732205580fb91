import pytest

from fnol.parser import FIELD_LABELS


@pytest.fixture
def complete_values():
    return {
        "policy_number": "POL-123-XYZ",
        "policyholder_name": "John Doe",
        "effective_dates": "01/01/2025 to 31/12/2025",
        "incident_date": "01/15/2026",
        "incident_time": "10:30 AM",
        "location": "Anytown, CA, 90210",
        "description": "Rear-ended at a stoplight on Main St.",
        "claimant": "John Doe",
        "third_parties": "Jane Smith",
        "contact_details": "555-0100, john@example.com",
        "asset_type": "Vehicle",
        "asset_id": "1HGCM82633A004352",
        "estimated_damage": "$1,500",
        "claim_type": "Auto",
        "attachments": "a.jpg, b.pdf",
    }


@pytest.fixture
def make_document(complete_values):
    """Build "- Label: value" text; keyword overrides of None drop the line."""
    def _factory(**overrides):
        values = dict(complete_values, **overrides)
        lines = ["FIRST NOTICE OF LOSS", ""]
        for name, label in FIELD_LABELS.items():
            if values.get(name) is not None:
                lines.append(f"- {label}: {values[name]}")
        return "\n".join(lines) + "\n"

    return _factory
