"""
Claim Processor
Runs field extraction, completeness checking and routing over one FNOL
document and assembles the result returned to callers.
"""
import re
from dataclasses import dataclass
from typing import List

from fnol.parser import ExtractedFields, extract_fields
from fnol.router import ClaimRouter, RoutingDecision
from fnol.validator import find_missing_fields


def format_field_name(key: str) -> str:
    """Display label for an output key: "policyNumber" -> "Policy Number"."""
    spaced = re.sub(r'([A-Z])', r' \1', key)
    return spaced[:1].upper() + spaced[1:]


@dataclass(frozen=True)
class ProcessingResult:
    fields: ExtractedFields
    missing_fields: List[str]
    decision: RoutingDecision

    @property
    def display_fields(self) -> dict:
        """Extracted fields without the derived numeric estimate."""
        return self.fields.to_dict(include_estimate=False)

    def to_dict(self) -> dict:
        return {
            'extractedFields': self.display_fields,
            'missingFields': list(self.missing_fields),
            'recommendedRoute': self.decision.route,
            'reasoning': self.decision.reasoning,
        }


class ClaimProcessor:
    """Turns raw FNOL text into a ProcessingResult."""

    def __init__(self, router: ClaimRouter = None):
        self.router = router or ClaimRouter()

    def process(self, text: str) -> ProcessingResult:
        fields = extract_fields(text)
        missing = find_missing_fields(fields)
        decision = self.router.route(fields, missing)
        return ProcessingResult(fields=fields, missing_fields=missing, decision=decision)


def process_fnol(text: str) -> dict:
    """Process one document with the default router and return the output record."""
    return ClaimProcessor().process(text).to_dict()
