"""
Claim Router
Routes claims to the appropriate workflow based on extraction and validation results.

Priority Order (highest to lowest, first match wins):
1. Manual Review       → Any mandatory field is missing
2. Investigation Flag  → Fraud keywords detected in description
3. Specialist Queue    → Claim type mentions injury
4. Fast-track          → Estimated damage below $25,000
5. Standard Review     → Default route for everything else
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from config import Config
from fnol.parser import ExtractedFields


MANUAL_REVIEW = "Manual Review"
INVESTIGATION_FLAG = "Investigation Flag"
SPECIALIST_QUEUE = "Specialist Queue"
FAST_TRACK = "Fast-track"
STANDARD_REVIEW = "Standard Review"

ROUTES = (MANUAL_REVIEW, INVESTIGATION_FLAG, SPECIALIST_QUEUE, FAST_TRACK, STANDARD_REVIEW)

FRAUD_KEYWORDS = ["fraud", "inconsistent", "staged"]

INJURY_KEYWORD = "injury"


@dataclass(frozen=True)
class RoutingDecision:
    route: str
    reasoning: str


def format_amount(value: float) -> str:
    """Render 1500.0 as "1500" and 24999.99 as "24999.99"."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


# (name, condition, build decision) evaluated top to bottom
Rule = Tuple[str, Callable[[ExtractedFields, List[str]], bool],
             Callable[[ExtractedFields, List[str]], RoutingDecision]]


class ClaimRouter:
    """Routes insurance claims to the appropriate processing workflow."""

    def __init__(self, threshold: Optional[float] = None, currency: Optional[str] = None):
        self.threshold = Config.FAST_TRACK_THRESHOLD if threshold is None else threshold
        self.currency = Config.CURRENCY_SYMBOL if currency is None else currency
        self.rules: List[Rule] = [
            ("missing_fields", self._has_missing_fields, self._manual_review),
            ("fraud_keywords", self._has_fraud_keywords, self._investigation),
            ("injury_claim", self._is_injury_claim, self._specialist),
            ("low_damage", self._is_below_threshold, self._fast_track),
        ]

    def route(self, fields: ExtractedFields, missing_fields: List[str]) -> RoutingDecision:
        """Return the decision of the first rule whose condition holds."""
        for _name, condition, decide in self.rules:
            if condition(fields, missing_fields):
                return decide(fields, missing_fields)
        return RoutingDecision(
            STANDARD_REVIEW,
            "The claim does not meet the criteria for any specialized queue. "
            "It will proceed through the standard review process.",
        )

    def matched_rule(self, fields: ExtractedFields, missing_fields: List[str]) -> Optional[str]:
        """Name of the rule that decides this claim, or None for the default route."""
        for name, condition, _decide in self.rules:
            if condition(fields, missing_fields):
                return name
        return None

    # --- Conditions ---

    @staticmethod
    def _has_missing_fields(fields, missing_fields):
        return len(missing_fields) > 0

    @staticmethod
    def _has_fraud_keywords(fields, missing_fields):
        description = (fields.description or "").lower()
        return any(kw in description for kw in FRAUD_KEYWORDS)

    @staticmethod
    def _is_injury_claim(fields, missing_fields):
        return INJURY_KEYWORD in (fields.claim_type or "").lower()

    def _is_below_threshold(self, fields, missing_fields):
        # initial_estimate is present here: the missing_fields rule runs first
        return fields.initial_estimate < self.threshold

    # --- Decisions ---

    @staticmethod
    def _manual_review(fields, missing_fields):
        return RoutingDecision(
            MANUAL_REVIEW,
            f"Mandatory field(s) are missing or invalid: {', '.join(missing_fields)}. "
            "Claim requires manual data entry and validation.",
        )

    @staticmethod
    def _investigation(fields, missing_fields):
        return RoutingDecision(
            INVESTIGATION_FLAG,
            "The claim description contains keywords suggesting potential fraud. "
            "It will be routed to the special investigation unit.",
        )

    @staticmethod
    def _specialist(fields, missing_fields):
        return RoutingDecision(
            SPECIALIST_QUEUE,
            "The claim is of type 'Injury' and requires handling by a specialist.",
        )

    def _fast_track(self, fields, missing_fields):
        return RoutingDecision(
            FAST_TRACK,
            f"The estimated damage of {self.currency}{format_amount(fields.initial_estimate)} "
            f"is below the {self.currency}{self.threshold:,} threshold for automated processing.",
        )
