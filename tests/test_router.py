import pytest

from fnol.parser import ExtractedFields
from fnol.router import (
    FAST_TRACK,
    INVESTIGATION_FLAG,
    MANUAL_REVIEW,
    ROUTES,
    SPECIALIST_QUEUE,
    STANDARD_REVIEW,
    ClaimRouter,
    format_amount,
)
from fnol.validator import find_missing_fields


def _fields(**overrides):
    values = {
        "claim_type": "Auto",
        "attachments": ["a.jpg"],
        "estimated_damage": "$1,500",
        "initial_estimate": 1500.0,
        "description": "Rear-ended at a stoplight.",
    }
    values.update(overrides)
    return ExtractedFields(**values)


@pytest.fixture
def router():
    return ClaimRouter()


def _route(router, fields):
    return router.route(fields, find_missing_fields(fields))


def test_missing_fields_route_to_manual_review(router):
    fields = _fields(claim_type=None, initial_estimate=None, description="Staged fraud")
    decision = _route(router, fields)

    assert decision.route == MANUAL_REVIEW
    assert decision.reasoning == (
        "Mandatory field(s) are missing or invalid: Claim Type, "
        "Initial Estimate (derived from Estimated Damage). "
        "Claim requires manual data entry and validation."
    )


@pytest.mark.parametrize("description", ["Possible FRAUD here", "Accounts are Inconsistent", "looks staged"])
def test_fraud_keywords_beat_injury_and_amount(router, description):
    fields = _fields(description=description, claim_type="Bodily Injury", initial_estimate=90000.0)
    decision = _route(router, fields)

    assert decision.route == INVESTIGATION_FLAG
    assert "potential fraud" in decision.reasoning


def test_fraud_keywords_only_checked_in_description(router):
    fields = _fields(contact_details="fraud@example.com", location="Staged Rd")
    assert _route(router, fields).route == FAST_TRACK


def test_missing_description_is_not_fraud(router):
    assert _route(router, _fields(description=None)).route == FAST_TRACK


def test_injury_claim_goes_to_specialist(router):
    decision = _route(router, _fields(claim_type="Personal INJURY", initial_estimate=100.0))

    assert decision.route == SPECIALIST_QUEUE
    assert decision.reasoning == "The claim is of type 'Injury' and requires handling by a specialist."


def test_low_estimate_fast_tracks(router):
    decision = _route(router, _fields())

    assert decision.route == FAST_TRACK
    assert decision.reasoning == (
        "The estimated damage of $1500 is below the $25,000 threshold for automated processing."
    )


@pytest.mark.parametrize(
    "estimate, expected",
    [(0.0, FAST_TRACK), (24999.99, FAST_TRACK), (25000.0, STANDARD_REVIEW), (25000.01, STANDARD_REVIEW)],
)
def test_threshold_is_strictly_less_than(router, estimate, expected):
    assert _route(router, _fields(initial_estimate=estimate)).route == expected


def test_standard_review_reasoning(router):
    decision = _route(router, _fields(initial_estimate=50000.0))
    assert decision.reasoning == (
        "The claim does not meet the criteria for any specialized queue. "
        "It will proceed through the standard review process."
    )


def test_custom_threshold_and_currency():
    router = ClaimRouter(threshold=1000, currency="€")
    decision = router.route(_fields(initial_estimate=999.5), [])

    assert decision.route == FAST_TRACK
    assert "€999.5" in decision.reasoning
    assert "€1,000" in decision.reasoning
    assert router.route(_fields(initial_estimate=1500.0), []).route == STANDARD_REVIEW


def test_every_decision_uses_known_route(router):
    samples = [
        _fields(attachments=None),
        _fields(description="fraud"),
        _fields(claim_type="injury"),
        _fields(),
        _fields(initial_estimate=30000.0),
    ]
    assert [_route(router, f).route for f in samples] == list(ROUTES)


def test_matched_rule_names(router):
    assert router.matched_rule(_fields(attachments=None), ["Attachments"]) == "missing_fields"
    assert router.matched_rule(_fields(description="staged"), []) == "fraud_keywords"
    assert router.matched_rule(_fields(claim_type="Injury"), []) == "injury_claim"
    assert router.matched_rule(_fields(), []) == "low_damage"
    assert router.matched_rule(_fields(initial_estimate=30000.0), []) is None


@pytest.mark.parametrize(
    "value, expected",
    [(1500.0, "1500"), (24999.99, "24999.99"), (0.5, "0.5"), (25000.0, "25000")],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected
