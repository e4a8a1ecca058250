"""Tests for the recommendation generator."""

from ppeguard.evaluator import evaluate
from ppeguard.policy import resolve
from ppeguard.recommendations import (
    CATEGORY_ACTIONS,
    COMPLIANT_MESSAGE,
    GENERAL_REMINDER,
    NO_PERSON_MESSAGE,
    category_display_name,
    missing_category_message,
    recommend,
)
from ppeguard.types import (
    ComplianceReport,
    DetectedItem,
    Priority,
    ProtectionCategory as PC,
    RecommendationKind as Kind,
)


def _report(person=True, missing=(), compliant=None):
    if compliant is None:
        compliant = person and not missing
    return ComplianceReport(
        person_present=person,
        detected_categories=frozenset(),
        missing_categories=tuple(missing),
        score=0,
        compliant=compliant,
    )


class TestMessages:
    def test_every_category_has_action(self):
        assert set(CATEGORY_ACTIONS) == set(PC)

    def test_display_name_replaces_first_underscore(self):
        assert category_display_name(PC.HEAD) == "head protection"
        assert category_display_name(PC.VISIBILITY) == "visibility"

    def test_missing_message(self):
        assert missing_category_message(PC.FOOT) == (
            "Missing foot protection: Wear safety boots or work boots"
        )


class TestOrdering:
    def test_compliant(self):
        recs = recommend(_report())
        assert [(r.kind, r.priority) for r in recs] == [
            (Kind.SUCCESS, Priority.LOW),
            (Kind.INFO, Priority.MEDIUM),
        ]
        assert recs[0].message == COMPLIANT_MESSAGE
        assert recs[1].message == GENERAL_REMINDER

    def test_missing_in_report_order(self):
        recs = recommend(_report(missing=(PC.HAND, PC.EYE)))
        assert [r.kind for r in recs] == [Kind.WARNING, Kind.WARNING, Kind.INFO]
        assert recs[0].message.startswith("Missing hand protection")
        assert recs[1].message.startswith("Missing eye protection")
        assert all(r.priority == Priority.HIGH for r in recs[:2])

    def test_no_person_first(self):
        recs = recommend(_report(person=False, missing=(PC.HEAD,)))
        assert recs[0].kind == Kind.ERROR
        assert recs[0].priority == Priority.HIGH
        assert recs[0].message == NO_PERSON_MESSAGE
        assert [r.kind for r in recs[1:]] == [Kind.WARNING, Kind.INFO]

    def test_no_person_nothing_missing(self):
        recs = recommend(_report(person=False))
        assert [r.kind for r in recs] == [Kind.ERROR, Kind.INFO]

    def test_info_always_last(self):
        for report in (_report(), _report(person=False), _report(missing=(PC.EYE,))):
            assert recommend(report)[-1].kind == Kind.INFO

    def test_deterministic(self):
        report = evaluate([], True, resolve("manufacturing"))
        assert recommend(report) == recommend(report)


class TestWithEvaluator:
    def test_success_and_warning_exclusive(self):
        for name in ("construction", "laboratory"):
            for person in (True, False):
                items = [
                    DetectedItem("goggles", PC.EYE, 0.9, (0, 0, 1, 1)),
                    DetectedItem("gloves", PC.HAND, 0.9, (0, 0, 1, 1)),
                ]
                kinds = [r.kind for r in recommend(evaluate(items, person, resolve(name)))]
                assert not (Kind.SUCCESS in kinds and Kind.WARNING in kinds)
                assert not (Kind.SUCCESS in kinds and Kind.ERROR in kinds)
