"""Recommendation generator.

Order of the returned list:

1. error/high when no person was detected
2. one warning/high per missing category, in report order
3. success/low when the scene is compliant
4. info/medium general reminder, always last
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from ppeguard.types import (
    ComplianceReport,
    Priority,
    ProtectionCategory,
    Recommendation,
    RecommendationKind,
)

NO_PERSON_MESSAGE = (
    "No person detected in the image. "
    "Please ensure the image contains a person for PPE analysis."
)
COMPLIANT_MESSAGE = "Great! All required PPE items are detected and properly worn."
GENERAL_REMINDER = (
    "Always ensure PPE is properly fitted and in good condition before starting work."
)

CATEGORY_ACTIONS: Mapping[ProtectionCategory, str] = MappingProxyType({
    ProtectionCategory.HEAD: "Wear a safety helmet or hard hat",
    ProtectionCategory.VISIBILITY: "Wear a high-visibility safety vest",
    ProtectionCategory.EYE: "Wear safety glasses or protective eyewear",
    ProtectionCategory.HAND: "Wear safety gloves",
    ProtectionCategory.FOOT: "Wear safety boots or work boots",
})


def category_display_name(category: ProtectionCategory) -> str:
    """``head_protection`` -> ``head protection``."""
    return category.value.replace("_", " ", 1)


def missing_category_message(category: ProtectionCategory) -> str:
    return f"Missing {category_display_name(category)}: {CATEGORY_ACTIONS[category]}"


def recommend(report: ComplianceReport) -> List[Recommendation]:
    """Build the prioritized action list for a report."""
    recs: List[Recommendation] = []

    if not report.person_present:
        recs.append(Recommendation(
            kind=RecommendationKind.ERROR,
            message=NO_PERSON_MESSAGE,
            priority=Priority.HIGH,
        ))

    for category in report.missing_categories:
        recs.append(Recommendation(
            kind=RecommendationKind.WARNING,
            message=missing_category_message(category),
            priority=Priority.HIGH,
        ))

    if report.compliant:
        recs.append(Recommendation(
            kind=RecommendationKind.SUCCESS,
            message=COMPLIANT_MESSAGE,
            priority=Priority.LOW,
        ))

    recs.append(Recommendation(
        kind=RecommendationKind.INFO,
        message=GENERAL_REMINDER,
        priority=Priority.MEDIUM,
    ))
    return recs


__all__ = [
    "CATEGORY_ACTIONS",
    "NO_PERSON_MESSAGE",
    "COMPLIANT_MESSAGE",
    "GENERAL_REMINDER",
    "category_display_name",
    "missing_category_message",
    "recommend",
]
