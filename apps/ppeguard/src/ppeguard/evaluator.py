"""Compliance evaluator.

Compares the categories present in a scene with the categories a
profile requires.

- score: share of required categories observed, rounded half up to an
  integer percentage; 0 for a profile with no requirements
- compliant: a person is present AND no required category is missing

Person presence gates the verdict but never enters the score, so a scene
with full equipment and nobody wearing it scores 100 and still fails.
"""

from __future__ import annotations

import math
from typing import Sequence

from ppeguard.types import ComplianceReport, DetectedItem, PolicyProfile


def compliance_score(detected_required: int, total_required: int) -> int:
    """Integer percentage in [0, 100], rounded half up."""
    if total_required <= 0:
        return 0
    return int(math.floor(100.0 * detected_required / total_required + 0.5))


def evaluate(
    items: Sequence[DetectedItem],
    person_present: bool,
    profile: PolicyProfile,
) -> ComplianceReport:
    """Evaluate normalized items against a policy profile.

    Args:
        items: Output of :func:`ppeguard.normalizer.normalize`.
        person_present: Whether the scene contains a wearer.
        profile: Policy to check against.

    Returns:
        A new ComplianceReport. Inputs are left untouched.
    """
    detected = frozenset(item.category for item in items)
    required = profile.required_categories

    missing = tuple(c for c in required if c not in detected)
    detected_required = sum(1 for c in required if c in detected)

    return ComplianceReport(
        person_present=bool(person_present),
        detected_categories=detected,
        missing_categories=missing,
        score=compliance_score(detected_required, len(required)),
        compliant=bool(person_present) and not missing,
        items=tuple(items),
        profile_name=profile.name,
        total_required=len(required),
        total_detected=detected_required,
    )


__all__ = ["compliance_score", "evaluate"]
