"""ppeguard data types.

Detections flow in from a detector, survive normalization as
DetectedItems, and are folded into a ComplianceReport. Every record is
frozen; a new report is produced for each analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from ppeguard.errors import MalformedDetection

BBox = Tuple[float, float, float, float]

# Stands in for the box when a backend reports no localization.
# It is still four numbers, so every Detection carries a full box.
NO_BBOX: BBox = (0.0, 0.0, 0.0, 0.0)


class ProtectionCategory(str, Enum):
    """Protection categories a policy can require."""

    HEAD = "head_protection"
    VISIBILITY = "visibility"
    EYE = "eye_protection"
    HAND = "hand_protection"
    FOOT = "foot_protection"


class WorkEnvironment(str, Enum):
    """Named work environments with a predefined policy profile."""

    CONSTRUCTION = "construction"
    MANUFACTURING = "manufacturing"
    LABORATORY = "laboratory"
    HEALTHCARE = "healthcare"
    GENERAL = "general"


class RecommendationKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Detection:
    """One raw observation from a detector.

    Attributes:
        label: Recognized class name, e.g. "safety vest".
        confidence: Detection confidence [0, 1].
        bbox: Bounding box (x, y, width, height) in pixels, origin top-left.
            Defaults to ``NO_BBOX`` when the detector gives no box.
    """

    label: str
    confidence: float
    bbox: BBox = NO_BBOX

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Detection:
        """Build a Detection from a mapping.

        Accepts ``label`` or ``class`` for the label and ``bbox`` or
        ``boundingBox`` for the box.

        Raises:
            MalformedDetection: If label or confidence is missing, or the
                box does not have four values.
        """
        label = data.get("label", data.get("class"))
        if label is None:
            raise MalformedDetection("missing label")
        if "confidence" not in data or data["confidence"] is None:
            raise MalformedDetection("missing confidence")

        raw_box = data.get("bbox", data.get("boundingBox", NO_BBOX))
        try:
            box = tuple(float(v) for v in raw_box)
        except (TypeError, ValueError):
            raise MalformedDetection(f"bbox is not numeric: {raw_box!r}")
        if len(box) != 4:
            raise MalformedDetection(f"bbox needs 4 values, got {len(box)}")

        return cls(label=label, confidence=data["confidence"], bbox=box)

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "confidence": self.confidence,
            "bbox": list(self.bbox),
        }


@dataclass(frozen=True)
class CatalogEntry:
    """Reference entry mapping an equipment label to its category.

    ``synonyms`` groups interchangeable labels for display only;
    matching is always an exact lookup on ``label``.
    """

    label: str
    category: ProtectionCategory
    synonyms: frozenset[str] = frozenset()


@dataclass(frozen=True)
class PolicyProfile:
    """Named set of required protection categories, in declared order."""

    name: str
    required_categories: Tuple[ProtectionCategory, ...]


@dataclass(frozen=True)
class DetectedItem:
    """A detection that passed the confidence gate and matched the catalog."""

    label: str
    category: ProtectionCategory
    confidence: float
    bbox: BBox

    def to_detection(self) -> Detection:
        return Detection(label=self.label, confidence=self.confidence, bbox=self.bbox)


@dataclass(frozen=True)
class ComplianceReport:
    """Evaluation of one scene against one policy profile.

    Attributes:
        person_present: Whether a wearer was seen at all.
        detected_categories: Categories observed above threshold.
        missing_categories: Required categories not observed, profile order.
        score: Percentage of required categories observed (0-100).
        compliant: Person present and nothing missing.
        items: Normalized items in detector order.
        profile_name: Name of the profile evaluated against.
        total_required: Number of required categories.
        total_detected: Number of required categories observed.
    """

    person_present: bool
    detected_categories: frozenset[ProtectionCategory]
    missing_categories: Tuple[ProtectionCategory, ...]
    score: int
    compliant: bool
    items: Tuple[DetectedItem, ...] = ()
    profile_name: str = ""
    total_required: int = 0
    total_detected: int = 0


@dataclass(frozen=True)
class Recommendation:
    """One actionable message for the person reviewing the scene."""

    kind: RecommendationKind
    message: str
    priority: Priority


@dataclass(frozen=True)
class ImageInfo:
    """Basic metadata of an analyzed image."""

    width: int
    height: int
    format: Optional[str]
    size: int  # bytes on disk


@dataclass(frozen=True)
class AnalysisResult:
    """Everything produced for one analyzed image."""

    report: ComplianceReport
    recommendations: Tuple[Recommendation, ...]
    detections: Tuple[Detection, ...] = ()
    work_environment: str = WorkEnvironment.GENERAL.value
    timestamp: str = ""
    image_info: Optional[ImageInfo] = None


__all__ = [
    "BBox",
    "NO_BBOX",
    "ProtectionCategory",
    "WorkEnvironment",
    "RecommendationKind",
    "Priority",
    "Detection",
    "CatalogEntry",
    "PolicyProfile",
    "DetectedItem",
    "ComplianceReport",
    "Recommendation",
    "ImageInfo",
    "AnalysisResult",
]
