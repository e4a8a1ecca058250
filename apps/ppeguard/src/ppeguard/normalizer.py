"""Detection normalizer.

Turns raw detector output into catalog-resolved DetectedItems:

1. every detection is validated (label and confidence present,
   confidence in [0, 1]); one bad detection rejects the whole batch
2. detections at or below the confidence threshold are dropped
3. labels missing from the catalog are dropped as noise

Order is preserved and repeated categories are kept as separate items.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import List, Optional, Sequence

from ppeguard.catalog import DEFAULT_CATALOG, EquipmentCatalog
from ppeguard.errors import MalformedDetection
from ppeguard.types import Detection, DetectedItem

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 0.5


def validate_detection(detection: Detection, index: Optional[int] = None) -> None:
    """Check one detection, raising MalformedDetection if it is unusable."""
    label = getattr(detection, "label", None)
    if not isinstance(label, str) or not label:
        raise MalformedDetection("missing label", index=index)

    conf = getattr(detection, "confidence", None)
    if conf is None:
        raise MalformedDetection("missing confidence", index=index)
    # bool is an int subclass; True would silently read as 1.0
    if isinstance(conf, bool) or not isinstance(conf, Real):
        raise MalformedDetection(f"confidence is not a number: {conf!r}", index=index)
    if math.isnan(conf) or not (0.0 <= conf <= 1.0):
        raise MalformedDetection(f"confidence {conf} outside [0, 1]", index=index)


def normalize(
    detections: Sequence[Detection],
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    catalog: EquipmentCatalog = DEFAULT_CATALOG,
) -> List[DetectedItem]:
    """Filter and resolve detections against the catalog.

    Args:
        detections: Raw detections in detector order.
        confidence_threshold: Detections must score strictly above this.
        catalog: Label -> category table.

    Returns:
        DetectedItems in input order.

    Raises:
        MalformedDetection: If any detection is malformed. Nothing is
            returned in that case.
    """
    for i, det in enumerate(detections):
        validate_detection(det, index=i)

    items: List[DetectedItem] = []
    for det in detections:
        if det.confidence <= confidence_threshold:
            logger.debug("drop %r: conf=%.3f <= %.3f", det.label, det.confidence, confidence_threshold)
            continue
        entry = catalog.lookup(det.label)
        if entry is None:
            logger.debug("drop %r: not in catalog", det.label)
            continue
        items.append(DetectedItem(
            label=det.label,
            category=entry.category,
            confidence=det.confidence,
            bbox=det.bbox,
        ))
    return items


def detect_person(
    detections: Sequence[Detection],
    catalog: EquipmentCatalog = DEFAULT_CATALOG,
    confidence_threshold: Optional[float] = None,
) -> bool:
    """Whether any detection is a person.

    By default any person detection counts, whatever its confidence.
    With ``confidence_threshold`` set, the same strict greater-than rule
    as :func:`normalize` applies.
    """
    for i, det in enumerate(detections):
        validate_detection(det, index=i)

    return any(
        catalog.is_person(det.label)
        and (confidence_threshold is None or det.confidence > confidence_threshold)
        for det in detections
    )


__all__ = [
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "validate_detection",
    "normalize",
    "detect_person",
]
