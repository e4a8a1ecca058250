"""JSON export of analysis results.

Enums are written as their string values and tuples as lists, so the
output can be consumed by anything that reads JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ppeguard.types import AnalysisResult, ComplianceReport, DetectedItem, Recommendation


def report_to_dict(report: ComplianceReport) -> Dict[str, Any]:
    """Convert a ComplianceReport to a JSON-serializable dict."""
    # detected_categories is a set; sort for stable output
    return {
        "person_present": report.person_present,
        "compliance_score": report.score,
        "is_compliant": report.compliant,
        "detected_categories": sorted(c.value for c in report.detected_categories),
        "missing_categories": [c.value for c in report.missing_categories],
        "detected_items": [_item_to_dict(item) for item in report.items],
        "total_required": report.total_required,
        "total_detected": report.total_detected,
        "profile": report.profile_name,
    }


def recommendation_to_dict(rec: Recommendation) -> Dict[str, Any]:
    return {"type": rec.kind.value, "message": rec.message, "priority": rec.priority.value}


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    """Convert an AnalysisResult to a JSON-serializable dict."""
    info = result.image_info
    return {
        "image_info": (
            {"width": info.width, "height": info.height, "format": info.format, "size": info.size}
            if info is not None else None
        ),
        "detections": [d.to_dict() for d in result.detections],
        "compliance": report_to_dict(result.report),
        "recommendations": [recommendation_to_dict(r) for r in result.recommendations],
        "work_environment": result.work_environment,
        "timestamp": result.timestamp,
    }


def save_result(result: AnalysisResult, path: str | Path) -> Path:
    """Write an AnalysisResult to a JSON file, creating parent directories.

    Returns:
        The path written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result_to_dict(result), f, indent=2, ensure_ascii=False)
    return path


def _item_to_dict(item: DetectedItem) -> Dict[str, Any]:
    return {
        "item": item.label,
        "category": item.category.value,
        "confidence": item.confidence,
        "bbox": list(item.bbox),
    }


__all__ = ["report_to_dict", "recommendation_to_dict", "result_to_dict", "save_result"]
