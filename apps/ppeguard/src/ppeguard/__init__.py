"""ppeguard - PPE compliance evaluation for workplace photographs.

Turns labeled, confidence-scored detections into a compliance verdict,
a 0-100 score and a prioritized list of corrective actions for a given
work environment.

Quick Start:
    >>> from ppeguard import Detection, normalize, detect_person, evaluate, recommend, resolve
    >>> dets = [Detection("person", 0.95), Detection("helmet", 0.88)]
    >>> report = evaluate(normalize(dets), detect_person(dets), resolve("construction"))
    >>> print(f"Score: {report.score}, compliant: {report.compliant}")
    Score: 20, compliant: False
    >>> [r.kind.value for r in recommend(report)][:2]
    ['warning', 'warning']
"""

from ppeguard.types import (
    AnalysisResult,
    CatalogEntry,
    ComplianceReport,
    DetectedItem,
    Detection,
    ImageInfo,
    PolicyProfile,
    Priority,
    ProtectionCategory,
    Recommendation,
    RecommendationKind,
    WorkEnvironment,
)
from ppeguard.errors import (
    ConfigError,
    ImageNotFound,
    ImageProbeError,
    InvalidProfile,
    MalformedDetection,
    PPEGuardError,
)
from ppeguard.catalog import DEFAULT_CATALOG, EquipmentCatalog
from ppeguard.policy import DEFAULT_REGISTRY, PolicyRegistry, resolve
from ppeguard.normalizer import detect_person, normalize
from ppeguard.evaluator import evaluate
from ppeguard.recommendations import recommend
from ppeguard.detector import Detector, MockDetector
from ppeguard.config import AnalysisConfig, load_config
from ppeguard.analyzer import ComplianceAnalyzer
from ppeguard.persistence import result_to_dict, save_result

__version__ = "0.1.0"

__all__ = [
    # core
    "normalize",
    "detect_person",
    "evaluate",
    "recommend",
    "resolve",
    # types
    "Detection",
    "DetectedItem",
    "CatalogEntry",
    "PolicyProfile",
    "ComplianceReport",
    "Recommendation",
    "RecommendationKind",
    "Priority",
    "ProtectionCategory",
    "WorkEnvironment",
    "ImageInfo",
    "AnalysisResult",
    # reference data
    "EquipmentCatalog",
    "DEFAULT_CATALOG",
    "PolicyRegistry",
    "DEFAULT_REGISTRY",
    # collaborators
    "Detector",
    "MockDetector",
    "AnalysisConfig",
    "load_config",
    "ComplianceAnalyzer",
    "result_to_dict",
    "save_result",
    # errors
    "PPEGuardError",
    "MalformedDetection",
    "InvalidProfile",
    "ConfigError",
    "ImageNotFound",
    "ImageProbeError",
]
