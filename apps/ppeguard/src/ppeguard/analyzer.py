"""Compliance analyzer: wires detector, normalizer, evaluator and
recommendation generator together.

Example:
    >>> from ppeguard import ComplianceAnalyzer, MockDetector
    >>> analyzer = ComplianceAnalyzer(detector=MockDetector(seed=0))
    >>> result = analyzer.analyze_image("site.jpg", work_environment="laboratory")
    >>> result.report.profile_name
    'laboratory'
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from ppeguard.catalog import EquipmentCatalog
from ppeguard.config import AnalysisConfig
from ppeguard.detector import Detector, MockDetector
from ppeguard.evaluator import evaluate
from ppeguard.imageinfo import probe_image
from ppeguard.normalizer import detect_person, normalize
from ppeguard.policy import PolicyRegistry
from ppeguard.recommendations import recommend
from ppeguard.types import AnalysisResult, Detection, ImageInfo

logger = logging.getLogger(__name__)


class ComplianceAnalyzer:
    """Runs one PPE compliance analysis per call.

    Holds only its injected collaborators; nothing carries over from
    one call to the next apart from the detector's own state.

    Args:
        detector: Detection backend (default: MockDetector seeded from config).
        config: Analysis settings (default: AnalysisConfig()).
        catalog: Equipment catalog (default: built from config).
        registry: Policy registry (default: built from config).
    """

    def __init__(
        self,
        detector: Optional[Detector] = None,
        config: Optional[AnalysisConfig] = None,
        catalog: Optional[EquipmentCatalog] = None,
        registry: Optional[PolicyRegistry] = None,
    ):
        self.config = config or AnalysisConfig()
        self.detector = detector or MockDetector(
            seed=self.config.detector_seed,
            jitter=self.config.detector_jitter,
        )
        self.catalog = catalog if catalog is not None else self.config.build_catalog()
        self.registry = registry if registry is not None else self.config.build_registry()

    def analyze_detections(
        self,
        detections: Sequence[Detection],
        work_environment: Optional[str] = None,
        image_info: Optional[ImageInfo] = None,
    ) -> AnalysisResult:
        """Evaluate an already-detected scene.

        Raises:
            MalformedDetection: If any detection is malformed.
            InvalidProfile: If strict profiles are enabled and the
                environment is unknown.
        """
        cfg = self.config
        env = work_environment or cfg.work_environment
        profile = self.registry.resolve(env, strict=cfg.strict_profiles)

        items = normalize(detections, cfg.confidence_threshold, self.catalog)
        person = detect_person(detections, self.catalog, cfg.person_threshold)
        report = evaluate(items, person, profile)
        recs = recommend(report)

        logger.info(
            "PPE analysis [%s]: score=%d compliant=%s person=%s missing=%s",
            profile.name, report.score, report.compliant, report.person_present,
            [c.value for c in report.missing_categories] or "none",
        )
        logger.debug(
            "%d detections -> %d items (threshold=%.2f)",
            len(detections), len(items), cfg.confidence_threshold,
        )

        return AnalysisResult(
            report=report,
            recommendations=tuple(recs),
            detections=tuple(detections),
            work_environment=env.value if hasattr(env, "value") else str(env),
            timestamp=datetime.now(timezone.utc).isoformat(),
            image_info=image_info,
        )

    def analyze_image(
        self,
        image_path: str | Path,
        work_environment: Optional[str] = None,
    ) -> AnalysisResult:
        """Probe the image, run the detector and evaluate the result.

        Raises:
            ImageNotFound: If the image does not exist.
            ImageProbeError: If the image cannot be read.
        """
        info = probe_image(image_path)
        logger.debug("image %s: %dx%d %s, %d bytes", image_path, info.width, info.height, info.format, info.size)
        detections = self.detector.detect(image_path)
        return self.analyze_detections(detections, work_environment, image_info=info)


__all__ = ["ComplianceAnalyzer"]
