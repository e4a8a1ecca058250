"""Detector protocol and a mock implementation.

A real detector (a trained PPE model, a cloud vision API, ...) only has
to implement :class:`Detector`. All randomness stays here so that the
normalizer and evaluator remain deterministic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

import numpy as np

from ppeguard.types import Detection

logger = logging.getLogger(__name__)

# Fixed scene: one fully equipped worker.
MOCK_SCENE: tuple[Detection, ...] = (
    Detection("person", 0.95, (100.0, 50.0, 200.0, 400.0)),
    Detection("helmet", 0.88, (120.0, 60.0, 80.0, 60.0)),
    Detection("safety vest", 0.92, (110.0, 120.0, 180.0, 120.0)),
    Detection("gloves", 0.75, (80.0, 350.0, 60.0, 40.0)),
    Detection("safety glasses", 0.82, (140.0, 100.0, 60.0, 20.0)),
    Detection("boots", 0.78, (130.0, 420.0, 80.0, 60.0)),
)

JITTER_MIN_CONF = 0.3
JITTER_MAX_CONF = 0.99


class Detector(Protocol):
    """Protocol for detection backends.

    Implementations should be swappable without changing the
    compliance logic.
    """

    def detect(self, image_path: str | Path) -> List[Detection]:
        """Detect persons and PPE items in a still image."""
        ...


class MockDetector:
    """Returns a fixed scene with random confidence jitter.

    Each call perturbs every confidence by a uniform offset in
    ``[-jitter/2, jitter/2)`` and clamps the result to [0.3, 0.99].
    Labels and boxes never change.

    Args:
        seed: Seed for the random generator (default: None).
        jitter: Total width of the jitter window (default: 0.2). 0 disables it.
        detections: Scene to return (default: MOCK_SCENE).

    Example:
        >>> detector = MockDetector(seed=7)
        >>> [d.label for d in detector.detect("site.jpg")][:2]
        ['person', 'helmet']
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        jitter: float = 0.2,
        detections: Optional[Sequence[Detection]] = None,
    ):
        if jitter < 0:
            raise ValueError(f"jitter must be >= 0, got {jitter}")
        if seed is not None and seed < 0:
            raise ValueError(f"seed must be >= 0, got {seed}")
        self._rng = np.random.default_rng(seed)
        self._jitter = jitter
        self._scene = tuple(detections) if detections is not None else MOCK_SCENE

    @property
    def name(self) -> str:
        return "mock"

    def detect(self, image_path: str | Path) -> List[Detection]:
        if self._jitter == 0:
            return list(self._scene)

        base = np.array([d.confidence for d in self._scene], dtype=np.float64)
        offsets = (self._rng.random(len(base)) - 0.5) * self._jitter
        confs = np.clip(base + offsets, JITTER_MIN_CONF, JITTER_MAX_CONF)

        detections = [
            Detection(label=d.label, confidence=float(c), bbox=d.bbox)
            for d, c in zip(self._scene, confs)
        ]
        logger.debug("mock detect %s: %d detections", image_path, len(detections))
        return detections


__all__ = ["Detector", "MockDetector", "MOCK_SCENE"]
